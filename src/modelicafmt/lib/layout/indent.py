"""Block-structure reindentation for Modelica sources."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from modelicafmt.lib.layout.lexer import LineScan, Mode, scan_line

INDENT = "  "

_CLASS_PREFIXES = (
    "encapsulated",
    "partial",
    "final",
    "replaceable",
    "redeclare",
    "inner",
    "outer",
    "expandable",
    "pure",
    "impure",
)
_CLASS_KINDS = (
    "operator record",
    "operator function",
    "model",
    "class",
    "package",
    "function",
    "record",
    "block",
    "connector",
    "type",
    "operator",
)
_CLASS_HEADER = re.compile(
    r"^(?:(?:" + "|".join(_CLASS_PREFIXES) + r")\s+)*"
    r"(?:" + "|".join(kind.replace(" ", r"\s+") for kind in _CLASS_KINDS) + r")\s+"
    r"(?:extends\s+)?(?P<name>[A-Za-z_]\w*|'[^']*')(?P<rest>.*)$"
)
_BLOCK_HEADER_START = re.compile(r"^(?:if|when|for|while)\b")
_BLOCK_HEADER_END = re.compile(r"\b(?:then|loop)$")
_BRANCH_HEADER = re.compile(r"^(?:elseif|elsewhen)\b")
_ELSE = re.compile(r"^else\b")
_END = re.compile(r"^end\b")
_SECTIONS = frozenset(
    {"equation", "algorithm", "initial equation", "initial algorithm", "public", "protected"}
)
# Code left on a line holding only a comment or a description string.
_NON_STATEMENT_CODE = frozenset({"", '"', '""'})


class LineKind(StrEnum):
    BLANK = "blank"
    VERBATIM = "verbatim"
    STRUCTURE = "structure"
    STATEMENT = "statement"
    COMMENT = "comment"


@dataclass(frozen=True, slots=True)
class LayoutLine:
    """One output line before wrapping."""

    kind: LineKind
    text: str
    level: int = 0
    continued: bool = False
    breakable: bool = True

    @property
    def wrappable(self) -> bool:
        return self.kind is LineKind.STATEMENT and self.breakable

    def render(self) -> str:
        if self.kind is LineKind.VERBATIM:
            return self.text
        if self.kind is LineKind.BLANK:
            return ""
        return INDENT * self.level + self.text


class _Pending(StrEnum):
    NONE = "none"
    STATEMENT = "statement"
    HEADER = "header"


def _is_class_header(code: str) -> bool:
    match = _CLASS_HEADER.match(code)
    if match is None:
        return False
    rest = match.group("rest").strip()
    if rest.startswith("="):
        return False
    # A definition closed on its own line, e.g. `record R end R;`.
    return re.search(r"\bend\s+" + re.escape(match.group("name")) + r"\s*;", rest) is None


class Reindenter:
    """Assign an indentation level to each line of a source, in order.

    Statements that span lines (no terminating ``;`` at bracket depth zero, or
    a block header still waiting for ``then``/``loop``) indent their
    continuation lines one level deeper than their first line.
    """

    def __init__(self) -> None:
        self._mode = Mode.CODE
        self._level = 0
        self._brackets = 0
        self._pending = _Pending.NONE
        self._header_opens = False
        self._continuation_level = 1

    @property
    def mode(self) -> Mode:
        return self._mode

    def feed(self, raw: str) -> LayoutLine:
        scan = scan_line(raw, self._mode)
        self._mode = scan.end_mode
        try:
            return self._layout(raw, scan)
        finally:
            self._brackets = max(self._brackets + scan.bracket_delta, 0)

    def _layout(self, raw: str, scan: LineScan) -> LayoutLine:
        if scan.start_mode is not Mode.CODE:
            self._track_pending(scan)
            text = raw if scan.end_mode is Mode.STRING else raw.rstrip()
            return LayoutLine(LineKind.VERBATIM, text)

        text = raw.lstrip() if scan.end_mode is Mode.STRING else raw.strip()
        if not text:
            return LayoutLine(LineKind.BLANK, "")

        if self._pending is not _Pending.NONE:
            self._track_pending(scan)
            return LayoutLine(
                LineKind.STATEMENT, text, self._continuation_level, continued=True
            )

        code = scan.code
        if code in _NON_STATEMENT_CODE:
            return LayoutLine(LineKind.COMMENT, text, self._level)

        if " ".join(code.split()) in _SECTIONS:
            return LayoutLine(LineKind.STRUCTURE, text, max(self._level - 1, 0))
        if _END.match(code):
            self._level = max(self._level - 1, 0)
            return LayoutLine(LineKind.STRUCTURE, text, self._level)
        if _BRANCH_HEADER.match(code):
            level = max(self._level - 1, 0)
            self._start_pending(_Pending.HEADER, level, opens=False)
            self._track_pending(scan)
            return LayoutLine(LineKind.STRUCTURE, text, level)
        if _ELSE.match(code):
            return LayoutLine(LineKind.STRUCTURE, text, max(self._level - 1, 0))
        if _is_class_header(code):
            level = self._level
            self._level += 1
            return LayoutLine(LineKind.STRUCTURE, text, level)
        if _BLOCK_HEADER_START.match(code):
            level = self._level
            self._start_pending(_Pending.HEADER, level, opens=True)
            self._track_pending(scan)
            return LayoutLine(LineKind.STRUCTURE, text, level)

        self._start_pending(_Pending.STATEMENT, self._level, opens=False)
        self._track_pending(scan)
        # Short class definitions would read as class headers once split.
        breakable = _CLASS_HEADER.match(code) is None
        return LayoutLine(LineKind.STATEMENT, text, self._level, breakable=breakable)

    def _start_pending(self, pending: _Pending, level: int, *, opens: bool) -> None:
        self._pending = pending
        self._header_opens = opens
        self._continuation_level = level + 1

    def _track_pending(self, scan: LineScan) -> None:
        if self._pending is _Pending.NONE or scan.end_mode is not Mode.CODE:
            return
        if self._brackets + scan.bracket_delta > 0:
            return
        if self._pending is _Pending.HEADER and _BLOCK_HEADER_END.search(scan.code):
            self._pending = _Pending.NONE
            if self._header_opens:
                self._level += 1
        elif scan.code.endswith(";"):
            # Also closes one-line blocks such as `if c then x := 1; end if;`.
            self._pending = _Pending.NONE
