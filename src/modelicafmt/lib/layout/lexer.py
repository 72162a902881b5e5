"""Line-oriented scanner that separates Modelica code from strings and comments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Mode(StrEnum):
    CODE = "code"
    BLOCK_COMMENT = "block_comment"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class LineScan:
    """What one physical line contributes to the layout state."""

    start_mode: Mode
    end_mode: Mode
    # Code with string bodies emptied and comments removed.
    code: str
    bracket_delta: int
    # Split offsets: head is text[:k].rstrip(), tail is text[k:].lstrip().
    breaks: tuple[int, ...]


_OPENERS = frozenset("([{")
_CLOSERS = frozenset(")]}")


def scan_line(text: str, mode: Mode = Mode.CODE) -> LineScan:
    """Scan ``text`` starting in ``mode``.

    Double-quoted strings may span lines; quoted identifiers (``'a b'``) may not.
    Break offsets are collected only in code, never inside strings or comments.
    """

    start_mode = mode
    code: list[str] = []
    breaks: list[int] = []
    delta = 0
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if mode is Mode.BLOCK_COMMENT:
            if text.startswith("*/", i):
                mode = Mode.CODE
                code.append(" ")
                i += 2
            else:
                i += 1
            continue
        if mode is Mode.STRING:
            if ch == "\\":
                i += 2
                continue
            if ch == '"':
                mode = Mode.CODE
                code.append('"')
            i += 1
            continue

        if text.startswith("//", i):
            break
        if text.startswith("/*", i):
            mode = Mode.BLOCK_COMMENT
            i += 2
            continue
        if ch == '"':
            mode = Mode.STRING
            code.append('"')
            i += 1
            continue
        if ch == "'":
            end = _quoted_ident_end(text, i)
            code.append(text[i:end])
            i = end
            continue

        if ch in _OPENERS:
            delta += 1
        elif ch in _CLOSERS:
            delta -= 1
        elif ch == " ":
            breaks.append(i)
        elif ch == ",":
            breaks.append(i + 1)
        code.append(ch)
        i += 1

    return LineScan(
        start_mode=start_mode,
        end_mode=mode,
        code="".join(code).strip(),
        bracket_delta=delta,
        breaks=tuple(breaks),
    )


def _quoted_ident_end(text: str, start: int) -> int:
    i = start + 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == "'":
            return i + 1
        i += 1
    return len(text)
