"""Default Modelica layout transform."""

from __future__ import annotations

import structlog

from modelicafmt.lib.layout.indent import INDENT, LineKind, Reindenter
from modelicafmt.lib.layout.lexer import Mode
from modelicafmt.lib.layout.wrap import wrap_line

logger = structlog.get_logger(__name__)


class LayoutError(ValueError):
    """The source cannot be laid out."""


def _decode(content: bytes) -> str:
    if content.startswith(b"\xef\xbb\xbf"):
        content = content[3:]
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise LayoutError(f"source is not valid UTF-8 (byte offset {exc.start})") from exc


def format_text(source: str, max_line_width: int = -1) -> str:
    """Reindent, normalise whitespace, and optionally wrap Modelica source text."""

    reindenter = Reindenter()
    out: list[str] = []
    previous_blank = True
    for raw in source.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
        line = reindenter.feed(raw)
        if line.kind is LineKind.BLANK:
            if previous_blank:
                continue
            previous_blank = True
            out.append("")
            continue
        previous_blank = False
        if max_line_width > 0 and line.wrappable:
            out.extend(
                wrap_line(
                    line.text,
                    indent=INDENT * line.level,
                    continuation=INDENT * (line.level if line.continued else line.level + 1),
                    width=max_line_width,
                )
            )
        else:
            out.append(line.render())

    while out and out[-1] == "":
        out.pop()
    if reindenter.mode is not Mode.CODE:
        unterminated = reindenter.mode.replace("_", " ")
        raise LayoutError(f"source ends inside an unterminated {unterminated}")
    if not out:
        return ""
    return "\n".join(out) + "\n"


def format_source(content: bytes, max_line_width: int) -> bytes:
    """Format one Modelica source buffer; usable as a batch transform."""

    formatted = format_text(_decode(content), max_line_width).encode("utf-8")
    logger.debug("Laid out source.", size_in=len(content), size_out=len(formatted))
    return formatted
