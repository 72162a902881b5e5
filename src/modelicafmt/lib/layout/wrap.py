"""Greedy line wrapping at code-level break points."""

from __future__ import annotations

from modelicafmt.lib.layout.lexer import Mode, scan_line


def _best_break(text: str, room: int) -> int | None:
    scan = scan_line(text, Mode.CODE)
    best: int | None = None
    for offset in scan.breaks:
        head = text[:offset].rstrip()
        if not head or len(head) > room:
            continue
        # Splitting after `;` would turn the tail into a new statement.
        if head.endswith(";") or not text[offset:].strip():
            continue
        best = offset
    return best


def wrap_line(text: str, *, indent: str, continuation: str, width: int) -> list[str]:
    """Split ``text`` so each piece fits ``width`` where a break point allows.

    The first piece is prefixed with ``indent`` and the rest with
    ``continuation``. A piece with no usable break point is left over-long.
    """

    lines: list[str] = []
    prefix = indent
    while len(prefix) + len(text) > width:
        offset = _best_break(text, width - len(prefix))
        if offset is None:
            break
        lines.append(prefix + text[:offset].rstrip())
        text = text[offset:].lstrip()
        prefix = continuation
    lines.append(prefix + text)
    return lines
