"""Collaborator protocols the batch core depends on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from modelicafmt.lib.domain import FormatResult


class FormatTransform(Protocol):
    """Pure source transform: full original bytes in, formatted bytes out.

    Implementations raise on malformed input and never touch the filesystem.
    """

    def __call__(self, content: bytes, max_line_width: int, /) -> bytes: ...


class OutputSink(Protocol):
    """Destination for formatted buffers, fixed for a whole run."""

    def write(self, result: FormatResult) -> None: ...


class ErrorReporter(Protocol):
    """Receives one-line reports for recoverable errors."""

    def __call__(self, message: str, /) -> None: ...
