"""Per-file orchestration: read, transform, hand off to the sink."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from modelicafmt.lib.domain import FormatResult
from modelicafmt.lib.errors import FormatTransformError, SourceReadError

if TYPE_CHECKING:
    from modelicafmt.lib.domain import FormatRequest
    from modelicafmt.lib.ports import FormatTransform, OutputSink

logger = structlog.get_logger(__name__)


def read_source(request: FormatRequest) -> bytes:
    """Return the full original bytes of the requested file."""

    path = request.source.path
    try:
        with path.open("rb") as handle:
            return handle.read()
    except OSError as exc:
        raise SourceReadError(path, exc) from exc


def dispatch(request: FormatRequest, transform: FormatTransform, sink: OutputSink) -> FormatResult:
    """Format one file and deliver the buffered result to ``sink``.

    The transform runs to completion before the sink sees anything, so a
    failing transform never leaves a partially written file or stream.
    """

    path = request.source.path
    original = read_source(request)
    logger.debug("Formatting file.", path=str(path), size=len(original))
    try:
        formatted = transform(original, request.max_line_width)
    except Exception as exc:
        raise FormatTransformError(path, exc) from exc
    if not isinstance(formatted, bytes):
        raise FormatTransformError(
            path, TypeError(f"transform returned {type(formatted).__name__}, expected bytes")
        )

    result = FormatResult(source=request.source, content=formatted)
    sink.write(result)
    return result
