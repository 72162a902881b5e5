"""Core modelicafmt library exports."""

from modelicafmt.lib.domain import FormatRequest, FormatResult, RunConfig, RunReport, SourcePath
from modelicafmt.lib.types import UNBOUNDED_WIDTH, LineWidth

__all__ = [
    "UNBOUNDED_WIDTH",
    "FormatRequest",
    "FormatResult",
    "LineWidth",
    "RunConfig",
    "RunReport",
    "SourcePath",
]
