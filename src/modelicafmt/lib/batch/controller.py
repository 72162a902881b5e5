"""Top-level batch loop over path arguments."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from modelicafmt.lib.batch.dispatcher import dispatch
from modelicafmt.lib.batch.traversal import walk
from modelicafmt.lib.domain import FormatRequest, RunReport, SourcePath
from modelicafmt.lib.errors import ArgumentResolutionError, InvocationError, describe_os_error

if TYPE_CHECKING:
    from collections.abc import Sequence

    from modelicafmt.lib.domain import RunConfig
    from modelicafmt.lib.ports import ErrorReporter, FormatTransform, OutputSink

logger = structlog.get_logger(__name__)


def run(
    paths: Sequence[str],
    config: RunConfig,
    *,
    transform: FormatTransform,
    sink: OutputSink,
    report: ErrorReporter,
) -> RunReport:
    """Format every file named by ``paths``, in argument then discovery order.

    Directories are walked and only eligible files are formatted. Files named
    explicitly are always formatted, whatever their name. Raises
    ``InvocationError`` for an empty argument list,
    ``ArgumentResolutionError`` for an argument that cannot be stat'ed, and
    ``FileFailure`` subclasses for the first file that cannot be formatted or
    written; nothing after the failing path is processed.
    """

    if not paths:
        raise InvocationError()

    formatted = 0
    walk_errors = 0

    def on_walk_error(exc: OSError) -> None:
        nonlocal walk_errors
        walk_errors += 1
        report(describe_os_error(exc, op="walk"))

    for raw in paths:
        try:
            mode = os.stat(raw).st_mode
        except OSError as exc:
            raise ArgumentResolutionError(raw, exc) from exc

        root = Path(raw)
        if stat.S_ISDIR(mode):
            logger.debug("Walking directory.", path=raw)
            sources = walk(root, on_walk_error)
        else:
            sources = iter((SourcePath.from_path(root, is_dir=False),))

        for source in sources:
            dispatch(
                FormatRequest(source=source, max_line_width=config.max_line_width),
                transform,
                sink,
            )
            formatted += 1

    logger.info("Run complete.", files_formatted=formatted, walk_errors=walk_errors)
    return RunReport(files_formatted=formatted, walk_errors=walk_errors)
