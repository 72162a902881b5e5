"""Output sinks: overwrite the source file or stream to a shared binary stream."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

import structlog

from modelicafmt.lib.errors import WriteError

if TYPE_CHECKING:
    from modelicafmt.lib.domain import FormatResult, RunConfig
    from modelicafmt.lib.ports import OutputSink

logger = structlog.get_logger(__name__)


def _replace_preserving_mode(path: Path, content: bytes) -> None:
    target = Path(os.path.realpath(path))
    original_mode = stat.S_IMODE(os.stat(target).st_mode)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_path, original_mode)
        os.replace(tmp_path, target)
    finally:
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)


class OverwriteSink:
    """Replaces each source file's whole content, keeping its permission bits."""

    def write(self, result: FormatResult) -> None:
        path = result.source.path
        try:
            _replace_preserving_mode(path, result.content)
        except OSError as exc:
            raise WriteError(path, exc) from exc
        logger.info("Rewrote file.", path=str(path), size=len(result.content))


class StreamSink:
    """Appends each buffer to one shared stream with no separator."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def write(self, result: FormatResult) -> None:
        try:
            self._stream.write(result.content)
            # A file's bytes must be complete before the next file starts.
            self._stream.flush()
        except OSError as exc:
            raise WriteError(result.source.path, exc) from exc


def open_sink(config: RunConfig, stream: BinaryIO) -> OutputSink:
    """Select the single output sink used for the whole run."""

    if config.overwrite:
        return OverwriteSink()
    return StreamSink(stream)
