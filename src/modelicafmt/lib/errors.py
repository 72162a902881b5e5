"""Run error taxonomy and exit status mapping."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ExitCode(IntEnum):
    OK = 0
    FAILURE = 1
    INVALID_INVOCATION = 2


class FormatterError(Exception):
    """Base class for errors that end a run."""

    exit_code: ExitCode = ExitCode.FAILURE


class InvocationError(FormatterError):
    """No paths were supplied."""

    exit_code = ExitCode.INVALID_INVOCATION

    def __init__(self, message: str = "must provide at least one file or directory") -> None:
        super().__init__(message)


class ArgumentResolutionError(FormatterError):
    """A top-level path argument could not be resolved."""

    exit_code = ExitCode.INVALID_INVOCATION

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(describe_os_error(cause, op="stat", fallback_path=path))
        self.path = path


class FileFailure(FormatterError):
    """Unrecoverable failure while processing one file."""

    action = "process"

    def __init__(self, path: Path, cause: BaseException) -> None:
        detail = str(cause).strip() or cause.__class__.__name__
        super().__init__(f"cannot {self.action} {path}: {detail}")
        self.path = path


class SourceReadError(FileFailure):
    action = "read"


class FormatTransformError(FileFailure):
    action = "format"


class WriteError(FileFailure):
    action = "write"


def describe_os_error(exc: OSError, *, op: str, fallback_path: object | None = None) -> str:
    """Render an OSError as ``<op> <path>: <reason>`` for stderr reports."""

    reason = (exc.strerror or str(exc) or exc.__class__.__name__).lower()
    path = exc.filename if exc.filename is not None else fallback_path
    if path is None:
        return f"{op}: {reason}"
    return f"{op} {path}: {reason}"
