"""Cyclopts CLI entry point for modelicafmt."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated

from cyclopts import App, Parameter

from modelicafmt import __build_date__, __built_by__, __commit__, __version__
from modelicafmt.lib.batch import open_sink, run
from modelicafmt.lib.config import load_run_config
from modelicafmt.lib.errors import ExitCode, FormatterError, InvocationError
from modelicafmt.lib.layout import format_source

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

_WRITE_HELP = "overwrite the file(s)"
_LINE_LENGTH_HELP = "how many characters allowed per line; -1 means no max"
_VERSION_HELP = "display tool version"
_VERBOSE_HELP = "more diagnostics on stderr (repeatable)"

_USAGE = f"""usage: modelicafmt [flags] [path ...]
  -line-length int
        {_LINE_LENGTH_HELP} (default -1)
  -v    {_VERSION_HELP}
  -w    {_WRITE_HELP}
  --verbose
        {_VERBOSE_HELP}
"""

_VERSION_FLAGS = frozenset({"-v", "--version", "-version"})
_LINE_LENGTH_FLAGS = frozenset({"-line-length", "--line-length"})
_HELP_FLAGS = frozenset({"-h", "--help", "-help"})


class UsageError(Exception):
    """Malformed command line detected before dispatch to cyclopts."""


@dataclass(frozen=True, slots=True)
class Invocation:
    """Command line after single-dash flag normalisation."""

    args: tuple[str, ...]
    paths: tuple[str, ...]
    help: bool = False
    verbosity: int = 0

    @property
    def log_level(self) -> int:
        if self.verbosity <= 0:
            return logging.WARNING
        if self.verbosity == 1:
            return logging.INFO
        return logging.DEBUG


def version_text() -> str:
    return f"modelicafmt v{__version__} (SHA {__commit__})\nBuilt {__build_date__} by {__built_by__}"


def _wants_version(argv: Sequence[str]) -> bool:
    for arg in argv:
        if arg == "--":
            return False
        if arg in _VERSION_FLAGS:
            return True
    return False


def _report_error(message: str) -> None:
    print(f"error: {message}", file=sys.stderr)


def _print_usage() -> None:
    print(_USAGE, end="", file=sys.stderr)


def parse_invocation(argv: Sequence[str]) -> Invocation:
    """Rewrite Go-style single-dash flags into the forms cyclopts parses.

    ``-line-length N`` and ``-line-length=N`` become ``--line-length=N`` so
    negative widths are never mistaken for flags. Everything after ``--`` is a
    path.
    """

    args: list[str] = []
    paths: list[str] = []
    show_help = False
    verbosity = 0

    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--":
            rest = list(argv[i + 1 :])
            args.append(arg)
            args.extend(rest)
            paths.extend(rest)
            break
        if arg in _HELP_FLAGS:
            show_help = True
            args.append("--help")
            i += 1
            continue
        if arg == "--verbose":
            verbosity += 1
            i += 1
            continue
        if arg in _LINE_LENGTH_FLAGS:
            if i + 1 >= len(argv):
                raise UsageError(f"flag needs an argument: {arg}")
            args.append(f"--line-length={argv[i + 1]}")
            i += 2
            continue
        flag, sep, value = arg.partition("=")
        if sep and flag in _LINE_LENGTH_FLAGS:
            args.append(f"--line-length={value}")
            i += 1
            continue
        if arg in {"-w", "--write"}:
            args.append("-w")
            i += 1
            continue
        if arg.startswith("-") and arg != "-":
            args.append(arg)
            i += 1
            continue

        args.append(arg)
        paths.append(arg)
        i += 1

    return Invocation(
        args=tuple(args),
        paths=tuple(paths),
        help=show_help,
        verbosity=verbosity,
    )


app = App(
    name="modelicafmt",
    help="Format Modelica (.mo) source files.",
    version=__version__,
    help_formatter="plain",
)


@app.default
def format_paths(
    *paths: str,
    write: Annotated[
        bool,
        Parameter(name=["-w", "--write"], negative="", help=_WRITE_HELP),
    ] = False,
    line_length: Annotated[
        str | None,
        Parameter(name="--line-length", help=_LINE_LENGTH_HELP),
    ] = None,
) -> None:
    """Format files and directories, printing to stdout unless -w is given."""

    config = load_run_config(write=write, line_length=line_length)
    sink = open_sink(config, sys.stdout.buffer)
    run(paths, config, transform=format_source, sink=sink, report=_report_error)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point used by `modelicafmt` and `python -m modelicafmt`."""

    from modelicafmt.lib.logging import configure_logging

    raw_args = list(sys.argv[1:] if argv is None else argv)
    if _wants_version(raw_args):
        print(version_text())
        return ExitCode.OK

    try:
        invocation = parse_invocation(raw_args)
    except UsageError as exc:
        _report_error(str(exc))
        _print_usage()
        return ExitCode.INVALID_INVOCATION

    configure_logging(invocation.log_level)

    if not invocation.paths and not invocation.help:
        _report_error(str(InvocationError()))
        _print_usage()
        return ExitCode.INVALID_INVOCATION

    try:
        app(list(invocation.args))
    except InvocationError as exc:
        _report_error(str(exc))
        _print_usage()
        return exc.exit_code
    except FormatterError as exc:
        logger.debug("run aborted", exc_info=True)
        _report_error(str(exc))
        return exc.exit_code
    except ValueError as exc:
        _report_error(str(exc))
        return ExitCode.INVALID_INVOCATION
    return ExitCode.OK
