"""Run configuration resolution: built-in defaults < environment < CLI flags."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from modelicafmt.lib.domain import RunConfig
from modelicafmt.lib.types import UNBOUNDED_WIDTH, LineWidth

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

LINE_LENGTH_ENV = "MODELICAFMT_LINE_LENGTH"


def _parse_line_width(raw_value: object, *, source: str) -> LineWidth:
    if isinstance(raw_value, bool):
        raise ValueError(f"Invalid value for '{source}': expected int, got bool.")
    if isinstance(raw_value, str):
        normalized = raw_value.strip()
        try:
            value = int(normalized)
        except ValueError:
            raise ValueError(
                f"Invalid value for '{source}': expected int, got {raw_value!r}."
            ) from None
    elif isinstance(raw_value, int):
        value = raw_value
    else:
        raise ValueError(
            f"Invalid value for '{source}': expected int, got {type(raw_value).__name__}."
        )

    if value != UNBOUNDED_WIDTH and value <= 0:
        raise ValueError(
            f"Invalid value for '{source}': expected -1 (no maximum) or a positive width, "
            f"got {value}."
        )
    return LineWidth(value)


def load_run_config(
    *,
    write: bool = False,
    line_length: int | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> RunConfig:
    """Resolve the immutable run configuration.

    ``line_length`` is the CLI value, ``None`` when the flag was not given.
    """

    env = os.environ if environ is None else environ
    width = UNBOUNDED_WIDTH

    env_value = env.get(LINE_LENGTH_ENV, "").strip()
    if env_value:
        width = _parse_line_width(env_value, source=LINE_LENGTH_ENV)
        logger.debug("Line width from environment: %s", width)

    if line_length is not None:
        width = _parse_line_width(line_length, source="-line-length")

    return RunConfig(overwrite=write, max_line_width=width)
