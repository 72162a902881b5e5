"""Configuration resolution helpers."""

from modelicafmt.lib.config.settings import LINE_LENGTH_ENV, load_run_config

__all__ = ["LINE_LENGTH_ENV", "load_run_config"]
