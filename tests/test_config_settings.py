"""Run configuration layering and validation."""

from __future__ import annotations

import pytest

from modelicafmt.lib.config.settings import LINE_LENGTH_ENV, load_run_config
from modelicafmt.lib.domain import RunConfig
from modelicafmt.lib.types import UNBOUNDED_WIDTH, LineWidth


def test_defaults_are_stream_mode_and_unbounded() -> None:
    loaded = load_run_config(environ={})

    assert loaded == RunConfig(overwrite=False, max_line_width=UNBOUNDED_WIDTH)
    assert loaded.unbounded is True


def test_write_flag_selects_overwrite() -> None:
    assert load_run_config(write=True, environ={}).overwrite is True


def test_env_supplies_line_width_when_flag_absent() -> None:
    loaded = load_run_config(environ={LINE_LENGTH_ENV: " 100 "})

    assert loaded.max_line_width == 100
    assert loaded.unbounded is False


def test_flag_overrides_env() -> None:
    loaded = load_run_config(line_length="-1", environ={LINE_LENGTH_ENV: "100"})

    assert loaded.max_line_width == UNBOUNDED_WIDTH


def test_blank_env_value_is_ignored() -> None:
    assert load_run_config(environ={LINE_LENGTH_ENV: "  "}).max_line_width == UNBOUNDED_WIDTH


def test_reads_process_environment_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LINE_LENGTH_ENV, "88")

    assert load_run_config().max_line_width == 88


@pytest.mark.parametrize(
    "raw_value,expected_fragment",
    [
        pytest.param("wide", "expected int, got 'wide'", id="not-a-number"),
        pytest.param("0", "got 0", id="zero"),
        pytest.param("-2", "got -2", id="below-unbounded"),
        pytest.param(True, "got bool", id="bool"),
        pytest.param(1.5, "got float", id="float"),
    ],
)
def test_invalid_flag_values_name_their_source(raw_value: object, expected_fragment: str) -> None:
    with pytest.raises(ValueError) as excinfo:
        load_run_config(line_length=raw_value, environ={})  # type: ignore[arg-type]

    message = str(excinfo.value)
    assert "'-line-length'" in message
    assert expected_fragment in message


def test_invalid_env_value_names_the_variable() -> None:
    with pytest.raises(ValueError, match=LINE_LENGTH_ENV):
        load_run_config(environ={LINE_LENGTH_ENV: "eighty"})


def test_run_config_is_frozen() -> None:
    config = RunConfig()
    with pytest.raises(AttributeError):
        config.overwrite = True  # type: ignore[misc]


@pytest.mark.parametrize("width", [0, -5])
def test_run_config_rejects_invalid_width(width: int) -> None:
    with pytest.raises(ValueError, match="max_line_width"):
        RunConfig(max_line_width=LineWidth(width))
