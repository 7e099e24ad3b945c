"""Tests for the command-line entry point."""

from __future__ import annotations

import logging
from typing import Any

import pytest
from typer.testing import CliRunner

from cronparser.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def basic_config_calls(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
    """Record root logger configuration instead of applying it to the test process."""
    for name in ("CRONPARSER_LOG_LEVEL", "CRONPARSER_LABEL_WIDTH"):
        monkeypatch.delenv(name, raising=False)

    calls: list[dict[str, Any]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    return calls


def test_log_level_option_configures_logging(basic_config_calls: list[dict[str, Any]]) -> None:
    """The --log-level option should override the default level."""
    result = runner.invoke(app, ["--log-level", "debug", "0 0 1 1 0 cmd"])

    assert result.exit_code == 0, result.output
    assert [call["level"] for call in basic_config_calls] == [logging.DEBUG]


def test_log_level_defaults_to_warning(basic_config_calls: list[dict[str, Any]]) -> None:
    """Without options or environment the CLI should log warnings only."""
    runner.invoke(app, ["0 0 1 1 0 cmd"])

    assert [call["level"] for call in basic_config_calls] == [logging.WARNING]


def test_prints_expanded_schedule() -> None:
    """A valid expression should be printed as a labelled table."""
    result = runner.invoke(app, ["*/15 0 1-7,15,21-23/2 * 1-5 /usr/bin/find"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "minute        0 15 30 45",
        "hour          0",
        "day of month  1 2 3 4 5 6 7 15 21 23",
        "month         1 2 3 4 5 6 7 8 9 10 11 12",
        "day of week   1 2 3 4 5",
        "command       /usr/bin/find",
    ]


def test_label_width_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """The printed label column should follow CRONPARSER_LABEL_WIDTH."""
    monkeypatch.setenv("CRONPARSER_LABEL_WIDTH", "12")

    result = runner.invoke(app, ["0 0 1 1 0 cmd"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[0] == "minute      0"


def test_invalid_expression_exits_with_error() -> None:
    """Parse errors should be reported with the failing field and a nonzero status."""
    result = runner.invoke(app, ["0 5-1 * * * /usr/bin/find"])

    assert result.exit_code == 1
    assert (
        "Error: failed to parse cron expression: error in field 2 ('5-1'): "
        "range '5-1' is invalid; must be within 0-23"
    ) in result.output


def test_too_few_fields_exits_with_error() -> None:
    """Expressions without a command should be rejected."""
    result = runner.invoke(app, ["* * *"])

    assert result.exit_code == 1
    assert "requires at least 6 fields" in result.output


def test_missing_argument_is_usage_error() -> None:
    """Exactly one expression argument is required."""
    result = runner.invoke(app, [])

    assert result.exit_code != 0


def test_extra_argument_is_usage_error() -> None:
    """An unquoted expression should not be silently accepted."""
    result = runner.invoke(app, ["*", "*"])

    assert result.exit_code != 0


def test_invalid_log_level_exits_with_config_error() -> None:
    """Unknown level names should be rejected before parsing."""
    result = runner.invoke(app, ["--log-level", "LOUD", "0 0 1 1 0 cmd"])

    assert result.exit_code == 2
    assert "'LOUD' is not a valid logging level name" in result.output


def test_invalid_env_setting_exits_with_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Bad environment configuration should be reported, not raised."""
    monkeypatch.setenv("CRONPARSER_LABEL_WIDTH", "wide")

    result = runner.invoke(app, ["0 0 1 1 0 cmd"])

    assert result.exit_code == 2
    assert "is not a valid value for 'label_width'" in result.output


def test_oversized_number_is_reported_as_parse_error() -> None:
    """Digit strings too long to convert should fail like any other bad field."""
    huge_number = "1" * 5000

    result = runner.invoke(app, [f"{huge_number} * * * * cmd"])

    assert result.exit_code == 1
    assert "Error: failed to parse cron expression: error in field 1 (" in result.output
    assert not isinstance(result.exception, ValueError)
