"""Tests for logging helpers and mixins."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
import logging

import pytest

from cronparser.logging import DEFAULT_LOG_FORMAT, WithLogger, configure_logging
from cronparser.parser.schedule import ScheduleParser


class ExampleLogger(WithLogger):
    """Concrete class for exercising the WithLogger mixin."""


@contextmanager
def isolated_root_logger() -> Iterator[logging.Logger]:
    """Strip the root logger of its handlers and restore them afterwards."""
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    for handler in original_handlers:
        root_logger.removeHandler(handler)

    try:
        yield root_logger
    finally:
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
        root_logger.setLevel(original_level)
        for handler in original_handlers:
            root_logger.addHandler(handler)


def test_with_logger_resolves_logger_named_after_class() -> None:
    """_logger should resolve to a class-named logger and always be the same instance."""
    example = ExampleLogger()
    logger = example._logger  # noqa: SLF001
    assert logger.name == ExampleLogger.__name__
    assert logger is example._logger  # noqa: SLF001
    assert logger is ExampleLogger._get_logger()  # noqa: SLF001


def test_configure_logging_sets_root_level_and_formatter() -> None:
    """configure_logging should apply level and formatter to the root logger."""
    with isolated_root_logger() as root_logger:
        configure_logging(level="debug")

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        formatter = root_logger.handlers[0].formatter
        assert formatter is not None
        assert formatter._style._fmt == DEFAULT_LOG_FORMAT  # noqa: SLF001


def test_configure_logging_replaces_previous_handler() -> None:
    """Calling configure_logging twice should not duplicate handlers."""
    with isolated_root_logger() as root_logger:
        configure_logging(level="INFO")
        configure_logging(level=logging.ERROR)

        assert root_logger.level == logging.ERROR
        assert len(root_logger.handlers) == 1


def test_configure_logging_rejects_unknown_level() -> None:
    """String log level names must be valid."""
    with pytest.raises(ValueError, match="valid logging level name"):
        configure_logging(level="NOTALEVEL")


def test_schedule_parser_logs_result(caplog: pytest.LogCaptureFixture) -> None:
    """The assembler should log the parsed expression at debug level."""
    with caplog.at_level(logging.DEBUG, logger=ScheduleParser.__name__):
        ScheduleParser().parse("0 0 1 1 0 cmd")

    assert "Parsed '0 0 1 1 0 cmd' into CronSchedule(" in caplog.text
