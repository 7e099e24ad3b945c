"""Module containing cron parser errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cronparser.py_compatibility import Self


class CronError(Exception):
    """Base class for all cron parser errors."""


class CronApplicationError(CronError, AssertionError):
    """Raised when a development error occurred.

    Signals a broken internal invariant, e.g. a dispatch order naming a sub-parser
    which was never registered. It is never caused by user input.
    """


class CronConfigError(CronError, ValueError):
    """Raised when a setting provided through the environment is invalid."""


class CronParseError(CronError, ValueError):
    """Base class for errors caused by an invalid cron expression."""

    def with_context(self, context: str) -> Self:
        """Return an error of the same class with *context* prepended to the message."""
        return type(self)(f"{context}: {self}")


class CronStructureError(CronParseError):
    """Raised when the expression does not contain enough whitespace-separated tokens."""


class CronFormatError(CronParseError):
    """Raised when a field or one of its parts has unrecognized syntax."""


class CronRangeError(CronParseError):
    """Raised when a value falls outside its field boundaries or a range is reversed."""


class CronStepError(CronParseError):
    """Raised when an interval step is not a positive integer."""
