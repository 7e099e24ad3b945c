"""Assemble a full cron expression into a :class:`CronSchedule`."""

from __future__ import annotations

__all__ = ["CronSchedule", "ScheduleParser", "parse"]

import dataclasses
from typing import TYPE_CHECKING

from typing_extensions import assert_never

from cronparser.common import FIELD_ORDER, MIN_TOKEN_COUNT, FieldKind
from cronparser.errors import CronParseError, CronStructureError
from cronparser.formatter import format_schedule
from cronparser.logging import WithLogger
from cronparser.parser.dispatch import FieldParser

if TYPE_CHECKING:
    from cronparser.cron_types import ExpandedField


@dataclasses.dataclass(slots=True, frozen=True)
class CronSchedule:
    """Expanded values of every time field plus the command to run.

    Each time field holds a non-empty ascending tuple of distinct values.
    """

    minutes: ExpandedField
    hours: ExpandedField
    days_of_month: ExpandedField
    months: ExpandedField
    days_of_week: ExpandedField
    command: str

    @property
    def dom(self) -> ExpandedField:
        """Alias for ``days_of_month`` property."""
        return self.days_of_month

    @property
    def dow(self) -> ExpandedField:
        """Alias for ``days_of_week`` property."""
        return self.days_of_week

    def values_for(self, kind: FieldKind) -> ExpandedField:
        """Return the expanded values of the field *kind*."""
        match kind:
            case FieldKind.Minute:
                return self.minutes
            case FieldKind.Hour:
                return self.hours
            case FieldKind.DayOfMonth:
                return self.days_of_month
            case FieldKind.Month:
                return self.months
            case FieldKind.DayOfWeek:
                return self.days_of_week
            case _:
                raise assert_never(kind)

    def __str__(self) -> str:
        return format_schedule(self)


class ScheduleParser(WithLogger):
    """Split an expression into positional fields and expand each of them."""

    def __init__(self, field_parser: FieldParser | None = None) -> None:
        """Initialize the parser.

        :param field_parser: Dispatch chain applied to every field. A default chain is
            built when omitted.
        """
        self._field_parser = field_parser or FieldParser()

    def parse(self, expression: str) -> CronSchedule:
        """Parse *expression* into a :class:`CronSchedule`.

        The first five whitespace-separated tokens are the minute, hour, day of month,
        month and day of week fields. The remaining tokens, joined by single spaces,
        form the command.

        :param expression: Raw cron expression followed by a command.
        :returns: The expanded schedule.
        :raises CronStructureError: If the expression has fewer than six tokens.
        :raises CronParseError: If a field is invalid. The message names the 1-based
            field position and its original text.
        """
        tokens = expression.split()
        if len(tokens) < MIN_TOKEN_COUNT:
            msg = f"invalid cron expression: requires at least {MIN_TOKEN_COUNT} fields"
            raise CronStructureError(msg)

        expanded: list[ExpandedField] = []
        for position, (kind, text) in enumerate(zip(FIELD_ORDER, tokens), start=1):
            try:
                expanded.append(self._field_parser.parse_field(text, kind))
            except CronParseError as exc:
                raise exc.with_context(f"error in field {position} ('{text}')") from exc

        minutes, hours, days_of_month, months, days_of_week = expanded
        schedule = CronSchedule(
            minutes=minutes,
            hours=hours,
            days_of_month=days_of_month,
            months=months,
            days_of_week=days_of_week,
            command=" ".join(tokens[len(FIELD_ORDER) :]),
        )
        self._logger.debug("Parsed %r into %r", expression, schedule)
        return schedule


_DEFAULT_SCHEDULE_PARSER = ScheduleParser()


def parse(expression: str) -> CronSchedule:
    """Parse *expression* with the default dispatch chain.

    >>> parse("*/15 0 1,15 * 1-5 /usr/bin/find").minutes
    (0, 15, 30, 45)
    """
    return _DEFAULT_SCHEDULE_PARSER.parse(expression)
