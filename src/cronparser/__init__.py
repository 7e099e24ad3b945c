"""Public interface for the cron expression parser."""

from __future__ import annotations

from .common import FieldKind, boundaries, in_range
from .errors import (
    CronError,
    CronFormatError,
    CronParseError,
    CronRangeError,
    CronStepError,
    CronStructureError,
)
from .formatter import encode_field, format_schedule
from .parser import CronSchedule, FieldParser, parse, parse_field

__all__ = [
    "CronError",
    "CronFormatError",
    "CronParseError",
    "CronRangeError",
    "CronSchedule",
    "CronStepError",
    "CronStructureError",
    "FieldKind",
    "FieldParser",
    "boundaries",
    "encode_field",
    "format_schedule",
    "in_range",
    "parse",
    "parse_field",
]
