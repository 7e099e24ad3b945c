"""Field dispatch chain, sub-parsers and the schedule assembler."""

from .dispatch import DISPATCH_ORDER, FieldParser, parse_field
from .schedule import CronSchedule, ScheduleParser, parse
from .sub_parsers import KNOWN_SUB_PARSERS

__all__ = [
    "DISPATCH_ORDER",
    "KNOWN_SUB_PARSERS",
    "CronSchedule",
    "FieldParser",
    "ScheduleParser",
    "parse",
    "parse_field",
]
