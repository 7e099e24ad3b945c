"""Some common constants and objects which may be used in any modules."""

from __future__ import annotations

__all__ = [
    "FIELD_BOUNDARIES",
    "FIELD_ORDER",
    "MIN_TOKEN_COUNT",
    "FieldKind",
    "SubParserEnum",
    "boundaries",
    "full_range",
    "in_range",
]

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from cronparser.py_compatibility import StrEnum

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cronparser.cron_types import Boundary, ExpandedField

MIN_TOKEN_COUNT: Final[int] = 6
"""Five time fields followed by at least one command token."""


class FieldKind(StrEnum):
    """Enum of the positional time fields of a cron expression."""

    Minute = "minute"
    Hour = "hour"
    DayOfMonth = "day of month"
    Month = "month"
    DayOfWeek = "day of week"


class SubParserEnum(StrEnum):
    """Enum of known field sub-parsers."""

    List = "List"
    Interval = "Interval"
    Range = "Range"
    Wildcard = "Wildcard"
    SingleValue = "SingleValue"


FIELD_ORDER: Final[tuple[FieldKind, ...]] = (
    FieldKind.Minute,
    FieldKind.Hour,
    FieldKind.DayOfMonth,
    FieldKind.Month,
    FieldKind.DayOfWeek,
)

FIELD_BOUNDARIES: Final[Mapping[FieldKind, Boundary]] = MappingProxyType(
    {
        FieldKind.Minute: (0, 59),
        FieldKind.Hour: (0, 23),
        FieldKind.DayOfMonth: (1, 31),
        FieldKind.Month: (1, 12),
        FieldKind.DayOfWeek: (0, 6),
    }
)


def boundaries(kind: FieldKind) -> Boundary:
    """Return the inclusive ``(min, max)`` pair of legal values for *kind*."""
    return FIELD_BOUNDARIES[kind]


def in_range(value: int, kind: FieldKind) -> bool:
    """Return ``True`` when *value* lies inside the boundaries of *kind*."""
    lowest, highest = boundaries(kind)
    return lowest <= value <= highest


def full_range(kind: FieldKind) -> ExpandedField:
    """Return every legal value of *kind* in ascending order."""
    lowest, highest = boundaries(kind)
    return tuple(range(lowest, highest + 1))
