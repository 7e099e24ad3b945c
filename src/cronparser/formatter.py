"""Render expanded schedules and fields back into text."""

from __future__ import annotations

__all__ = ["COMMAND_LABEL", "DEFAULT_LABEL_WIDTH", "encode_field", "format_schedule"]

from typing import TYPE_CHECKING, Final

from cronparser.common import FIELD_ORDER, full_range, in_range
from cronparser.errors import CronFormatError, CronRangeError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cronparser.common import FieldKind
    from cronparser.parser.schedule import CronSchedule

DEFAULT_LABEL_WIDTH: Final[int] = 14
COMMAND_LABEL: Final[str] = "command"


def format_schedule(schedule: CronSchedule, label_width: int = DEFAULT_LABEL_WIDTH) -> str:
    """Render *schedule* as one labelled line per field, followed by the command.

    Labels are left-justified to *label_width* columns and values are separated by
    single spaces. The result has no trailing newline.
    """
    lines = [
        _format_line(str(kind), " ".join(map(str, schedule.values_for(kind))), label_width)
        for kind in FIELD_ORDER
    ]
    lines.append(_format_line(COMMAND_LABEL, schedule.command, label_width))
    return "\n".join(lines)


def _format_line(label: str, text: str, label_width: int) -> str:
    return f"{label:<{label_width}}{text}"


def encode_field(values: Iterable[int], kind: FieldKind) -> str:
    """Return the shortest field expression which expands to *values*.

    The full range of *kind* becomes ``*``. Otherwise every run of consecutive values
    becomes ``start-end`` (or a bare value for a run of one) and runs are joined by commas.

    :raises CronFormatError: If *values* is empty.
    :raises CronRangeError: If a value lies outside the boundaries of *kind*.
    """
    ordered = sorted(set(values))
    if not ordered:
        msg = "cannot encode a field without values"
        raise CronFormatError(msg)
    outside = [value for value in ordered if not in_range(value, kind)]
    if outside:
        msg = f"values {outside} are out of range for {kind}"
        raise CronRangeError(msg)
    if tuple(ordered) == full_range(kind):
        return "*"

    runs: list[tuple[int, int]] = []
    start = previous = ordered[0]
    for value in ordered[1:]:
        if value != previous + 1:
            runs.append((start, previous))
            start = value
        previous = value
    runs.append((start, previous))
    return ",".join(str(first) if first == last else f"{first}-{last}" for first, last in runs)
