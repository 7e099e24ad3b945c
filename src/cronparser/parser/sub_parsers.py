"""Format-specific parsers for a single cron field.

Every sub-parser receives the raw field text, the field kind and the
:class:`~cronparser.parser.dispatch.FieldParser` that invoked it. It returns
``None`` when the text is not written in its syntax, so the next sub-parser may
try, and an ascending tuple of values when it is. A field which is written in
its syntax but is malformed raises a :class:`~cronparser.errors.CronParseError`
subclass and stops the dispatch.

List and interval parsers hand their parts back to the dispatcher, which makes
nested expressions such as ``1-7,15,21-23/2`` possible.
"""

from __future__ import annotations

__all__ = [
    "KNOWN_SUB_PARSERS",
    "parse_interval",
    "parse_list",
    "parse_range",
    "parse_single_value",
    "parse_wildcard",
]

from typing import TYPE_CHECKING

from cronparser.common import SubParserEnum, boundaries, full_range, in_range
from cronparser.errors import (
    CronFormatError,
    CronParseError,
    CronRangeError,
    CronStepError,
)
from cronparser.utils import make_specific_register_func, parse_int

if TYPE_CHECKING:
    from cronparser.common import FieldKind
    from cronparser.cron_types import ExpandedField, SubParserFunc
    from cronparser.parser.dispatch import FieldParser

KNOWN_SUB_PARSERS: dict[SubParserEnum, SubParserFunc] = {}

_register = make_specific_register_func(KNOWN_SUB_PARSERS)

LIST_SEPARATOR = ","
INTERVAL_SEPARATOR = "/"
RANGE_SEPARATOR = "-"
WILDCARD = "*"


@_register(SubParserEnum.List)
def parse_list(field: str, kind: FieldKind, dispatcher: FieldParser) -> ExpandedField | None:
    """Expand a comma-delimited field, merging the values of every part.

    Parts may overlap or come in any order, the result is deduplicated and sorted.
    The first invalid part aborts the whole list.
    """
    if LIST_SEPARATOR not in field:
        return None

    unique_values: set[int] = set()
    for sub_field in field.split(LIST_SEPARATOR):
        unique_values.update(dispatcher.parse_field(sub_field, kind))
    return tuple(sorted(unique_values))


@_register(SubParserEnum.Interval)
def parse_interval(field: str, kind: FieldKind, dispatcher: FieldParser) -> ExpandedField | None:
    """Expand a ``base/step`` field.

    The base is any field expression and starts the sequence at its first value.
    A base written as a range stops at its last value, any other base runs up to
    the maximum of the field.

    :raises CronFormatError: If there is not exactly one ``/`` or the step is not an integer.
    :raises CronStepError: If the step is zero or negative.
    """
    if INTERVAL_SEPARATOR not in field:
        return None

    parts = field.split(INTERVAL_SEPARATOR)
    if len(parts) != 2:  # noqa: PLR2004
        msg = f"invalid interval format: {field}"
        raise CronFormatError(msg)

    base, step_text = parts
    step = parse_int(step_text)
    if step is None:
        msg = f"invalid interval value: {step_text}"
        raise CronFormatError(msg)
    if step <= 0:
        msg = f"invalid interval value: {step_text}"
        raise CronStepError(msg)

    try:
        base_values = dispatcher.parse_field(base, kind)
    except CronParseError as exc:
        raise exc.with_context(f"invalid range for interval: '{base}'") from exc

    start = base_values[0]
    # Decided by the base text, not by the values: "5/10" runs to the maximum.
    end = base_values[-1] if RANGE_SEPARATOR in base else boundaries(kind)[1]
    return tuple(range(start, end + 1, step))


@_register(SubParserEnum.Range)
def parse_range(field: str, kind: FieldKind, dispatcher: FieldParser) -> ExpandedField | None:  # noqa: ARG001
    """Expand an inclusive ``start-end`` range.

    :raises CronFormatError: If the field has more than one ``-`` or a bound is not an integer.
    :raises CronRangeError: If a bound is outside the field boundaries or ``start > end``.
    """
    if RANGE_SEPARATOR not in field:
        return None

    bounds = field.split(RANGE_SEPARATOR)
    if len(bounds) != 2:  # noqa: PLR2004
        msg = f"invalid range format: {field}"
        raise CronFormatError(msg)

    start_text, end_text = bounds
    start = parse_int(start_text)
    if start is None:
        msg = f"invalid range start: {start_text}"
        raise CronFormatError(msg)
    end = parse_int(end_text)
    if end is None:
        msg = f"invalid range end: {end_text}"
        raise CronFormatError(msg)

    if not in_range(start, kind) or not in_range(end, kind) or start > end:
        lowest, highest = boundaries(kind)
        msg = f"range '{field}' is invalid; must be within {lowest}-{highest}"
        raise CronRangeError(msg)
    return tuple(range(start, end + 1))


@_register(SubParserEnum.Wildcard)
def parse_wildcard(field: str, kind: FieldKind, dispatcher: FieldParser) -> ExpandedField | None:  # noqa: ARG001
    """Expand ``*`` into every legal value of the field."""
    if field != WILDCARD:
        return None
    return full_range(kind)


@_register(SubParserEnum.SingleValue)
def parse_single_value(
    field: str, kind: FieldKind, dispatcher: FieldParser  # noqa: ARG001
) -> ExpandedField | None:
    """Interpret a bare integer.

    :raises CronRangeError: If the value is outside the field boundaries.
    """
    value = parse_int(field)
    if value is None:
        return None
    if not in_range(value, kind):
        lowest, highest = boundaries(kind)
        msg = f"value {value} is out of range ({lowest}-{highest})"
        raise CronRangeError(msg)
    return (value,)
