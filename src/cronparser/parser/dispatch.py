"""Dispatch chain choosing the sub-parser responsible for a cron field."""

from __future__ import annotations

__all__ = ["DISPATCH_ORDER", "FieldParser", "parse_field"]

from typing import TYPE_CHECKING, Final

from cronparser.common import SubParserEnum
from cronparser.errors import CronApplicationError, CronFormatError
from cronparser.logging import WithLogger
from cronparser.parser.sub_parsers import KNOWN_SUB_PARSERS

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cronparser.common import FieldKind
    from cronparser.cron_types import ExpandedField

DISPATCH_ORDER: Final[tuple[SubParserEnum, ...]] = (
    SubParserEnum.List,
    SubParserEnum.Interval,
    SubParserEnum.Range,
    SubParserEnum.Wildcard,
    SubParserEnum.SingleValue,
)
"""Comma beats slash beats dash beats wildcard beats plain integer."""


class FieldParser(WithLogger):
    """Try sub-parsers in a fixed order and return the result of the first that claims a field.

    The parser holds no state besides the resolved chain, so a single instance may be
    shared between threads and re-entered recursively by list and interval sub-parsers.
    """

    def __init__(self, order: Sequence[SubParserEnum] = DISPATCH_ORDER) -> None:
        """Resolve *order* against the registered sub-parsers.

        :param order: Sub-parsers to try, highest precedence first.
        :raises CronApplicationError: If *order* names a sub-parser which is not registered.
        """
        missing = [key for key in order if key not in KNOWN_SUB_PARSERS]
        if missing:
            msg = (
                f"Found unregistered sub-parsers: {missing!r}. "
                f"Ensure they are registered in KNOWN_SUB_PARSERS before building a FieldParser."
            )
            raise CronApplicationError(msg)
        self._chain = tuple((key, KNOWN_SUB_PARSERS[key]) for key in order)

    @property
    def order(self) -> tuple[SubParserEnum, ...]:
        """Return the sub-parsers in the order they are tried."""
        return tuple(key for key, _ in self._chain)

    def parse_field(self, text: str, kind: FieldKind) -> ExpandedField:
        """Expand *text* into the ascending values it denotes for *kind*.

        :param text: Raw field specification, e.g. ``"1-7,15"``.
        :param kind: Field the text belongs to; selects the legal boundaries.
        :returns: A non-empty ascending tuple of distinct values.
        :raises CronParseError: If the claiming sub-parser rejects the text, or none claims it.
        """
        for key, sub_parser in self._chain:
            values = sub_parser(text, kind, self)
            if values is not None:
                self._logger.debug("%s field %r claimed by %s parser", kind, text, key)
                return values

        msg = f"unrecognized format for field: {text}"
        raise CronFormatError(msg)


_DEFAULT_FIELD_PARSER = FieldParser()


def parse_field(text: str, kind: FieldKind) -> ExpandedField:
    """Expand *text* for *kind* with the default dispatch chain."""
    return _DEFAULT_FIELD_PARSER.parse_field(text, kind)
