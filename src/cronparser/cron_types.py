"""Collection of generic types and type aliases for the cron parser."""

from __future__ import annotations

__all__ = ["Boundary", "ExpandedField", "SubParserFunc", "TImplementation", "TStrEnum"]

from typing import TYPE_CHECKING, TypeAlias, TypeVar

from cronparser.py_compatibility import StrEnum

if TYPE_CHECKING:
    from collections.abc import Callable

    from cronparser.common import FieldKind
    from cronparser.parser.dispatch import FieldParser

TStrEnum = TypeVar("TStrEnum", bound=StrEnum)
TImplementation = TypeVar("TImplementation")
Boundary: TypeAlias = tuple[int, int]
ExpandedField: TypeAlias = tuple[int, ...]
SubParserFunc: TypeAlias = "Callable[[str, FieldKind, FieldParser], ExpandedField | None]"
