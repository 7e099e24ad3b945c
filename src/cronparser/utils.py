"""Utility functions accessible from everywhere in the application."""

__all__ = ["make_specific_register_func", "parse_int", "register_implementation"]

from collections.abc import Callable
import re

from cronparser.cron_types import TImplementation, TStrEnum

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def register_implementation(
    registry: dict[TStrEnum, TImplementation], key: TStrEnum
) -> Callable[[TImplementation], TImplementation]:
    """Return a decorator that registers an object under *key* inside *registry*."""

    def wrapper(item: TImplementation) -> TImplementation:
        registry[key] = item
        return item

    return wrapper


def make_specific_register_func(
    registry_map: dict[TStrEnum, TImplementation],
) -> Callable[[TStrEnum], Callable[[TImplementation], TImplementation]]:
    """Build a helper that mirrors :func:`register_implementation` for a given map."""

    def _register(enum_key: TStrEnum) -> Callable[[TImplementation], TImplementation]:
        return register_implementation(registry_map, enum_key)

    return _register


def parse_int(text: str) -> int | None:
    """Return *text* as a base-10 integer, or ``None`` if it is not one.

    Only an optional sign followed by ASCII digits is accepted. Whitespace,
    underscores and non-ASCII digits, all of which :class:`int` tolerates, are rejected,
    as are digit strings beyond the interpreter's integer conversion limit.
    """
    if _INTEGER_RE.fullmatch(text) is None:
        return None
    try:
        return int(text)
    except ValueError:
        return None
