"""Settings for the cron parser and useful functionality to work with them."""

from __future__ import annotations

import dataclasses
import os
from typing import Any, TypedDict

from typing_extensions import NotRequired, Unpack

from cronparser.errors import CronConfigError

ENV_PREFIX = "CRONPARSER"


class CronSettingsKwargs(TypedDict):
    """Kwargs accepted by :meth:`CronSettings.load`."""

    log_level: NotRequired[str]
    label_width: NotRequired[int]


@dataclasses.dataclass
class CronSettings:
    """Strongly typed configuration holder for the command-line entry point."""

    log_level: str
    label_width: int

    @classmethod
    def from_defaults(cls) -> dict[str, Any]:
        """Return the canonical default values for all settings fields."""
        return {
            "log_level": "WARNING",
            "label_width": 14,
        }

    @classmethod
    def load(cls, **settings: Unpack[CronSettingsKwargs]) -> CronSettings:
        """Load settings from keyword overrides, env vars, and defaults (in that order).

        :param settings: Keyword arguments that override both environment variables and defaults.
        :returns: A fully instantiated :class:`CronSettings` object.
        """
        final_settings = cls.from_defaults()
        final_settings.update(cls.from_envs())
        final_settings.update(settings)
        return cls(**final_settings)

    def as_dict(self) -> dict[str, Any]:
        """Return specified settings as a plain dictionary for serialisation."""
        return dataclasses.asdict(self)

    @classmethod
    def from_envs(cls) -> dict[str, Any]:
        """Return settings overridden via ``CRONPARSER_*`` environment variables."""
        coercers: dict[str, Any] = {
            "log_level": str.upper,
            "label_width": _to_positive_int,
        }

        to_return: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            env_var = f"{ENV_PREFIX}_{field.name.upper()}"
            if env_var not in os.environ:
                continue
            raw_value = os.environ[env_var]
            if field.name not in coercers:
                to_return[field.name] = raw_value
                continue

            try:
                to_return[field.name] = coercers[field.name](raw_value)
            except ValueError as exc:
                msg = f"{raw_value!r} is not a valid value for {field.name!r}"
                raise CronConfigError(msg) from exc
        return to_return


def _to_positive_int(value: str) -> int:
    result = int(value)
    if result <= 0:
        msg = f"Must be a positive integer, got {value!r}"
        raise ValueError(msg)
    return result
