"""Logging helpers shared by the parser and the command-line entry point."""

from __future__ import annotations

__all__ = ["DEFAULT_LOG_FORMAT", "WithLogger", "configure_logging"]

import logging
from typing import Final

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class WithLogger:
    """Mixin providing a logger named after the concrete class."""

    @classmethod
    def _get_logger(cls) -> logging.Logger:
        """Return the logger registered under the class name."""
        return logging.getLogger(cls.__name__)

    @property
    def _logger(self) -> logging.Logger:
        return self._get_logger()


def configure_logging(level: int | str = logging.WARNING, fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """Configure the root logger with a single stream handler.

    :param level: Numeric level or a level name such as ``"DEBUG"``.
    :param fmt: Format string applied to the installed handler.
    :raises ValueError: If *level* is a string which is not a known level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            msg = f"{level!r} is not a valid logging level name"
            raise ValueError(msg)
        level = resolved

    logging.basicConfig(level=level, format=fmt, force=True)
