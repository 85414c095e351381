"""Verbosity levels, ordered from silent to everything."""

from __future__ import annotations

from enum import IntEnum


class Level(IntEnum):
    """Verbosity level requested on the command line.

    Members use the ``java.util.logging`` names so that tokens such as
    ``scoobi.verbose.fine`` keep working; the integer value orders them by
    verbosity (``OFF`` is the quietest).
    """

    OFF = 0
    SEVERE = 1
    WARNING = 2
    INFO = 3
    CONFIG = 4
    FINE = 5
    FINER = 6
    FINEST = 7
    ALL = 8

    @property
    def loguru_level(self) -> str | None:
        """Name of the loguru level with the same threshold, None for OFF."""
        return _LOGURU_LEVELS[self]

    @classmethod
    def from_numeric_value(cls, value: int) -> Level | None:
        """Look up a level by its ``java.util.logging`` integer value."""
        return _BY_NUMERIC_VALUE.get(value)


DEFAULT_LEVEL = Level.INFO

_LOGURU_LEVELS: dict[Level, str | None] = {
    Level.OFF: None,
    Level.SEVERE: "ERROR",
    Level.WARNING: "WARNING",
    Level.INFO: "INFO",
    Level.CONFIG: "INFO",
    Level.FINE: "DEBUG",
    Level.FINER: "DEBUG",
    Level.FINEST: "TRACE",
    Level.ALL: "TRACE",
}

_BY_NUMERIC_VALUE: dict[int, Level] = {
    2**31 - 1: Level.OFF,
    1000: Level.SEVERE,
    900: Level.WARNING,
    800: Level.INFO,
    700: Level.CONFIG,
    500: Level.FINE,
    400: Level.FINER,
    300: Level.FINEST,
    -(2**31): Level.ALL,
}
