"""Severity table shared by the facade and its transports.

Each level carries its display tag, its priority in the table, the color used
on terminals and the stdlib level number its records are logged at. Tags are
rendered by our formatters; stdlib only learns names for the two numbers it
lacks (SILLY and VERBOSE).
"""
from __future__ import annotations

import logging
from enum import Enum


class Level(Enum):
    SILLY = ("  silly", 0, "magenta", 5)
    DEBUG = ("  debug", 1, "cyan", logging.DEBUG)
    VERBOSE = ("verbose", 2, "blue", 15)
    INFO = ("   info", 3, "green", logging.INFO)
    WARN = ("   warn", 4, "yellow", logging.WARNING)
    ERROR = ("  error", 5, "red", logging.ERROR)

    def __init__(self, tag: str, priority: int, color: str, logging_level: int) -> None:
        self.tag = tag
        self.priority = priority
        self.color = color
        self.logging_level = logging_level

    def __lt__(self, other: "Level") -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.priority < other.priority

    def __le__(self, other: "Level") -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.priority <= other.priority

    @classmethod
    def from_tag(cls, tag: str) -> "Level":
        for level in cls:
            if level.tag == tag:
                return level
        raise ValueError(f"Unknown level tag: {tag!r}")

    @classmethod
    def from_name(cls, name: str) -> "Level":
        try:
            return cls[name.strip().upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_logging_level(cls, number: int) -> "Level":
        """Closest table level at or below a stdlib level number."""
        found = cls.SILLY
        for level in cls:
            if level.logging_level <= number:
                found = level
        return found


def register_levels() -> None:
    """Name the two numbers stdlib lacks (idempotent).

    Tags are rendered by our formatters, not registered as stdlib names.
    """
    for level in (Level.SILLY, Level.VERBOSE):
        if logging.getLevelName(level.logging_level) != level.name:
            logging.addLevelName(level.logging_level, level.name)


__all__ = ["Level", "register_levels"]
