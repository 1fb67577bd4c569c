"""Core domain models for structured log records."""

import threading
from dataclasses import dataclass, field
from typing import Any

from logweave.core.ports import Leveler

# Severity scale, aligned with the standard logging module.
DEBUG = 10
INFO = 20
WARN = 30
ERROR = 40

_NAMED_LEVELS = (("ERROR", ERROR), ("WARN", WARN), ("INFO", INFO))

# Extra spellings accepted by parse_level()
_LEVEL_ALIASES = {"WARNING": WARN, "CRITICAL": ERROR + 10}


def level_name(level: int) -> str:
    """Return the display name of a severity level.

    Levels between the named ones are shown relative to the closest named
    level below them, e.g. ``INFO+2``. Levels below DEBUG are shown relative
    to DEBUG, e.g. ``DEBUG-5``.

    Args:
        level: Integer severity.

    Returns:
        Level name such as "INFO", "WARN+1" or "ERROR+10".
    """
    name, base = "DEBUG", DEBUG
    for candidate, value in _NAMED_LEVELS:
        if level >= value:
            name, base = candidate, value
            break
    offset = level - base
    if offset == 0:
        return name
    return f"{name}{offset:+d}"


def parse_level(text: str) -> int:
    """Parse a level name produced by level_name() back into an integer.

    Args:
        text: Level name, case-insensitive. "WARNING" and "CRITICAL" are
            accepted as well.

    Returns:
        Integer severity.

    Raises:
        ValueError: If the name is not a known level.
    """
    raw = text.strip().upper()
    name, sign, offset = raw, "", "0"
    for separator in ("+", "-"):
        if separator in raw:
            name, offset = raw.split(separator, 1)
            sign = separator
            break
    levels = {"DEBUG": DEBUG, "INFO": INFO, "WARN": WARN, "ERROR": ERROR, **_LEVEL_ALIASES}
    if name not in levels or not offset.isdigit():
        raise ValueError(f"unknown log level: {text!r}")
    delta = int(offset)
    return levels[name] - delta if sign == "-" else levels[name] + delta


class LevelVar:
    """A level that can be changed while handlers are running.

    Pass it as ``HandlerOptions.level`` to adjust the threshold of every
    handler built from those options at once.
    """

    def __init__(self, level: int = INFO) -> None:
        self._level = level
        self._lock = threading.Lock()

    def level(self) -> int:
        with self._lock:
            return self._level

    def set(self, level: int) -> None:
        with self._lock:
            self._level = level

    def __repr__(self) -> str:
        return f"LevelVar({level_name(self.level())})"


@dataclass(frozen=True)
class Attr:
    """A key/value attribute attached to a record or a handler.

    Attributes:
        key: Attribute name.
        value: Any value. Strings, bytes and groups get special rendering.
    """

    key: str
    value: Any

    @classmethod
    def group(cls, key: str, *attrs: "Attr") -> "Attr":
        """Build an attribute whose value is a group of attributes."""
        return cls(key, tuple(attrs))

    @property
    def is_group(self) -> bool:
        return isinstance(self.value, tuple) and all(isinstance(a, Attr) for a in self.value)


@dataclass(frozen=True)
class Source:
    """The call site a record was produced at."""

    file: str
    line: int
    function: str = ""


@dataclass(frozen=True)
class Record:
    """A single log event.

    Attributes:
        timestamp: Unix timestamp in seconds.
        level: Integer severity (see DEBUG, INFO, WARN, ERROR).
        message: The log message.
        attrs: Explicit attributes, in the order they were given.
        source: Optional call site of the event.
    """

    timestamp: float
    level: int
    message: str
    attrs: tuple[Attr, ...] = field(default_factory=tuple)
    source: Source | None = None


@dataclass(frozen=True)
class HandlerOptions:
    """Construction options for rendering handlers.

    Attributes:
        level: Minimum level to handle, either a fixed integer or a Leveler
            (such as LevelVar) consulted on every check.
        add_source: Render the record's call site after the header.
    """

    level: int | Leveler = INFO
    add_source: bool = False

    def minimum_level(self) -> int:
        if isinstance(self.level, int):
            return self.level
        return self.level.level()
