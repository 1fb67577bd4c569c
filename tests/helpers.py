"""Test doubles and builders shared by unit and feature tests."""

import copy
import threading
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from logweave.core.models import DEBUG, INFO, Attr, Record, Source

# 2023-12-11 13:06:40 UTC; rendered clock depends on the local timezone
FIXED_TIMESTAMP = 1702300000.0


def clock(timestamp: float = FIXED_TIMESTAMP) -> str:
    """Return the HH:MM:SS string the pretty handler renders for a timestamp."""
    return time.strftime("%H:%M:%S", time.localtime(timestamp))


def make_record(
    message: str = "test message",
    level: int = INFO,
    *attrs: Attr,
    source: Source | None = None,
    timestamp: float = FIXED_TIMESTAMP,
    **attributes: Any,
) -> Record:
    """Build a record with a fixed timestamp."""
    extra = tuple(Attr(k, v) for k, v in attributes.items())
    return Record(
        timestamp=timestamp,
        level=level,
        message=message,
        attrs=attrs + extra,
        source=source,
    )


@dataclass
class CallLog:
    """Records received by a family of RecordingHandlers, in arrival order."""

    records: list[tuple[str, Record, tuple[Attr, ...], str]] = field(default_factory=list)
    lock: threading.Lock = field(default_factory=threading.Lock)

    def append(self, name: str, record: Record, attrs: tuple[Attr, ...], group: str) -> None:
        with self.lock:
            self.records.append((name, record, attrs, group))

    def names(self) -> list[str]:
        return [name for name, *_ in self.records]


class RecordingHandler:
    """Handler that remembers what it was asked to handle.

    Derived handlers share the parent's CallLog and keep their own
    accumulated attributes and group path, so tests can inspect both.
    """

    def __init__(
        self,
        name: str = "recorder",
        level: int = DEBUG,
        calls: CallLog | None = None,
        attrs: tuple[Attr, ...] = (),
        group: str = "",
    ) -> None:
        self.name = name
        self.level = level
        self.calls = calls if calls is not None else CallLog()
        self.attrs = attrs
        self.group = group
        self.enabled_checks: list[int] = []

    def enabled(self, level: int) -> bool:
        self.enabled_checks.append(level)
        return level >= self.level

    def handle(self, record: Record) -> None:
        self.calls.append(self.name, record, self.attrs, self.group)

    def with_attrs(self, attrs: Sequence[Attr]) -> "RecordingHandler":
        return self._derive(self.attrs + tuple(attrs), self.group)

    def with_group(self, name: str) -> "RecordingHandler":
        return self._derive(self.attrs, f"{self.group}{name}.")

    def _derive(self, attrs: tuple[Attr, ...], group: str) -> "RecordingHandler":
        child = copy.copy(self)
        child.attrs = attrs
        child.group = group
        child.enabled_checks = []
        return child


class FailingHandler(RecordingHandler):
    """RecordingHandler whose handle() records the call and then raises."""

    def __init__(self, name: str = "failing", level: int = DEBUG, calls: CallLog | None = None):
        super().__init__(name, level, calls)

    def handle(self, record: Record) -> None:
        super().handle(record)
        raise RuntimeError(f"{self.name} failed")


class SlowHandler(RecordingHandler):
    """RecordingHandler that sleeps before recording, then sets `done`."""

    def __init__(self, delay: float, name: str = "slow") -> None:
        super().__init__(name)
        self.delay = delay
        self.done = threading.Event()

    def handle(self, record: Record) -> None:
        time.sleep(self.delay)
        super().handle(record)
        self.done.set()
