"""Human-readable, colorized terminal handler.

Each record becomes one header line followed by one indented line per
attribute::

    \\033[32m14:02:11 [INFO] request served\\033[0m
        \\033[30mhttp.status: 200\\033[0m
        \\033[30mhttp.path: "/health"\\033[0m

The output is meant for people, not for parsers.
"""

import threading
import time
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from logweave.core import dispatch
from logweave.core.models import (
    DEBUG,
    ERROR,
    INFO,
    WARN,
    Attr,
    HandlerOptions,
    Record,
    level_name,
)
from logweave.core.ports import ByteSink

RESET = "\033[0m"
DIM = "\033[30m"

LEVEL_COLORS = {
    DEBUG: "\033[36m",
    INFO: "\033[32m",
    WARN: "\033[33m",
    ERROR: "\033[31m",
}


def render_value(value: Any) -> str:
    """Render an attribute value for display.

    Strings are quoted, byte sequences are summarized by length, groups are
    shown as ``[key=value ...]`` and anything else uses its str() form.
    """
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"bytes({len(value)})"
    return _plain_text(value)


def _plain_text(value: Any) -> str:
    if isinstance(value, tuple) and all(isinstance(item, Attr) for item in value):
        return "[" + " ".join(f"{item.key}={_plain_text(item.value)}" for item in value) + "]"
    return str(value)


def render_attr(key: str, value: Any) -> str:
    """Render one indented, dimmed ``key: value`` line."""
    return f"    {DIM}{key}: {render_value(value)}{RESET}\n"


class _SharedSink:
    """Output sink plus the lock every writer to it must hold."""

    def __init__(self, sink: ByteSink) -> None:
        self.sink = sink
        self.lock = threading.Lock()


class PrettyHandler:
    """Handler that writes colored, multi-line records to a byte sink.

    handle() renders and writes on a detached unit, so it does not block the
    caller. All handlers derived from one PrettyHandler share its sink and
    its lock, which keeps every record's block of lines contiguous even when
    records are written concurrently. Ordering across records is not
    guaranteed.

    Attributes added with with_attrs() are rendered on every record, unless
    the record carries an attribute with the same fully-qualified key.

    Example:
        ```python
        handler = PrettyHandler(sys.stderr.buffer, HandlerOptions(level=DEBUG))
        child = handler.with_group("db").with_attrs([Attr("pool", "primary")])
        ```
    """

    def __init__(self, sink: ByteSink, options: HandlerOptions | None = None) -> None:
        """Initialize the handler.

        Args:
            sink: Byte destination, e.g. sys.stderr.buffer or an io.BytesIO.
            options: Minimum level and call-site rendering. Defaults to INFO
                without call sites.
        """
        self._output = _SharedSink(sink)
        self._options = options or HandlerOptions()
        self._fixed_attrs: Mapping[str, str] = MappingProxyType({})
        self._group_prefix = ""

    @classmethod
    def _derive(
        cls,
        parent: "PrettyHandler",
        fixed_attrs: Mapping[str, str],
        group_prefix: str,
    ) -> "PrettyHandler":
        handler = cls.__new__(cls)
        handler._output = parent._output
        handler._options = parent._options
        handler._fixed_attrs = fixed_attrs
        handler._group_prefix = group_prefix
        return handler

    @property
    def options(self) -> HandlerOptions:
        return self._options

    @property
    def group_prefix(self) -> str:
        return self._group_prefix

    @property
    def fixed_attrs(self) -> Mapping[str, str]:
        """Pre-rendered inherited attribute lines, by fully-qualified key."""
        return self._fixed_attrs

    def enabled(self, level: int) -> bool:
        return level >= self._options.minimum_level()

    def handle(self, record: Record) -> None:
        dispatch.spawn(self._write, record)

    def with_attrs(self, attrs: Sequence[Attr]) -> "PrettyHandler":
        fixed = dict(self._fixed_attrs)
        for attr in attrs:
            key = self._group_prefix + attr.key
            fixed[key] = render_attr(key, attr.value)
        return self._derive(self, MappingProxyType(fixed), self._group_prefix)

    def with_group(self, name: str) -> "PrettyHandler":
        return self._derive(self, self._fixed_attrs, f"{self._group_prefix}{name}.")

    def render(self, record: Record) -> str:
        """Render a record to the text block handle() would write."""
        color = LEVEL_COLORS.get(record.level, RESET)
        clock = time.strftime("%H:%M:%S", time.localtime(record.timestamp))
        parts = [f"{color}{clock} [{level_name(record.level)}] {record.message}{RESET}"]

        source = record.source
        if self._options.add_source and source is not None:
            parts.append(f" {DIM}at {source.file}:{source.line}{RESET}\n")
        else:
            parts.append("\n")

        seen: set[str] = set()
        for attr in record.attrs:
            key = self._group_prefix + attr.key
            seen.add(key)
            parts.append(render_attr(key, attr.value))

        # Explicit attributes win over inherited ones with the same key
        for key, line in self._fixed_attrs.items():
            if key not in seen:
                parts.append(line)
        return "".join(parts)

    def _write(self, record: Record) -> None:
        with self._output.lock:
            self._output.sink.write(self.render(record).encode("utf-8"))
            flush = getattr(self._output.sink, "flush", None)
            if flush is not None:
                flush()
