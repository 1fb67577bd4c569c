"""Record helper functions and a Logger front-end over any Handler."""

import sys
import time
from typing import Any

from logweave.core.models import DEBUG, ERROR, INFO, WARN, Attr, Record, Source
from logweave.core.ports import Handler


def _collect_attrs(attrs: tuple[Attr, ...], attributes: dict[str, Any]) -> tuple[Attr, ...]:
    return attrs + tuple(Attr(key, value) for key, value in attributes.items())


def log(
    level: int,
    message: str,
    *attrs: Attr,
    source: Source | None = None,
    **attributes: Any,
) -> Record:
    """Create a record with automatic timestamp.

    Args:
        level: Integer severity (e.g., INFO, ERROR, DEBUG)
        message: The log message
        *attrs: Attributes given as Attr values, kept first and in order
        source: Optional call site
        **attributes: Additional structured fields

    Returns:
        Record with current timestamp
    """
    return Record(
        timestamp=time.time(),
        level=level,
        message=message,
        attrs=_collect_attrs(attrs, attributes),
        source=source,
    )


def debug(message: str, *attrs: Attr, **attributes: Any) -> Record:
    """Create a DEBUG record with automatic timestamp."""
    return log(DEBUG, message, *attrs, **attributes)


def info(message: str, *attrs: Attr, **attributes: Any) -> Record:
    """Create an INFO record with automatic timestamp."""
    return log(INFO, message, *attrs, **attributes)


def warn(message: str, *attrs: Attr, **attributes: Any) -> Record:
    """Create a WARN record with automatic timestamp."""
    return log(WARN, message, *attrs, **attributes)


def error(message: str, *attrs: Attr, **attributes: Any) -> Record:
    """Create an ERROR record with automatic timestamp."""
    return log(ERROR, message, *attrs, **attributes)


class Logger:
    """Front-end that builds records and passes them to a handler.

    Records are only built when the handler is enabled for their level.
    Exceptions raised by the handler propagate to the caller.

    Example:
        ```python
        from logweave import Logger, ParallelHandler, PrettyHandler

        logger = Logger(ParallelHandler(PrettyHandler(sys.stderr.buffer)))
        logger.with_group("http").info("request served", status=200)
        ```
    """

    def __init__(self, handler: Handler) -> None:
        self._handler = handler

    @property
    def handler(self) -> Handler:
        return self._handler

    def enabled(self, level: int) -> bool:
        return self._handler.enabled(level)

    def with_attrs(self, *attrs: Attr, **attributes: Any) -> "Logger":
        """Return a logger whose records all carry the given attributes."""
        collected = _collect_attrs(attrs, attributes)
        if not collected:
            return self
        return Logger(self._handler.with_attrs(collected))

    def with_group(self, name: str) -> "Logger":
        """Return a logger that qualifies later attributes with a group."""
        return Logger(self._handler.with_group(name))

    def log(self, level: int, message: str, *attrs: Attr, **attributes: Any) -> None:
        self._emit(level, message, attrs, attributes)

    def debug(self, message: str, *attrs: Attr, **attributes: Any) -> None:
        self._emit(DEBUG, message, attrs, attributes)

    def info(self, message: str, *attrs: Attr, **attributes: Any) -> None:
        self._emit(INFO, message, attrs, attributes)

    def warn(self, message: str, *attrs: Attr, **attributes: Any) -> None:
        self._emit(WARN, message, attrs, attributes)

    def error(self, message: str, *attrs: Attr, **attributes: Any) -> None:
        self._emit(ERROR, message, attrs, attributes)

    def _emit(
        self,
        level: int,
        message: str,
        attrs: tuple[Attr, ...],
        attributes: dict[str, Any],
    ) -> None:
        if not self._handler.enabled(level):
            return
        # Frame 0 is _emit, frame 1 the public method, frame 2 the caller
        frame = sys._getframe(2)
        source = Source(
            file=frame.f_code.co_filename,
            line=frame.f_lineno,
            function=frame.f_code.co_name,
        )
        self._handler.handle(log(level, message, *attrs, source=source, **attributes))
