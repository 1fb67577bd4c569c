"""Python logging handler adapter for logweave.

This adapter bridges Python's standard library logging module to the
Handler port, so existing ``logging.getLogger(...)`` call sites can feed a
composed handler.
"""

import logging
import traceback
from collections.abc import Callable
from typing import Any

from logweave.core.models import Attr, Record, Source
from logweave.core.ports import Handler

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)

# LogRecord fields that may be copied into attributes via include_attrs
_INCLUDABLE_ATTRS = frozenset(
    {"name", "module", "funcName", "lineno", "pathname", "process", "threadName"}
)

# Callable returning attributes to merge into every record, e.g. request context
ContextProvider = Callable[[], dict[str, Any]]


class LogweaveHandler(logging.Handler):
    """Logging handler that converts log records and passes them to a Handler.

    Example:
        ```python
        from logweave import LogweaveHandler, PrettyHandler

        handler = LogweaveHandler(PrettyHandler(sys.stderr.buffer))
        logging.getLogger().addHandler(handler)
        ```
    """

    def __init__(
        self,
        handler: Handler,
        include_attrs: list[str] | None = None,
        context_provider: ContextProvider | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the bridge with the handler to feed.

        Args:
            handler: Handler receiving the converted records.
            include_attrs: LogRecord fields to copy into attributes, e.g.
                ["name", "module"]. Defaults to none; the call site is
                always carried as the record's source.
            context_provider: Optional callable whose attributes are merged
                into every record. Extra fields of the logging call win over
                context attributes with the same key.
            level: Standard logging level filter for this handler.
        """
        super().__init__(level)
        self._handler = handler
        self._include_attrs = [a for a in include_attrs or [] if a in _INCLUDABLE_ATTRS]
        self._context_provider = context_provider

    @property
    def handler(self) -> Handler:
        return self._handler

    def to_record(self, record: logging.LogRecord) -> Record:
        """Convert a standard LogRecord into a Record.

        Args:
            record: The log record to convert.

        Returns:
            Record with extras, exception details and call site attached.
        """
        fields: dict[str, Any] = {key: getattr(record, key) for key in self._include_attrs}

        if self._context_provider is not None:
            fields.update(self._context_provider())

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and not key.startswith("_"):
                fields[key] = value

        attrs = [Attr(key, value) for key, value in fields.items()]

        # Extract exception info if present
        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None:
                attrs.append(Attr("exc_type", exc_type.__name__))
            if exc_value is not None:
                attrs.append(Attr("exc_message", str(exc_value)))
            if exc_tb is not None:
                attrs.append(
                    Attr(
                        "exc_traceback",
                        "".join(traceback.format_exception(exc_type, exc_value, exc_tb)),
                    )
                )

        return Record(
            timestamp=record.created,
            level=record.levelno,
            message=record.getMessage(),
            attrs=tuple(attrs),
            source=Source(record.pathname, record.lineno, record.funcName or ""),
        )

    def emit(self, record: logging.LogRecord) -> None:
        """Pass a log record to the wrapped handler.

        Args:
            record: The log record to emit.
        """
        try:
            if not self._handler.enabled(record.levelno):
                return
            self._handler.handle(self.to_record(record))
        except Exception:  # noqa: BLE001
            self.handleError(record)
