"""logweave - composable handlers for structured logging.

Handlers share one small contract (enabled, handle, with_attrs, with_group)
and compose by wrapping each other:

    handler = AsyncHandler(
        ParallelHandler(
            PrettyHandler(sys.stderr.buffer, HandlerOptions(level=DEBUG)),
            PrettyHandler(open("app.log", "ab"), HandlerOptions(level=WARN)),
        )
    )
    Logger(handler).with_group("worker").info("started", pid=os.getpid())
"""

from logweave.adapters.handlers import AsyncHandler, ParallelHandler, PrettyHandler
from logweave.adapters.logging import ContextProvider, LogweaveHandler
from logweave.core.dispatch import drain
from logweave.core.logs import Logger
from logweave.core.models import (
    DEBUG,
    ERROR,
    INFO,
    WARN,
    Attr,
    HandlerOptions,
    LevelVar,
    Record,
    Source,
    level_name,
    parse_level,
)
from logweave.core.ports import ByteSink, Handler, Leveler

__all__ = [
    "DEBUG",
    "ERROR",
    "INFO",
    "WARN",
    "AsyncHandler",
    "Attr",
    "ByteSink",
    "ContextProvider",
    "Handler",
    "HandlerOptions",
    "LevelVar",
    "Leveler",
    "Logger",
    "LogweaveHandler",
    "ParallelHandler",
    "PrettyHandler",
    "Record",
    "Source",
    "drain",
    "level_name",
    "parse_level",
]
