"""Composable handlers: asynchronous dispatch, fan-out and pretty rendering."""

from logweave.adapters.handlers.async_handler import AsyncHandler
from logweave.adapters.handlers.parallel import ParallelHandler
from logweave.adapters.handlers.pretty import PrettyHandler

__all__ = [
    "AsyncHandler",
    "ParallelHandler",
    "PrettyHandler",
]
