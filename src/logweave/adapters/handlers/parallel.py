"""Fan-out handler adapter."""

from collections.abc import Sequence

from logweave.core.models import Attr, Record
from logweave.core.ports import Handler


class ParallelHandler:
    """Handler that dispatches each record to all of its child handlers.

    Useful when logs should go to several places at once, for example a file
    and the terminal, each with its own level threshold. The handler is
    enabled when at least one child is enabled.

    Children are visited in the order given. A child that is not enabled for
    the record's level is skipped. The first child that raises stops the
    fan-out and its exception propagates; later children never see the record.
    """

    def __init__(self, *handlers: Handler) -> None:
        """Initialize the handler with its children.

        Args:
            *handlers: Child handlers, visited in this order.
        """
        self._handlers = handlers

    @property
    def handlers(self) -> tuple[Handler, ...]:
        return self._handlers

    def enabled(self, level: int) -> bool:
        return any(handler.enabled(level) for handler in self._handlers)

    def handle(self, record: Record) -> None:
        for handler in self._handlers:
            if not handler.enabled(record.level):
                continue
            handler.handle(record)

    def with_attrs(self, attrs: Sequence[Attr]) -> "ParallelHandler":
        return ParallelHandler(*(handler.with_attrs(attrs) for handler in self._handlers))

    def with_group(self, name: str) -> "ParallelHandler":
        return ParallelHandler(*(handler.with_group(name) for handler in self._handlers))
