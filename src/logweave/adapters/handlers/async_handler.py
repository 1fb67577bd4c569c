"""Handler adapter that decouples callers from a slow handler."""

from collections.abc import Sequence

from logweave.core import dispatch
from logweave.core.models import Attr, Record
from logweave.core.ports import Handler


class AsyncHandler:
    """Handler that passes every record to its inner handler on a detached unit.

    handle() returns as soon as the unit is spawned. Whether the inner handler
    succeeds or fails is never reported back, so this trades delivery
    guarantees for caller latency.

    Example:
        ```python
        handler = AsyncHandler(PrettyHandler(sys.stderr.buffer))
        handler.handle(info("cache warmed", entries=512))
        ```
    """

    def __init__(self, handler: Handler) -> None:
        """Initialize the handler with the handler to defer to.

        Args:
            handler: Inner handler that does the actual work.
        """
        self._handler = handler

    @property
    def inner(self) -> Handler:
        return self._handler

    def enabled(self, level: int) -> bool:
        return self._handler.enabled(level)

    def handle(self, record: Record) -> None:
        dispatch.spawn(self._handler.handle, record)

    def with_attrs(self, attrs: Sequence[Attr]) -> "AsyncHandler":
        return AsyncHandler(self._handler.with_attrs(attrs))

    def with_group(self, name: str) -> "AsyncHandler":
        return AsyncHandler(self._handler.with_group(name))
