"""Port interfaces for handlers and output sinks.

These protocols define the contracts that handler adapters must implement.
Handlers compose by wrapping each other and only ever talk through these
interfaces, so a handler never needs to know what it wraps.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from logweave.core.models import Attr, Record


@runtime_checkable
class Handler(Protocol):
    """Port for log record handling.

    Derivation through with_attrs() and with_group() never mutates the
    receiver; both return a new handler and the receiver stays usable.
    Examples: AsyncHandler, ParallelHandler, PrettyHandler.
    """

    def enabled(self, level: int) -> bool:
        """Report whether records at this level would be handled."""
        ...

    def handle(self, record: Record) -> None:
        """Handle a record. Failure is signalled by raising."""
        ...

    def with_attrs(self, attrs: Sequence[Attr]) -> Handler:
        """Return a handler whose output includes the given attributes."""
        ...

    def with_group(self, name: str) -> Handler:
        """Return a handler that qualifies later attribute keys with a group."""
        ...


@runtime_checkable
class ByteSink(Protocol):
    """Append-only byte destination, e.g. io.BytesIO or sys.stderr.buffer."""

    def write(self, data: bytes, /) -> object: ...


@runtime_checkable
class Leveler(Protocol):
    """Anything that can report a minimum level."""

    def level(self) -> int: ...
