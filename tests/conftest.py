"""Shared test fixtures for all test modules."""

import io
from collections.abc import Iterator

import pytest

from logweave.adapters.handlers.pretty import PrettyHandler
from logweave.core import dispatch
from logweave.core.models import DEBUG, HandlerOptions


@pytest.fixture(autouse=True)
def drain_detached_units() -> Iterator[None]:
    """Make sure no detached unit outlives the test that spawned it."""
    yield
    assert dispatch.drain(timeout=10.0), "detached units still running after test"


@pytest.fixture
def sink() -> io.BytesIO:
    """In-memory byte sink for rendering handlers."""
    return io.BytesIO()


@pytest.fixture
def pretty(sink: io.BytesIO) -> PrettyHandler:
    """PrettyHandler writing to the in-memory sink, DEBUG and up."""
    return PrettyHandler(sink, HandlerOptions(level=DEBUG))


@pytest.fixture
def output(sink: io.BytesIO):
    """Callable that waits for detached units and returns the sink text."""

    def _output() -> str:
        assert dispatch.drain(timeout=10.0)
        return sink.getvalue().decode("utf-8")

    return _output
