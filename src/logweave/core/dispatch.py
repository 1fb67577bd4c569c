"""Detached units of work.

Handlers that must not block their caller hand their work to spawn(), which
runs it on its own daemon thread. Nobody observes the outcome: exceptions
raised by a detached unit are dropped, and there is no queue bound, so a
sustained burst of records creates as many threads as it has records. A
unit that cannot get a thread at all is dropped the same way.

drain() exists so tests, examples and shutdown code can wait for output to
land. Handlers themselves never call it.
"""

import threading
import time
from collections.abc import Callable
from typing import Any

_pending: set[threading.Thread] = set()
_pending_lock = threading.Lock()


def spawn(func: Callable[..., Any], *args: Any) -> None:
    """Run func(*args) on a new daemon thread and return immediately.

    Args:
        func: Callable to run.
        *args: Positional arguments for func.
    """
    thread = threading.Thread(target=_run_detached, args=(func, args), daemon=True)
    # Registered and started atomically: drain() never sees an unstarted
    # thread, and never misses a unit spawned by another unit
    with _pending_lock:
        _pending.add(thread)
        try:
            thread.start()
        except RuntimeError:
            # Out of threads: the unit is dropped like any other failed unit
            _pending.discard(thread)


def _run_detached(func: Callable[..., Any], args: tuple[Any, ...]) -> None:
    try:
        func(*args)
    except Exception:  # noqa: BLE001, S110
        pass  # outcome of a detached unit is never reported
    finally:
        with _pending_lock:
            _pending.discard(threading.current_thread())


def pending() -> int:
    """Return the number of spawned units that have not finished yet."""
    with _pending_lock:
        return len(_pending)


def drain(timeout: float | None = None) -> bool:
    """Wait until every spawned unit has finished.

    Units spawned while draining (for example an AsyncHandler wrapping a
    PrettyHandler, which spawns a second unit) are waited for as well.

    Args:
        timeout: Maximum seconds to wait. None waits indefinitely.

    Returns:
        True if nothing is pending anymore, False if the timeout expired first.
    """
    deadline = None if timeout is None else time.monotonic() + timeout
    while True:
        with _pending_lock:
            threads = list(_pending)
        if not threads:
            return True
        for thread in threads:
            if deadline is None:
                thread.join()
                continue
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return pending() == 0
            thread.join(remaining)
