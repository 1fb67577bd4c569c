"""Example: fan records out to the terminal and to an error log file.

Run with:
    python examples/console_fanout.py

The terminal shows everything from DEBUG up, with call sites. The file
``errors.log`` only receives ERROR records. Both are fed asynchronously, so
the example drains pending output before exiting.
"""

import logging
import sys
import time

from logweave import (
    DEBUG,
    ERROR,
    AsyncHandler,
    Attr,
    HandlerOptions,
    LevelVar,
    Logger,
    LogweaveHandler,
    ParallelHandler,
    PrettyHandler,
    drain,
)

console_level = LevelVar(DEBUG)

with open("errors.log", "ab") as error_file:
    handler = AsyncHandler(
        ParallelHandler(
            PrettyHandler(
                sys.stderr.buffer,
                HandlerOptions(level=console_level, add_source=True),
            ),
            PrettyHandler(error_file, HandlerOptions(level=ERROR)),
        )
    )

    logger = Logger(handler).with_attrs(service="billing")
    logger.info("service starting", version="1.4.2")

    http = logger.with_group("http")
    http.debug("request received", Attr("method", "POST"), path="/invoices")
    http.error("upstream timeout", upstream="ledger", body=b"\x00" * 128)

    # Existing stdlib logging call sites feed the same composition
    legacy = logging.getLogger("billing.legacy")
    legacy.propagate = False
    legacy.addHandler(LogweaveHandler(handler, include_attrs=["name"]))
    legacy.warning("falling back to cached rates", extra={"age_seconds": 312})

    # Raise the terminal threshold at runtime
    console_level.set(ERROR)
    logger.info("dropped, below every threshold")
    logger.error("shutting down", uptime=round(time.process_time(), 3))

    drain(timeout=5.0)
