"""Minimal helpers for opt-in debug/instrumentation hooks."""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from typing import Callable, Iterator

logger = logging.getLogger(__name__)

DEBUG_FOURIERLAB = os.getenv("FOURIERLAB_DEBUG", "").lower() in {"1", "true", "yes", "on"}


def debug_enabled() -> bool:
    """Return True when lightweight instrumentation should run."""
    return DEBUG_FOURIERLAB


@contextmanager
def time_block(
    label: str,
    *,
    emitter: Callable[[str], None] | None = None,
    force: bool = False,
) -> Iterator[None]:
    """
    Context manager that emits elapsed time when debugging is enabled.

    Messages go to ``emitter`` when given, otherwise to this module's logger
    at DEBUG level. ``force`` times the block even without ``FOURIERLAB_DEBUG``.
    """
    if not (DEBUG_FOURIERLAB or force):
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        message = f"{label} took {elapsed_ms:.3f} ms"
        if emitter is not None:
            emitter(message)
        else:
            logger.debug(message)
