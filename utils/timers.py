"""
Timing Utilities — Shared Clock and Scheduling Helpers

THIS MODULE DEFINES NO COMMANDS.

Provides reusable utilities for:
- Wall-clock timestamps
- Randomized delays
- Cancellable waits
"""

from __future__ import annotations

import asyncio
import random
import time
from typing import Callable, Optional

Clock = Callable[[], float]

def wall_time() -> float:
    """Return seconds since the epoch. Word timestamps use this clock."""
    return time.time()

def validate_delay_bounds(min_seconds: float, max_seconds: float) -> None:
    if min_seconds < 0 or max_seconds < 0:
        raise ValueError("Delay bounds must be non-negative")
    if max_seconds < min_seconds:
        raise ValueError("max_seconds must be >= min_seconds")

def randomized_delay_value(
    min_seconds: float,
    max_seconds: float,
    *,
    rng: Optional[random.Random] = None,
) -> float:
    """Return a randomized delay duration without sleeping."""
    validate_delay_bounds(min_seconds, max_seconds)
    source = rng or random
    return source.uniform(min_seconds, max_seconds)

async def wait_or_stop(stop_event: asyncio.Event, timeout: float) -> bool:
    """Wait up to `timeout` seconds for `stop_event`.

    Returns True if the event was set, False if the timeout elapsed.
    """
    if stop_event.is_set():
        return True
    try:
        await asyncio.wait_for(stop_event.wait(), timeout=max(0.0, timeout))
    except asyncio.TimeoutError:
        return False
    return True
