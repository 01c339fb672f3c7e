"""Sleep and pacing helpers shared by every retry and pacing path."""

import asyncio
from typing import Awaitable, Callable

# Fixed retry ladder: wait 1s, 2s, 4s (indexed by failed attempt)
BACKOFF_SCHEDULE_MS: tuple[int, ...] = (1000, 2000, 4000)
MAX_ATTEMPTS = 3

Sleeper = Callable[[float], Awaitable[None]]


async def sleep(ms: float) -> None:
    """Suspend for at least ``ms`` milliseconds. Non-positive durations return immediately."""
    if ms <= 0:
        return
    await asyncio.sleep(ms / 1000.0)
