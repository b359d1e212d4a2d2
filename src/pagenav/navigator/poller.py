"""Fixed-interval polling with a timeout."""

from __future__ import annotations

import asyncio
import inspect
from typing import Awaitable, Callable, Union

PollPredicate = Callable[[float], Union[bool, Awaitable[bool]]]


async def poll_until_true_or_timeout(
    interval_ms: float,
    timeout_ms: float,
    predicate: PollPredicate,
) -> bool:
    """
    Evaluate ``predicate(elapsed_ms)`` once per ``interval_ms`` until it is truthy.

    The first evaluation happens one interval after the call. Polling stops on
    the first truthy result (returns True) or on the first tick whose elapsed
    time exceeds ``timeout_ms`` (returns False), so completion may overshoot the
    timeout by up to one interval. There is no cancellation hook.
    """
    interval_s = max(0.0, float(interval_ms)) / 1000.0
    loop = asyncio.get_running_loop()
    started = loop.time()
    while True:
        await asyncio.sleep(interval_s)
        elapsed_ms = (loop.time() - started) * 1000.0
        result = predicate(elapsed_ms)
        if inspect.isawaitable(result):
            result = await result
        if result:
            return True
        if elapsed_ms > timeout_ms:
            return False
