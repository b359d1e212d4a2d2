import asyncio
import time

import pytest

from pagenav.navigator.poller import poll_until_true_or_timeout


@pytest.mark.asyncio
async def test_poller_returns_true_after_first_tick():
    seen = []

    def predicate(elapsed_ms):
        seen.append(elapsed_ms)
        return True

    started = time.monotonic()
    result = await poll_until_true_or_timeout(20, 5_000, predicate)
    waited = time.monotonic() - started

    assert result is True
    assert len(seen) == 1
    assert seen[0] > 0
    assert waited < 1.0


@pytest.mark.asyncio
async def test_poller_stops_on_first_truthy_result():
    calls = []

    def predicate(elapsed_ms):
        calls.append(elapsed_ms)
        return len(calls) == 3

    assert await poll_until_true_or_timeout(5, 5_000, predicate) is True
    assert len(calls) == 3
    assert calls == sorted(calls)


@pytest.mark.asyncio
async def test_poller_times_out_with_bounded_overshoot():
    calls = []

    def predicate(elapsed_ms):
        calls.append(elapsed_ms)
        return False

    started = time.monotonic()
    result = await poll_until_true_or_timeout(20, 100, predicate)
    waited_ms = (time.monotonic() - started) * 1000

    assert result is False
    assert calls[-1] > 100
    assert all(elapsed <= 100 for elapsed in calls[:-1])
    assert waited_ms < 1_000


@pytest.mark.asyncio
async def test_poller_accepts_async_predicates():
    state = {"ready": False}

    async def predicate(elapsed_ms):
        await asyncio.sleep(0)
        if elapsed_ms > 30:
            state["ready"] = True
        return state["ready"]

    assert await poll_until_true_or_timeout(10, 2_000, predicate) is True
    assert state["ready"] is True
