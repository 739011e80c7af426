r"""Integration tests for blocking and asynchronous calls with real
waits."""

from __future__ import annotations

import asyncio
import threading
import time

import pytest

from aretry import RetryCancelledError, RetryPolicy, retry
from aretry.backoff import FixedDelay, FixedInterval
from aretry.conditions import MaxAttempts, MaxTimeElapsed


def always_timeout() -> str:
    msg = "slow"
    raise TimeoutError(msg)


def test_call_waits_fixed_delay() -> None:
    """Test that call blocks for the backoff between attempts."""
    attempts = []
    policy = RetryPolicy(backoff_policy=FixedDelay(0.05), failure_listeners=())

    def work() -> str:
        attempts.append(time.monotonic())
        if len(attempts) < 3:
            msg = "refused"
            raise ConnectionError(msg)
        return "done"

    assert policy.call(work) == "done"
    assert attempts[1] - attempts[0] >= 0.05
    assert attempts[2] - attempts[1] >= 0.05


def test_call_time_budget() -> None:
    """Test that a time budget bounds the total retry time."""
    policy = RetryPolicy(
        retry_condition=MaxTimeElapsed(0.2),
        backoff_policy=FixedInterval(0.05),
        failure_listeners=(),
    )
    start = time.monotonic()

    with pytest.raises(TimeoutError, match=r"slow"):
        policy.call(always_timeout)

    assert time.monotonic() - start < 2.0


def test_call_cancel_from_other_thread() -> None:
    """Test that setting the cancel event interrupts a long wait."""
    event = threading.Event()
    policy = RetryPolicy(backoff_policy=FixedDelay(30.0), failure_listeners=())
    timer = threading.Timer(0.05, event.set)
    timer.start()
    start = time.monotonic()

    try:
        with pytest.raises(RetryCancelledError):
            policy.call(always_timeout, cancel_event=event)
    finally:
        timer.cancel()

    assert time.monotonic() - start < 5.0


@pytest.mark.asyncio
async def test_call_async_concurrent_tasks() -> None:
    """Test that concurrent tasks retry independently."""
    policy = RetryPolicy(
        retry_condition=MaxAttempts(3), backoff_policy=FixedDelay(0.01), failure_listeners=()
    )

    @retry(policy)
    async def fetch(key: int, attempts: list[int]) -> int:
        attempts.append(key)
        if len(attempts) < 3:
            msg = "reset"
            raise ConnectionResetError(msg)
        return key

    histories: list[list[int]] = [[] for _ in range(20)]
    results = await asyncio.gather(*(fetch(i, histories[i]) for i in range(20)))

    assert results == list(range(20))
    assert all(len(history) == 3 for history in histories)
