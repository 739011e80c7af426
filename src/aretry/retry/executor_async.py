r"""Asynchronous retry executor.

This module provides the ``AsyncRetryExecutor`` class running a
coroutine-returning unit of work with retries, waiting with
``asyncio.sleep`` so other tasks run during backoff waits.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
from typing import TYPE_CHECKING, TypeVar

from aretry.context import Context
from aretry.retry.decider import RetryDecider
from aretry.retry.executor_core import log_give_up, log_success
from aretry.retry.manager import ListenerManager
from aretry.utils.sleep import cap_wait, resolve_clock

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.policy import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncRetryExecutor:
    """Executes an asynchronous unit of work with retries.

    Cancelling the task awaiting ``execute`` raises
    ``asyncio.CancelledError`` in the attempt or in the backoff wait;
    it is never retried.

    Attributes:
        policy: The retry policy.
        decider: Evaluates failed attempts.
        listeners: Notifies the failure listeners.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import RetryPolicy
        >>> from aretry.retry import AsyncRetryExecutor
        >>> async def work() -> str:
        ...     return "done"
        ...
        >>> asyncio.run(AsyncRetryExecutor(RetryPolicy()).execute(work))
        'done'

        ```
    """

    def __init__(self, policy: RetryPolicy) -> None:
        """Initialize the executor.

        Args:
            policy: The retry policy to apply.
        """
        self.policy = policy
        self.decider = RetryDecider(policy.condition, policy.backoff_policy)
        self.listeners = ListenerManager(policy.failure_listeners)
        self.clock = resolve_clock(policy.clock)

    async def execute(self, work: Callable[[], Awaitable[T]], name: str = "call") -> T:
        """Await ``work()`` until it succeeds or the policy gives up.

        Args:
            work: The zero-argument function returning an awaitable.
            name: Name of the invocation, used in log messages.

        Returns:
            The result of the first successful attempt.

        Raises:
            Exception: The failure of the last attempt, unchanged, when
                the policy gives up.
            FailureListenerError: If a failure listener raises.
        """
        start_time = self.clock()
        attempt_count = 1
        while True:
            try:
                result = await work()
            except Exception as exc:
                context = Context(start_time, self.clock(), attempt_count, exc)
                decision = self.decider.decide(context)
                self.listeners.notify(context, decision.allow_retry, decision.backoff)
                if not decision.allow_retry:
                    log_give_up(name, context)
                    raise
                backoff = cap_wait(decision.backoff)
                logger.debug(f"Waiting {backoff:.3f}s before retry")
                await asyncio.sleep(backoff)
                if not self.decider.recheck(context.stamped(self.clock())):
                    log_give_up(name, context)
                    raise
                attempt_count += 1
            else:
                log_success(name, attempt_count)
                return result
