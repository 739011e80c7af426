r"""Blocking retry executor.

This module provides the ``RetryExecutor`` class running a unit of work
on the calling thread and blocking it during backoff waits.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
from typing import TYPE_CHECKING, TypeVar

from aretry.context import Context
from aretry.exceptions import RetryCancelledError
from aretry.retry.decider import RetryDecider
from aretry.retry.executor_core import log_give_up, log_success
from aretry.retry.manager import ListenerManager
from aretry.utils.sleep import resolve_clock, resolve_sleeper, wait_for_backoff

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable

    from aretry.policy import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryExecutor:
    """Executes a unit of work with retries on the calling thread.

    The executor holds no per-invocation state: the attempt counter and
    the start time are local to ``execute``, so one executor can serve
    concurrent invocations.

    Attributes:
        policy: The retry policy.
        decider: Evaluates failed attempts.
        listeners: Notifies the failure listeners.
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
        self.sleeper = resolve_sleeper(policy.sleeper)

    def execute(
        self,
        work: Callable[[], T],
        name: str = "call",
        cancel_event: threading.Event | None = None,
    ) -> T:
        """Run ``work`` until it succeeds or the policy gives up.

        Each failure is evaluated against the effective retry condition.
        Listeners are notified once per failed attempt, before the wait
        or before giving up. After the wait the condition is checked again
        with a freshly stamped context, so time budgets exhausted during
        the wait stop the loop.

        Args:
            work: The zero-argument unit of work.
            name: Name of the invocation, used in log messages.
            cancel_event: Optional event cancelling the retry loop while
                it waits for a backoff.

        Returns:
            The result of the first successful attempt.

        Raises:
            Exception: The failure of the last attempt, unchanged, when
                the policy gives up.
            RetryCancelledError: If ``cancel_event`` is set while waiting.
            FailureListenerError: If a failure listener raises.
        """
        start_time = self.clock()
        attempt_count = 1
        while True:
            try:
                result = work()
            except Exception as exc:
                context = Context(start_time, self.clock(), attempt_count, exc)
                decision = self.decider.decide(context)
                self.listeners.notify(context, decision.allow_retry, decision.backoff)
                if not decision.allow_retry:
                    log_give_up(name, context)
                    raise
                if not wait_for_backoff(decision.backoff, self.sleeper, cancel_event):
                    logger.debug(f"{name} cancelled while waiting before attempt {attempt_count + 1}")
                    raise RetryCancelledError(name, attempt_count) from exc
                if not self.decider.recheck(context.stamped(self.clock())):
                    log_give_up(name, context)
                    raise
                attempt_count += 1
            else:
                log_success(name, attempt_count)
                return result
