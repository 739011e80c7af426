r"""Scheduled retry executor.

This module provides the ``ScheduledRetryExecutor`` class running a
unit of work on a ``Scheduler`` and realizing backoff waits by
scheduling the next attempt, so no thread is ever blocked waiting.
"""

from __future__ import annotations

__all__ = ["ScheduledRetryExecutor"]

import logging
from concurrent.futures import Future
from typing import TYPE_CHECKING, Generic, TypeVar

from aretry.context import Context
from aretry.retry.decider import RetryDecider
from aretry.retry.executor_core import (
    complete_exceptionally,
    complete_with_result,
    log_give_up,
    log_success,
)
from aretry.retry.manager import ListenerManager
from aretry.utils.sleep import resolve_clock

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.policy import RetryPolicy
    from aretry.scheduler import Scheduler

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


class ScheduledRetryExecutor:
    """Submits a unit of work with retries to a scheduler.

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

    def submit(self, scheduler: Scheduler, work: Callable[[], T], name: str = "call") -> Future[T]:
        """Submit ``work`` and return immediately.

        The first attempt is handed to ``scheduler.execute``, every retry
        to ``scheduler.schedule`` with the computed backoff. Cancelling the
        returned future stops any further attempt from starting; an
        attempt already running is not interrupted.

        Args:
            scheduler: The scheduler running the attempts. Owned by the
                caller.
            work: The zero-argument unit of work.
            name: Name of the invocation, used in log messages.

        Returns:
            A future completed with the result of the first successful
            attempt, or with the failure of the last attempt when the
            policy gives up or the scheduler rejects a retry.
        """
        future: Future[T] = Future()
        task = _RetryTask(self, scheduler, work, name, future)
        scheduler.execute(task.run)
        return future


class _RetryTask(Generic[T]):
    """State of one submitted invocation.

    Attempts never overlap: the next one is only scheduled once the
    current one has failed, so the counters need no locking.
    """

    def __init__(
        self,
        executor: ScheduledRetryExecutor,
        scheduler: Scheduler,
        work: Callable[[], T],
        name: str,
        future: Future[T],
    ) -> None:
        self.executor = executor
        self.scheduler = scheduler
        self.work = work
        self.name = name
        self.future = future
        self.start_time = executor.clock()
        self.attempt_count = 1
        self.last_context: Context | None = None

    def run(self) -> None:
        try:
            self._run()
        except BaseException as exc:
            complete_exceptionally(self.future, exc)
            if not isinstance(exc, Exception):
                raise

    def _run(self) -> None:
        if self.future.cancelled():
            logger.debug(f"{self.name} cancelled before attempt {self.attempt_count}")
            return
        if self.last_context is not None and not self.executor.decider.recheck(
            self.last_context.stamped(self.executor.clock())
        ):
            log_give_up(self.name, self.last_context)
            complete_exceptionally(self.future, self.last_context.failure)
            return
        try:
            result = self.work()
        except Exception as exc:
            self._on_failure(exc)
        else:
            log_success(self.name, self.attempt_count)
            complete_with_result(self.future, result)

    def _on_failure(self, exc: Exception) -> None:
        context = Context(self.start_time, self.executor.clock(), self.attempt_count, exc)
        decision = self.executor.decider.decide(context)
        self.executor.listeners.notify(context, decision.allow_retry, decision.backoff)
        if not decision.allow_retry:
            log_give_up(self.name, context)
            complete_exceptionally(self.future, exc)
            return
        if self.future.cancelled():
            logger.debug(f"{self.name} cancelled, not scheduling attempt {self.attempt_count + 1}")
            return
        self.attempt_count += 1
        self.last_context = context
        try:
            self.scheduler.schedule(self.run, decision.backoff)
        except RuntimeError:
            logger.debug(f"{self.name} could not schedule attempt {self.attempt_count}")
            log_give_up(self.name, context)
            complete_exceptionally(self.future, exc)
