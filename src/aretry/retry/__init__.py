r"""Retry executors and their collaborators.

Public API:
    - RetryDecider: Evaluates the retry condition and the backoff policy
    - ListenerManager: Notifies failure listeners
    - RetryExecutor: Blocking retry loop
    - AsyncRetryExecutor: Asynchronous retry loop
    - ScheduledRetryExecutor: Non-blocking retry loop driven by a scheduler
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "Decision",
    "ListenerManager",
    "RetryDecider",
    "RetryExecutor",
    "ScheduledRetryExecutor",
]

from aretry.retry.decider import Decision, RetryDecider
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.retry.executor_scheduled import ScheduledRetryExecutor
from aretry.retry.manager import ListenerManager
