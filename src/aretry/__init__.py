r"""aretry - Retry decision engine for Python.

This package decides, after each failure of a unit of work, whether to
retry, how long to wait before the next attempt, and when to give up,
while notifying listeners of every decision.

Key Features:
    - Composable retry conditions (attempt limit, time budget, exception
      kinds, custom predicates) with ``~``, ``&`` and ``|``
    - Backoff policies: fixed delay, schedule-aligned fixed interval,
      overflow-safe exponential, random jitter, and sums of them
    - Blocking ``call``, non-blocking ``submit`` on a scheduler, and
      ``asyncio`` support with ``call_async``
    - Original failures re-raised unchanged on give-up
    - Failure listeners for logging and metrics
    - Decorator API

Example:
    ```pycon
    >>> from aretry import RetryPolicy, retry
    >>> from aretry.backoff import ExponentialDelay
    >>> from aretry.conditions import MaxAttempts, MaxTimeElapsed
    >>> policy = RetryPolicy(
    ...     retry_condition=MaxAttempts(5) & MaxTimeElapsed(30.0),
    ...     backoff_policy=ExponentialDelay(0.5, 10.0),
    ... )
    >>> policy.call(lambda: "done")
    'done'
    >>> @retry(policy)
    ... def fetch() -> str:
    ...     return "data"
    ...
    >>> fetch()
    'data'

    ```
"""

from __future__ import annotations

__all__ = [
    "Context",
    "FailureListenerError",
    "RetryCancelledError",
    "RetryPolicy",
    "RetryPolicyBuilder",
    "ScheduledThreadPool",
    "__version__",
    "retry",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.context import Context
from aretry.exceptions import FailureListenerError, RetryCancelledError
from aretry.policy import RetryPolicy, RetryPolicyBuilder
from aretry.scheduler import ScheduledThreadPool

# Imported last: loading the ``aretry.retry`` subpackage above rebinds the
# ``retry`` attribute of this package to the module.
from aretry.decorator import retry  # noqa: E402

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
