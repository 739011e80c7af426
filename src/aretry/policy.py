r"""Retry policy configuration and entry points.

A ``RetryPolicy`` is an immutable configuration combining a retry
condition, an abort condition, a backoff policy and failure listeners.
It applies them around a unit of work in three modes:

- ``call``: blocking, waits on the calling thread
- ``submit``: non-blocking, reschedules itself on a ``Scheduler``
- ``call_async``: awaits a coroutine, waits with ``asyncio.sleep``

A policy holds no per-invocation state and can be shared freely between
threads and tasks.

Example:
    ```pycon
    >>> from aretry import RetryPolicy
    >>> from aretry.backoff import NONE
    >>> from aretry.conditions import MaxAttempts
    >>> attempts = []
    >>> def flaky() -> str:
    ...     attempts.append(1)
    ...     if len(attempts) < 3:
    ...         raise ConnectionError("boom")
    ...     return "done"
    ...
    >>> policy = RetryPolicy(retry_condition=MaxAttempts(5), backoff_policy=NONE)
    >>> policy.call(flaky)
    'done'
    >>> len(attempts)
    3

    ```
"""

from __future__ import annotations

__all__ = ["RetryPolicy", "RetryPolicyBuilder"]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.backoff.base import BaseBackoffPolicy
from aretry.backoff.exponential import ExponentialDelay
from aretry.conditions.attempts import MaxAttempts
from aretry.conditions.base import BaseCondition
from aretry.conditions.exception import UNRECOVERABLE_EXCEPTIONS
from aretry.config import DEFAULT_INIT_INTERVAL, DEFAULT_MAX_ATTEMPTS, DEFAULT_MAX_INTERVAL
from aretry.listeners import LoggingFailureListener
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
from aretry.retry.executor_scheduled import ScheduledRetryExecutor

if TYPE_CHECKING:
    import threading
    from collections.abc import Awaitable, Callable, Iterable
    from concurrent.futures import Future

    from aretry.listeners import FailureListener
    from aretry.scheduler import Scheduler

T = TypeVar("T")
F = TypeVar("F", bound="Callable[..., Any]")


def _default_retry_condition() -> BaseCondition:
    return MaxAttempts(DEFAULT_MAX_ATTEMPTS)


def _default_backoff_policy() -> BaseBackoffPolicy:
    return ExponentialDelay(DEFAULT_INIT_INTERVAL, DEFAULT_MAX_INTERVAL)


def _default_failure_listeners() -> tuple[FailureListener, ...]:
    return (LoggingFailureListener(),)


@dataclass(frozen=True)
class RetryPolicy:
    """Immutable retry configuration.

    Args:
        retry_condition: Condition that must hold for a failed attempt to
            be retried. Defaults to ``MaxAttempts(3)``.
        backoff_policy: Policy computing the wait before a retry.
            Defaults to ``ExponentialDelay(1.0, 60.0)``.
        abort_condition: Condition forcing an immediate give-up when it
            holds, regardless of ``retry_condition``. Defaults to
            ``UNRECOVERABLE_EXCEPTIONS`` so cancellations and programming
            errors are never retried.
        failure_listeners: Listeners notified of every failed attempt, in
            order. Defaults to one ``LoggingFailureListener``.
        clock: Optional clock returning seconds. Defaults to
            ``time.monotonic``.
        sleeper: Optional blocking sleep function used by ``call``.
            Defaults to ``time.sleep``.

    Attributes:
        condition: The effective retry condition,
            ``~abort_condition & retry_condition``.

    Raises:
        TypeError: If a condition or the backoff policy has the wrong
            type, or a listener is not callable.
    """

    retry_condition: BaseCondition = field(default_factory=_default_retry_condition)
    backoff_policy: BaseBackoffPolicy = field(default_factory=_default_backoff_policy)
    abort_condition: BaseCondition = UNRECOVERABLE_EXCEPTIONS
    failure_listeners: tuple[FailureListener, ...] = field(
        default_factory=_default_failure_listeners
    )
    clock: Callable[[], float] | None = field(default=None, repr=False, compare=False)
    sleeper: Callable[[float], None] | None = field(default=None, repr=False, compare=False)
    condition: BaseCondition = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the configuration and build the effective condition.

        Raises:
            TypeError: If a parameter has the wrong type.
        """
        for name in ("retry_condition", "abort_condition"):
            value = getattr(self, name)
            if not isinstance(value, BaseCondition):
                msg = f"{name} must be a BaseCondition, got {type(value).__name__}"
                raise TypeError(msg)
        if not isinstance(self.backoff_policy, BaseBackoffPolicy):
            msg = (
                "backoff_policy must be a BaseBackoffPolicy, "
                f"got {type(self.backoff_policy).__name__}"
            )
            raise TypeError(msg)
        listeners = tuple(self.failure_listeners)
        for listener in listeners:
            if not callable(listener):
                msg = f"failure listener must be callable, got {listener!r}"
                raise TypeError(msg)
        object.__setattr__(self, "failure_listeners", listeners)
        object.__setattr__(self, "condition", ~self.abort_condition & self.retry_condition)

    def call(
        self,
        work: Callable[[], T],
        name: str = "call",
        cancel_event: threading.Event | None = None,
    ) -> T:
        """Call ``work`` with retries, blocking during backoff waits.

        Args:
            work: The zero-argument unit of work.
            name: Name of the invocation, used in log messages.
            cancel_event: Optional event cancelling the retry loop while
                it waits for a backoff.

        Returns:
            The result of the first successful attempt.

        Raises:
            Exception: The original failure of the last attempt when the
                policy gives up.
            RetryCancelledError: If ``cancel_event`` is set while waiting.
            FailureListenerError: If a failure listener raises.
        """
        return RetryExecutor(self).execute(work, name=name, cancel_event=cancel_event)

    def submit(self, scheduler: Scheduler, work: Callable[[], T], name: str = "call") -> Future[T]:
        """Submit ``work`` with retries to ``scheduler``.

        Returns immediately. Backoff waits are realized by scheduling the
        next attempt, never by blocking a thread.

        Args:
            scheduler: The scheduler running the attempts. Owned by the
                caller.
            work: The zero-argument unit of work.
            name: Name of the invocation, used in log messages.

        Returns:
            A ``concurrent.futures.Future`` completed with the result, or
            with the original failure when the policy gives up. Cancelling
            it prevents any further attempt.
        """
        return ScheduledRetryExecutor(self).submit(scheduler, work, name=name)

    async def call_async(self, work: Callable[[], Awaitable[T]], name: str = "call") -> T:
        """Await ``work()`` with retries, waiting with ``asyncio.sleep``.

        Args:
            work: The zero-argument function returning an awaitable.
            name: Name of the invocation, used in log messages.

        Returns:
            The result of the first successful attempt.

        Raises:
            Exception: The original failure of the last attempt when the
                policy gives up.
            FailureListenerError: If a failure listener raises.
        """
        return await AsyncRetryExecutor(self).execute(work, name=name)

    def wrap(self, func: F, name: str | None = None) -> F:
        """Wrap ``func`` so that every call is retried with this policy.

        Coroutine functions are retried with ``call_async``.

        Args:
            func: The function to wrap.
            name: Name used in log messages. Defaults to the qualified
                name of ``func``.

        Returns:
            The wrapped function.
        """
        from aretry.decorator import wrap  # noqa: PLC0415

        return wrap(self, func, name=name)

    def merge(self, **overrides: Any) -> RetryPolicy:
        """Create a new policy with the given parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new policy. This one is unchanged.

        Example:
            ```pycon
            >>> from aretry import RetryPolicy
            >>> from aretry.conditions import MaxAttempts
            >>> policy = RetryPolicy()
            >>> policy.merge(retry_condition=MaxAttempts(10)).retry_condition
            MaxAttempts(amount=10)
            >>> policy.retry_condition
            MaxAttempts(amount=3)

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert the policy to a dictionary of constructor parameters.

        Returns:
            Dictionary with the policy parameters, suitable for
            ``RetryPolicy(**params)``.

        Example:
            ```pycon
            >>> from aretry import RetryPolicy
            >>> params = RetryPolicy().to_dict()
            >>> params["retry_condition"]
            MaxAttempts(amount=3)

            ```
        """
        return {
            "retry_condition": self.retry_condition,
            "backoff_policy": self.backoff_policy,
            "abort_condition": self.abort_condition,
            "failure_listeners": self.failure_listeners,
            "clock": self.clock,
            "sleeper": self.sleeper,
        }


class RetryPolicyBuilder:
    """Fluent builder of ``RetryPolicy``.

    Parameters not set on the builder keep the ``RetryPolicy`` defaults,
    or the values of ``prototype`` when given.

    Args:
        prototype: Optional policy to start from.

    Example:
        ```pycon
        >>> from aretry import RetryPolicyBuilder
        >>> from aretry.backoff import FixedDelay
        >>> from aretry.conditions import MaxAttempts
        >>> policy = (
        ...     RetryPolicyBuilder()
        ...     .retry_condition(MaxAttempts(5))
        ...     .backoff_policy(FixedDelay(0.5))
        ...     .build()
        ... )
        >>> policy.backoff_policy
        FixedDelay(delay=0.5)

        ```
    """

    def __init__(self, prototype: RetryPolicy | None = None) -> None:
        self._prototype = prototype
        self._overrides: dict[str, Any] = {}

    def retry_condition(self, retry_condition: BaseCondition) -> RetryPolicyBuilder:
        """Set the retry condition."""
        self._overrides["retry_condition"] = retry_condition
        return self

    def abort_condition(self, abort_condition: BaseCondition) -> RetryPolicyBuilder:
        """Set the abort condition."""
        self._overrides["abort_condition"] = abort_condition
        return self

    def backoff_policy(self, backoff_policy: BaseBackoffPolicy) -> RetryPolicyBuilder:
        """Set the backoff policy."""
        self._overrides["backoff_policy"] = backoff_policy
        return self

    def failure_listeners(self, listeners: Iterable[FailureListener]) -> RetryPolicyBuilder:
        """Replace the failure listeners."""
        self._overrides["failure_listeners"] = tuple(listeners)
        return self

    def add_failure_listener(self, listener: FailureListener) -> RetryPolicyBuilder:
        """Append a failure listener to the current ones."""
        current = self._overrides.get("failure_listeners")
        if current is None:
            current = (
                self._prototype.failure_listeners
                if self._prototype is not None
                else _default_failure_listeners()
            )
        self._overrides["failure_listeners"] = (*current, listener)
        return self

    def clock(self, clock: Callable[[], float]) -> RetryPolicyBuilder:
        """Set the clock."""
        self._overrides["clock"] = clock
        return self

    def sleeper(self, sleeper: Callable[[float], None]) -> RetryPolicyBuilder:
        """Set the blocking sleep function."""
        self._overrides["sleeper"] = sleeper
        return self

    def build(self) -> RetryPolicy:
        """Build the policy.

        Raises:
            TypeError: If a parameter has the wrong type.
        """
        if self._prototype is None:
            return RetryPolicy(**self._overrides)
        return replace(self._prototype, **self._overrides)
