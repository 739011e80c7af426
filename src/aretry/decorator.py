r"""Decorator applying a retry policy to a function.

Example:
    ```pycon
    >>> from aretry import RetryPolicy, retry
    >>> from aretry.backoff import NONE
    >>> from aretry.conditions import MaxAttempts
    >>> calls = []
    >>> @retry(RetryPolicy(retry_condition=MaxAttempts(3), backoff_policy=NONE))
    ... def fetch(key: str) -> str:
    ...     calls.append(key)
    ...     if len(calls) == 1:
    ...         raise TimeoutError("slow")
    ...     return key.upper()
    ...
    >>> fetch("a")
    'A'
    >>> calls
    ['a', 'a']

    ```
"""

from __future__ import annotations

__all__ = ["retry", "wrap"]

import functools
import inspect
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.policy import RetryPolicy

F = TypeVar("F", bound="Callable[..., Any]")


def wrap(policy: RetryPolicy, func: F, name: str | None = None) -> F:
    """Wrap ``func`` so that every call is retried with ``policy``.

    Each call of the wrapper is one invocation: its arguments are bound
    once and reused by every attempt.

    Args:
        policy: The retry policy.
        func: The function to wrap. Coroutine functions are retried with
            ``RetryPolicy.call_async``.
        name: Name used in log messages. Defaults to the qualified name
            of ``func``.

    Returns:
        The wrapped function.
    """
    label = name if name is not None else getattr(func, "__qualname__", repr(func))

    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            return await policy.call_async(lambda: func(*args, **kwargs), name=label)

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return policy.call(lambda: func(*args, **kwargs), name=label)

    return wrapper  # type: ignore[return-value]


def retry(policy: RetryPolicy | None = None, name: str | None = None) -> Callable[[F], F]:
    """Decorator retrying every call of the decorated function.

    Args:
        policy: The retry policy. Defaults to ``RetryPolicy()``.
        name: Name used in log messages.

    Returns:
        The decorator.
    """
    if policy is None:
        from aretry.policy import RetryPolicy  # noqa: PLC0415

        policy = RetryPolicy()

    def decorator(func: F) -> F:
        return wrap(policy, func, name=name)

    return decorator
