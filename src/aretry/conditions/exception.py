r"""Conditions matching the kind of the failure."""

from __future__ import annotations

__all__ = ["UNRECOVERABLE_EXCEPTIONS", "ExceptionIn", "exception_in"]

import asyncio
import concurrent.futures
from typing import TYPE_CHECKING

from aretry.conditions.base import BaseCondition

if TYPE_CHECKING:
    from aretry.context import Context


class ExceptionIn(BaseCondition):
    """Condition that holds if the failure is one of the given kinds.

    The exact type of the failure is looked up first, then the failure
    is matched with ``isinstance`` against every registered kind, so
    registering a base class (e.g. ``OSError``) also matches its
    subclasses (e.g. ``ConnectionError``).

    Args:
        *kinds: The exception classes to match.

    Raises:
        ValueError: If no kind is given.
        TypeError: If a kind is not an exception class.

    Example:
        ```pycon
        >>> from aretry.conditions import ExceptionIn
        >>> from aretry.context import Context
        >>> condition = ExceptionIn(OSError)
        >>> condition.check(Context(0.0, 0.0, 1, ConnectionError()))
        True
        >>> condition.check(Context(0.0, 0.0, 1, KeyError()))
        False

        ```
    """

    def __init__(self, *kinds: type[BaseException]) -> None:
        if not kinds:
            msg = "at least one exception kind is required"
            raise ValueError(msg)
        for kind in kinds:
            if not (isinstance(kind, type) and issubclass(kind, BaseException)):
                msg = f"kind must be an exception class, got {kind!r}"
                raise TypeError(msg)
        self.kinds: tuple[type[BaseException], ...] = tuple(dict.fromkeys(kinds))
        self._exact = frozenset(self.kinds)

    def check(self, context: Context) -> bool:
        failure = context.failure
        return type(failure) in self._exact or isinstance(failure, self.kinds)

    def describe(self, context: Context) -> str:
        return f"context.failure={context.failure!r} is in ({self._names()})"

    def _names(self) -> str:
        return ", ".join(kind.__name__ for kind in self.kinds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExceptionIn):
            return NotImplemented
        return self._exact == other._exact

    def __hash__(self) -> int:
        return hash((ExceptionIn, self._exact))

    def __repr__(self) -> str:
        return f"ExceptionIn({self._names()})"

    def __str__(self) -> str:
        return f"context.failure is in ({self._names()})"


def exception_in(*kinds: type[BaseException]) -> ExceptionIn:
    """Create an ``ExceptionIn`` condition.

    Args:
        *kinds: The exception classes to match.

    Returns:
        The condition.
    """
    return ExceptionIn(*kinds)


# Failures that must never be silently retried:
# - cancellation signals
# - programming defects
# - fatal interpreter errors
UNRECOVERABLE_EXCEPTIONS = ExceptionIn(
    concurrent.futures.CancelledError,
    asyncio.CancelledError,
    KeyboardInterrupt,
    SystemExit,
    TypeError,
    ValueError,
    AttributeError,
    NameError,
    LookupError,
    AssertionError,
    NotImplementedError,
    MemoryError,
    SystemError,
    RecursionError,
)
