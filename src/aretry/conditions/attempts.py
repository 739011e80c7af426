r"""Condition limiting the number of attempts."""

from __future__ import annotations

__all__ = ["MaxAttempts", "max_attempts"]

from typing import TYPE_CHECKING

from aretry.conditions.base import BaseCondition

if TYPE_CHECKING:
    from aretry.context import Context


class MaxAttempts(BaseCondition):
    """Condition that holds while fewer than ``amount`` attempts were made.

    Args:
        amount: The maximum number of attempts. Must be > 1.

    Raises:
        ValueError: If ``amount`` is not greater than 1.

    Example:
        ```pycon
        >>> from aretry.conditions import MaxAttempts
        >>> from aretry.context import Context
        >>> condition = MaxAttempts(3)
        >>> condition.check(Context(0.0, 0.0, 2, OSError()))
        True
        >>> condition.check(Context(0.0, 0.0, 3, OSError()))
        False

        ```
    """

    def __init__(self, amount: int) -> None:
        if amount <= 1:
            msg = f"amount must be greater than 1, got {amount}"
            raise ValueError(msg)
        self.amount = amount

    def check(self, context: Context) -> bool:
        return context.attempt_count < self.amount

    def describe(self, context: Context) -> str:
        return f"context.attempt_count={context.attempt_count} < {self.amount}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MaxAttempts):
            return NotImplemented
        return self.amount == other.amount

    def __hash__(self) -> int:
        return hash((MaxAttempts, self.amount))

    def __repr__(self) -> str:
        return f"MaxAttempts(amount={self.amount})"

    def __str__(self) -> str:
        return f"context.attempt_count < {self.amount}"


def max_attempts(amount: int) -> MaxAttempts:
    """Create a ``MaxAttempts`` condition.

    Args:
        amount: The maximum number of attempts. Must be > 1.

    Returns:
        The condition.
    """
    return MaxAttempts(amount)
