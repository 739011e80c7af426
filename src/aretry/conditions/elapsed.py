r"""Condition limiting the total time spent retrying."""

from __future__ import annotations

__all__ = ["MaxTimeElapsed", "max_time_elapsed", "max_time_elapsed_in_seconds"]

from datetime import timedelta
from typing import TYPE_CHECKING

from aretry.conditions.base import BaseCondition
from aretry.utils.validation import validate_positive

if TYPE_CHECKING:
    from aretry.context import Context


class MaxTimeElapsed(BaseCondition):
    """Condition that holds while less than ``duration`` seconds elapsed
    since the invocation started.

    Args:
        duration: The time budget in seconds, or a ``timedelta``.
            Must be > 0.

    Raises:
        ValueError: If ``duration`` is not positive.

    Example:
        ```pycon
        >>> from aretry.conditions import MaxTimeElapsed
        >>> from aretry.context import Context
        >>> condition = MaxTimeElapsed(5.0)
        >>> condition.check(Context(0.0, 4.9, 1, OSError()))
        True
        >>> condition.check(Context(0.0, 5.0, 1, OSError()))
        False

        ```
    """

    def __init__(self, duration: float | timedelta) -> None:
        if isinstance(duration, timedelta):
            duration = duration.total_seconds()
        validate_positive("duration", duration)
        self.duration = float(duration)

    def check(self, context: Context) -> bool:
        return context.elapsed < self.duration

    def describe(self, context: Context) -> str:
        return f"context.elapsed={context.elapsed:.3f}s < {self.duration}s"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MaxTimeElapsed):
            return NotImplemented
        return self.duration == other.duration

    def __hash__(self) -> int:
        return hash((MaxTimeElapsed, self.duration))

    def __repr__(self) -> str:
        return f"MaxTimeElapsed(duration={self.duration})"

    def __str__(self) -> str:
        return f"context.elapsed < {self.duration}s"


def max_time_elapsed(duration: float | timedelta) -> MaxTimeElapsed:
    """Create a ``MaxTimeElapsed`` condition.

    Args:
        duration: The time budget in seconds, or a ``timedelta``.

    Returns:
        The condition.
    """
    return MaxTimeElapsed(duration)


def max_time_elapsed_in_seconds(seconds: int) -> MaxTimeElapsed:
    """Create a ``MaxTimeElapsed`` condition from a whole number of
    seconds."""
    return MaxTimeElapsed(timedelta(seconds=seconds))
