r"""Fixed interval backoff policy."""

from __future__ import annotations

__all__ = ["FixedInterval"]

from datetime import timedelta
from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffPolicy
from aretry.utils.validation import validate_non_negative

if TYPE_CHECKING:
    from aretry.context import Context


class FixedInterval(BaseBackoffPolicy):
    """Backoff policy aligning attempts on a fixed schedule.

    The n-th attempt is scheduled ``n * interval`` seconds after the
    invocation started, where ``n`` is the attempt count of the failure.
    The wait fills the remainder of the current interval; an attempt that
    took longer than the interval gets no extra wait, so slow attempts
    never push the schedule further back.

    Args:
        interval: The interval in seconds, or a ``timedelta``. Must be >= 0.

    Raises:
        ValueError: If ``interval`` is negative.

    Example:
        ```pycon
        >>> from aretry.backoff import FixedInterval
        >>> from aretry.context import Context
        >>> backoff = FixedInterval(1.0)
        >>> backoff.backoff(Context(start_time=0.0, now=2.5, attempt_count=3, failure=OSError()))
        0.5
        >>> backoff.backoff(Context(start_time=0.0, now=2.5, attempt_count=2, failure=OSError()))
        0.0

        ```
    """

    def __init__(self, interval: float | timedelta) -> None:
        if isinstance(interval, timedelta):
            interval = interval.total_seconds()
        validate_non_negative("interval", interval)
        self.interval = float(interval)

    def backoff(self, context: Context) -> float:
        target = context.attempt_count * self.interval
        return max(0.0, target - context.elapsed)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedInterval):
            return NotImplemented
        return self.interval == other.interval

    def __hash__(self) -> int:
        return hash((FixedInterval, self.interval))

    def __repr__(self) -> str:
        return f"FixedInterval(interval={self.interval})"
