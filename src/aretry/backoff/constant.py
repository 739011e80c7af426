r"""Constant backoff policies."""

from __future__ import annotations

__all__ = ["NONE", "FixedDelay", "NoBackoff", "fixed_delay_in_seconds"]

from datetime import timedelta
from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffPolicy
from aretry.utils.validation import validate_non_negative

if TYPE_CHECKING:
    from aretry.context import Context


class NoBackoff(BaseBackoffPolicy):
    """Backoff policy that never waits.

    Useful in tests and for idempotent operations that can be retried
    right away. Use the ``NONE`` instance.
    """

    def backoff(self, context: Context) -> float:  # noqa: ARG002
        return 0.0

    def __repr__(self) -> str:
        return "NONE"


class FixedDelay(BaseBackoffPolicy):
    """Fixed delay backoff policy.

    Returns the same delay for every retry, regardless of the attempt
    count or of the time already spent.

    Args:
        delay: The delay in seconds, or a ``timedelta``. Must be >= 0.

    Raises:
        ValueError: If ``delay`` is negative.

    Example:
        ```pycon
        >>> from aretry.backoff import FixedDelay
        >>> from aretry.context import Context
        >>> backoff = FixedDelay(2.5)
        >>> backoff.backoff(Context(0.0, 0.0, 1, OSError()))
        2.5
        >>> backoff.backoff(Context(0.0, 100.0, 10, OSError()))
        2.5

        ```
    """

    def __init__(self, delay: float | timedelta) -> None:
        if isinstance(delay, timedelta):
            delay = delay.total_seconds()
        validate_non_negative("delay", delay)
        self.delay = float(delay)

    def backoff(self, context: Context) -> float:  # noqa: ARG002
        return self.delay

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedDelay):
            return NotImplemented
        return self.delay == other.delay

    def __hash__(self) -> int:
        return hash((FixedDelay, self.delay))

    def __repr__(self) -> str:
        return f"FixedDelay(delay={self.delay})"


def fixed_delay_in_seconds(seconds: float) -> FixedDelay:
    """Create a ``FixedDelay`` policy of ``seconds`` seconds."""
    return FixedDelay(seconds)


NONE = NoBackoff()
