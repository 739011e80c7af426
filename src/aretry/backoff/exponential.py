r"""Exponential backoff policy."""

from __future__ import annotations

__all__ = ["MAX_DELAY", "ExponentialDelay", "exponential_delay_in_seconds"]

import random
import sys
from datetime import timedelta
from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffPolicy
from aretry.utils.validation import validate_non_negative

if TYPE_CHECKING:
    from aretry.context import Context

# Largest representable delay in seconds
MAX_DELAY = sys.float_info.max


def _seconds(value: float | timedelta) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


class ExponentialDelay(BaseBackoffPolicy):
    """Exponential backoff policy.

    The delay starts at the initial interval and doubles for every prior
    attempt, capped at ``max_interval``. Doubling never overflows: once
    the next doubling would exceed the largest representable float, the
    value is pinned to it before being capped.

    When ``max_init_interval`` is given, the initial interval is drawn
    once, at construction, uniformly from
    ``[init_interval, max_init_interval]``. Two policies built with the
    same bounds can therefore be desynchronized while each one stays
    deterministic.

    Args:
        init_interval: The initial interval in seconds, or a ``timedelta``.
            Must be >= 0.
        max_interval: The maximum delay in seconds, or a ``timedelta``.
            Must be >= ``init_interval``.
        max_init_interval: Optional upper bound of the initial interval.

    Raises:
        ValueError: If an interval is negative or the bounds are out of
            order.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialDelay
        >>> from aretry.context import Context
        >>> backoff = ExponentialDelay(1.0, 5.0)
        >>> [backoff.backoff(Context(0.0, 0.0, n, OSError())) for n in range(1, 6)]
        [1.0, 2.0, 4.0, 5.0, 5.0]

        ```
    """

    def __init__(
        self,
        init_interval: float | timedelta = 1.0,
        max_interval: float | timedelta = 60.0,
        max_init_interval: float | timedelta | None = None,
    ) -> None:
        init = _seconds(init_interval)
        maximum = _seconds(max_interval)
        max_init = init if max_init_interval is None else _seconds(max_init_interval)
        validate_non_negative("init_interval", init)
        validate_non_negative("max_interval", maximum)
        validate_non_negative("max_init_interval", max_init)
        if max_init < init:
            msg = f"max_init_interval must be >= init_interval, got {max_init} < {init}"
            raise ValueError(msg)
        if maximum < init:
            msg = f"max_interval must be >= init_interval, got {maximum} < {init}"
            raise ValueError(msg)

        self.min_init_interval = init
        self.max_init_interval = max_init
        self.max_interval = maximum
        self.init_interval = init if max_init == init else random.uniform(init, max_init)  # noqa: S311

    def backoff(self, context: Context) -> float:
        value = self.init_interval
        if value == 0:
            return 0.0
        for _ in range(context.attempt_count - 1):
            if value < MAX_DELAY / 2:
                value *= 2
            else:
                value = MAX_DELAY
                break
            if value > self.max_interval:
                break
        return min(value, self.max_interval)

    def __repr__(self) -> str:
        return (
            f"ExponentialDelay(init_interval={self.init_interval}, "
            f"max_interval={self.max_interval})"
        )


def exponential_delay_in_seconds(init_seconds: float, max_seconds: float) -> ExponentialDelay:
    """Create an ``ExponentialDelay`` policy bounded in seconds."""
    return ExponentialDelay(init_seconds, max_seconds)
