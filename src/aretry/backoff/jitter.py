r"""Random delay backoff policy."""

from __future__ import annotations

__all__ = ["RandomDelay", "random_delay_in_seconds"]

import random
from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffPolicy
from aretry.utils.validation import validate_non_negative

if TYPE_CHECKING:
    from aretry.context import Context


class RandomDelay(BaseBackoffPolicy):
    """Random delay backoff policy.

    Draws a delay uniformly from ``[min_delay, max_delay]``. The draw is
    seeded with ``(seed, attempt_count)``: the same policy returns the
    same delay for the same attempt count, while policies with different
    seeds spread their retries. Mostly useful added to another policy as
    jitter.

    Args:
        min_delay: The lower bound in seconds. Must be >= 0.
        max_delay: The upper bound in seconds. Must be >= ``min_delay``.
        seed: Optional seed. A random one is picked when omitted.

    Raises:
        ValueError: If the bounds are negative or out of order.

    Example:
        ```pycon
        >>> from aretry.backoff import FixedDelay, RandomDelay
        >>> from aretry.context import Context
        >>> backoff = FixedDelay(1.0) + RandomDelay(0.0, 0.5, seed=42)
        >>> 1.0 <= backoff.backoff(Context(0.0, 0.0, 1, OSError())) <= 1.5
        True

        ```
    """

    def __init__(self, min_delay: float, max_delay: float, seed: int | None = None) -> None:
        validate_non_negative("min_delay", min_delay)
        validate_non_negative("max_delay", max_delay)
        if max_delay < min_delay:
            msg = f"max_delay must be >= min_delay, got {max_delay} < {min_delay}"
            raise ValueError(msg)
        self.min_delay = float(min_delay)
        self.max_delay = float(max_delay)
        self.seed = seed if seed is not None else random.getrandbits(32)

    def backoff(self, context: Context) -> float:
        rng = random.Random(f"{self.seed}:{context.attempt_count}")  # noqa: S311
        return rng.uniform(self.min_delay, self.max_delay)

    def __repr__(self) -> str:
        return f"RandomDelay(min_delay={self.min_delay}, max_delay={self.max_delay})"


def random_delay_in_seconds(min_seconds: float, max_seconds: float) -> RandomDelay:
    """Create a ``RandomDelay`` policy bounded in seconds."""
    return RandomDelay(min_seconds, max_seconds)
