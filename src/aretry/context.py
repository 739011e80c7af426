r"""Immutable snapshot of a single failure observation.

A ``Context`` is created right after an attempt raises and is handed,
unchanged, to the retry condition, the backoff policy and the failure
listeners for that single decision point.
"""

from __future__ import annotations

__all__ = ["Context"]

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Context:
    """Snapshot of one failed attempt.

    Args:
        start_time: Clock reading (in seconds) when the invocation began.
        now: Clock reading (in seconds) when this failure was observed.
        attempt_count: Number of attempts made so far, including the
            one that just failed. The first failure has
            ``attempt_count=1``.
        failure: The exception raised by the attempt.

    Raises:
        ValueError: If ``attempt_count`` is negative.

    Example:
        ```pycon
        >>> from aretry.context import Context
        >>> context = Context(start_time=10.0, now=12.5, attempt_count=2, failure=OSError())
        >>> context.elapsed
        2.5
        >>> context.retry_count
        2

        ```
    """

    start_time: float
    now: float
    attempt_count: int
    failure: BaseException

    def __post_init__(self) -> None:
        if self.attempt_count < 0:
            msg = f"attempt_count must be >= 0, got {self.attempt_count}"
            raise ValueError(msg)

    @property
    def elapsed(self) -> float:
        """Seconds elapsed between the invocation start and this failure.

        Never negative, even if the clock readings are out of order.
        """
        return max(0.0, self.now - self.start_time)

    @property
    def retry_count(self) -> int:
        """Alias of ``attempt_count``."""
        return self.attempt_count

    def stamped(self, now: float) -> Context:
        """Return a copy of this context observed at ``now``.

        Args:
            now: The new clock reading in seconds.

        Returns:
            A new context with the same start time, attempt count and
            failure.
        """
        return replace(self, now=now)
