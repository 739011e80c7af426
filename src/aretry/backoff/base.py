r"""Abstract base class for backoff policies."""

from __future__ import annotations

__all__ = ["BaseBackoffPolicy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.context import Context


class BaseBackoffPolicy(ABC):
    """Abstract base class for backoff policies.

    A backoff policy determines how long to wait before retrying a
    failed attempt. It is a pure function of the ``Context`` and of its
    construction parameters, and never returns a negative value.

    Policies can be added together: ``FixedDelay(1.0) + RandomDelay(0.0, 0.5)``
    waits the sum of both.
    """

    @abstractmethod
    def backoff(self, context: Context) -> float:
        """Calculate the wait before the next attempt.

        Args:
            context: The context of the failed attempt.

        Returns:
            The wait in seconds, always >= 0.
        """

    def __add__(self, other: BaseBackoffPolicy) -> BaseBackoffPolicy:
        from aretry.backoff.combined import CombinedBackoff  # noqa: PLC0415

        return CombinedBackoff(self, other)
