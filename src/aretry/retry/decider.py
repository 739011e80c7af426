r"""Retry decision logic.

This module provides the ``RetryDecider`` class evaluating the effective
retry condition and the backoff policy for a failed attempt.
"""

from __future__ import annotations

__all__ = ["Decision", "RetryDecider"]

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.backoff.base import BaseBackoffPolicy
    from aretry.conditions.base import BaseCondition
    from aretry.context import Context

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Decision:
    """Outcome of evaluating a failed attempt.

    Attributes:
        allow_retry: Whether the attempt may be retried.
        backoff: The wait in seconds before the next attempt, 0.0 when
            giving up.
    """

    allow_retry: bool
    backoff: float


class RetryDecider:
    """Decides whether a failed attempt is retried and after how long.

    Args:
        condition: The effective retry condition, i.e.
            ``~abort_condition & retry_condition``.
        backoff_policy: The policy computing the wait before a retry.
    """

    def __init__(self, condition: BaseCondition, backoff_policy: BaseBackoffPolicy) -> None:
        self.condition = condition
        self.backoff_policy = backoff_policy

    def decide(self, context: Context) -> Decision:
        """Evaluate a failed attempt.

        The backoff policy is only consulted when the retry is allowed.
        Negative backoffs returned by custom policies are clamped to 0.

        Args:
            context: The context of the failed attempt.

        Returns:
            The decision for this attempt.
        """
        allow_retry = self.condition.check(context)
        logger.debug(
            f"Check retry condition: {self.condition.describe(context)}, "
            f"allow retry: {allow_retry}"
        )
        if not allow_retry:
            return Decision(allow_retry=False, backoff=0.0)
        backoff = max(0.0, self.backoff_policy.backoff(context))
        return Decision(allow_retry=True, backoff=backoff)

    def recheck(self, context: Context) -> bool:
        """Re-evaluate the condition after the backoff wait.

        Args:
            context: The context of the failed attempt, stamped with the
                time the wait ended.

        Returns:
            Whether the retry is still allowed.
        """
        allow_retry = self.condition.check(context)
        if not allow_retry:
            logger.debug(f"Retry no longer allowed after backoff: {self.condition.describe(context)}")
        return allow_retry
