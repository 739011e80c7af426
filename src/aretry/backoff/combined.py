r"""Sum of backoff policies."""

from __future__ import annotations

__all__ = ["CombinedBackoff"]

from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffPolicy

if TYPE_CHECKING:
    from aretry.context import Context


class CombinedBackoff(BaseBackoffPolicy):
    """Backoff policy waiting the sum of several policies.

    Usually built with ``+``. Nested combinations are flattened.

    Args:
        *policies: The policies to add up.

    Raises:
        ValueError: If no policy is given.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialDelay, FixedDelay
        >>> from aretry.context import Context
        >>> backoff = ExponentialDelay(1.0, 10.0) + FixedDelay(0.5)
        >>> backoff.backoff(Context(0.0, 0.0, 3, OSError()))
        4.5

        ```
    """

    def __init__(self, *policies: BaseBackoffPolicy) -> None:
        if not policies:
            msg = "at least one backoff policy is required"
            raise ValueError(msg)
        flat: list[BaseBackoffPolicy] = []
        for policy in policies:
            if isinstance(policy, CombinedBackoff):
                flat.extend(policy.policies)
            else:
                flat.append(policy)
        self.policies = tuple(flat)

    def backoff(self, context: Context) -> float:
        return sum(policy.backoff(context) for policy in self.policies)

    def __repr__(self) -> str:
        return " + ".join(repr(policy) for policy in self.policies)
