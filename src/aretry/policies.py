r"""Pre-built retry policies.

These are frozen values built once at import time.
"""

from __future__ import annotations

__all__ = ["ALWAYS", "NONE"]

from aretry.backoff.constant import NONE as NO_BACKOFF
from aretry.backoff.constant import FixedDelay
from aretry.conditions.constant import FALSE, TRUE
from aretry.config import DEFAULT_ALWAYS_DELAY
from aretry.policy import RetryPolicy

# Never retry: the first failure is re-raised
NONE = RetryPolicy(retry_condition=FALSE, backoff_policy=NO_BACKOFF)

# Retry every recoverable failure, forever, one second apart
ALWAYS = RetryPolicy(retry_condition=TRUE, backoff_policy=FixedDelay(DEFAULT_ALWAYS_DELAY))
