r"""Backoff policies deciding how long to wait before a retry.

This package provides fixed delay, schedule-aligned fixed interval,
overflow-safe exponential and random delay policies. Policies are pure
functions of the failure ``Context`` and can be added together.
"""

from __future__ import annotations

__all__ = [
    "MAX_DELAY",
    "NONE",
    "BaseBackoffPolicy",
    "CombinedBackoff",
    "ExponentialDelay",
    "FixedDelay",
    "FixedInterval",
    "NoBackoff",
    "RandomDelay",
    "exponential_delay_in_seconds",
    "fixed_delay_in_seconds",
    "random_delay_in_seconds",
]

from aretry.backoff.base import BaseBackoffPolicy
from aretry.backoff.combined import CombinedBackoff
from aretry.backoff.constant import NONE, FixedDelay, NoBackoff, fixed_delay_in_seconds
from aretry.backoff.exponential import MAX_DELAY, ExponentialDelay, exponential_delay_in_seconds
from aretry.backoff.interval import FixedInterval
from aretry.backoff.jitter import RandomDelay, random_delay_in_seconds
