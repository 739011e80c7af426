r"""Internal utilities shared by conditions, backoff policies and
executors."""

from __future__ import annotations

__all__ = [
    "MAX_WAIT",
    "cap_wait",
    "resolve_clock",
    "resolve_sleeper",
    "validate_non_negative",
    "validate_positive",
    "wait_for_backoff",
]

from aretry.utils.sleep import MAX_WAIT, cap_wait, resolve_clock, resolve_sleeper, wait_for_backoff
from aretry.utils.validation import validate_non_negative, validate_positive
