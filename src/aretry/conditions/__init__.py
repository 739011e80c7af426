r"""Retry conditions.

This package provides the predicates deciding whether a failed attempt
may be retried. Conditions are pure functions of a ``Context`` and
compose with ``~`` (NOT), ``&`` (AND) and ``|`` (OR).

Conditions for ``httpx`` failures live in ``aretry.conditions.http``.
"""

from __future__ import annotations

__all__ = [
    "FALSE",
    "TRUE",
    "UNRECOVERABLE_EXCEPTIONS",
    "And",
    "BaseCondition",
    "ConstantCondition",
    "ExceptionIn",
    "MaxAttempts",
    "MaxTimeElapsed",
    "Not",
    "Or",
    "Predicate",
    "condition",
    "exception_in",
    "max_attempts",
    "max_time_elapsed",
    "max_time_elapsed_in_seconds",
]

from aretry.conditions.attempts import MaxAttempts, max_attempts
from aretry.conditions.base import And, BaseCondition, Not, Or
from aretry.conditions.constant import FALSE, TRUE, ConstantCondition
from aretry.conditions.elapsed import (
    MaxTimeElapsed,
    max_time_elapsed,
    max_time_elapsed_in_seconds,
)
from aretry.conditions.exception import UNRECOVERABLE_EXCEPTIONS, ExceptionIn, exception_in
from aretry.conditions.predicate import Predicate, condition
