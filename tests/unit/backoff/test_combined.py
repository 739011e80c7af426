r"""Unit tests for combined backoff policies."""

from __future__ import annotations

import pytest

from aretry.backoff import (
    NONE,
    CombinedBackoff,
    ExponentialDelay,
    FixedDelay,
    FixedInterval,
    RandomDelay,
)
from tests.helpers import make_context


def test_add_operator_builds_combined_backoff() -> None:
    """Test that a + b builds a CombinedBackoff."""
    first = FixedDelay(1.0)
    second = FixedDelay(2.0)
    backoff = first + second
    assert isinstance(backoff, CombinedBackoff)
    assert backoff.policies == (first, second)


def test_combined_backoff_sums_policies() -> None:
    """Test that the delay is the sum of every policy."""
    backoff = ExponentialDelay(1.0, 10.0) + FixedDelay(0.5)
    assert [backoff.backoff(make_context(n)) for n in range(1, 5)] == [1.5, 2.5, 4.5, 8.5]


def test_combined_backoff_flattens() -> None:
    """Test that nested combinations are flattened."""
    backoff = FixedDelay(1.0) + NONE + FixedInterval(1.0)
    assert len(backoff.policies) == 3
    assert repr(backoff) == "FixedDelay(delay=1.0) + NONE + FixedInterval(interval=1.0)"


def test_combined_backoff_with_jitter() -> None:
    """Test a fixed delay with random jitter."""
    backoff = FixedDelay(1.0) + RandomDelay(0.0, 0.5, seed=1)
    for attempt_count in range(1, 10):
        assert 1.0 <= backoff.backoff(make_context(attempt_count)) <= 1.5


def test_combined_backoff_requires_policies() -> None:
    """Test that at least one policy is required."""
    with pytest.raises(ValueError, match=r"at least one backoff policy is required"):
        CombinedBackoff()
