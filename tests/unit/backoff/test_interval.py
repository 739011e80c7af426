r"""Unit tests for the FixedInterval backoff policy."""

from __future__ import annotations

from datetime import timedelta

import pytest

from aretry.backoff import FixedInterval
from tests.helpers import make_context


@pytest.mark.parametrize(
    ("attempt_count", "elapsed", "expected"),
    [
        (1, 0.0, 1.0),
        (1, 0.25, 0.75),
        (2, 1.5, 0.5),
        (3, 2.5, 0.5),
        (3, 3.0, 0.0),
    ],
)
def test_fixed_interval_fills_remaining_interval(
    attempt_count: int, elapsed: float, expected: float
) -> None:
    """Test that the wait aligns the next attempt on the schedule."""
    assert FixedInterval(1.0).backoff(make_context(attempt_count, elapsed)) == pytest.approx(
        expected
    )


def test_fixed_interval_late_attempt() -> None:
    """Test that an attempt slower than the interval gets no wait."""
    assert FixedInterval(1.0).backoff(make_context(attempt_count=2, elapsed=10.0)) == 0.0


def test_fixed_interval_timedelta() -> None:
    """Test that a timedelta interval is converted to seconds."""
    assert FixedInterval(timedelta(seconds=2)).interval == 2.0


@pytest.mark.parametrize("interval", [-1.0, float("nan")])
def test_fixed_interval_invalid(interval: float) -> None:
    """Test that a negative or NaN interval raises ValueError."""
    with pytest.raises(ValueError, match=r"interval must be non-negative"):
        FixedInterval(interval)


def test_fixed_interval_equality() -> None:
    """Test that FixedInterval compares by interval."""
    assert FixedInterval(1.0) == FixedInterval(1.0)
    assert FixedInterval(1.0) != FixedInterval(2.0)
    assert repr(FixedInterval(1.0)) == "FixedInterval(interval=1.0)"
