r"""Unit tests for properties shared by every backoff policy."""

from __future__ import annotations

import pytest

from aretry.backoff import (
    MAX_DELAY,
    NONE,
    BaseBackoffPolicy,
    ExponentialDelay,
    FixedDelay,
    FixedInterval,
    RandomDelay,
)
from tests.helpers import make_context

POLICIES = [
    pytest.param(NONE, id="none"),
    pytest.param(FixedDelay(1.5), id="fixed-delay"),
    pytest.param(FixedInterval(2.0), id="fixed-interval"),
    pytest.param(ExponentialDelay(1.0, 60.0), id="exponential"),
    pytest.param(ExponentialDelay(1.0, 60.0, max_init_interval=3.0), id="exponential-randomized"),
    pytest.param(ExponentialDelay(MAX_DELAY * 0.75, MAX_DELAY * 0.9), id="exponential-float-limit"),
    pytest.param(RandomDelay(0.0, 5.0, seed=7), id="random"),
    pytest.param(FixedInterval(1.0) + ExponentialDelay(0.5, 8.0), id="combined"),
    pytest.param(
        FixedDelay(1.0) + FixedInterval(3.0) + RandomDelay(0.0, 0.5, seed=3), id="combined-jitter"
    ),
]


@pytest.mark.parametrize("policy", POLICIES)
@pytest.mark.parametrize(("attempt_count", "elapsed"), [(1, 0.0), (3, 2.5), (10, 7.0), (500, 1e4)])
def test_backoff_is_idempotent(
    policy: BaseBackoffPolicy, attempt_count: int, elapsed: float
) -> None:
    """Test that the same context always gives the same delay."""
    context = make_context(attempt_count, elapsed)
    first = policy.backoff(context)
    assert all(policy.backoff(context) == first for _ in range(5))
    assert policy.backoff(make_context(attempt_count, elapsed)) == first


@pytest.mark.parametrize("policy", POLICIES)
@pytest.mark.parametrize(("attempt_count", "elapsed"), [(1, 0.0), (3, 2.5), (10, 7.0), (500, 1e4)])
def test_backoff_is_non_negative(
    policy: BaseBackoffPolicy, attempt_count: int, elapsed: float
) -> None:
    """Test that no policy returns a negative delay."""
    assert policy.backoff(make_context(attempt_count, elapsed)) >= 0.0
