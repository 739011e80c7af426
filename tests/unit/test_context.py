r"""Unit tests for the failure Context."""

from __future__ import annotations

import dataclasses

import pytest

from aretry.context import Context

#############################
#     Tests for Context     #
#############################


def test_context_fields() -> None:
    """Test that Context exposes its fields."""
    error = OSError("boom")
    context = Context(start_time=1.0, now=3.5, attempt_count=2, failure=error)

    assert context.start_time == 1.0
    assert context.now == 3.5
    assert context.attempt_count == 2
    assert context.failure is error


def test_context_elapsed() -> None:
    """Test that elapsed is the difference between now and start."""
    assert Context(10.0, 12.5, 1, OSError()).elapsed == 2.5


def test_context_elapsed_never_negative() -> None:
    """Test that elapsed is clamped to 0 when now precedes start."""
    assert Context(10.0, 9.0, 1, OSError()).elapsed == 0.0


def test_context_retry_count_alias() -> None:
    """Test that retry_count mirrors attempt_count."""
    assert Context(0.0, 0.0, 4, OSError()).retry_count == 4


def test_context_zero_attempt_count() -> None:
    """Test that attempt_count=0 is accepted."""
    assert Context(0.0, 0.0, 0, OSError()).attempt_count == 0


def test_context_negative_attempt_count() -> None:
    """Test that a negative attempt_count raises ValueError."""
    with pytest.raises(ValueError, match=r"attempt_count must be >= 0"):
        Context(0.0, 0.0, -1, OSError())


def test_context_is_frozen() -> None:
    """Test that a Context cannot be mutated."""
    context = Context(0.0, 0.0, 1, OSError())
    with pytest.raises(dataclasses.FrozenInstanceError):
        context.attempt_count = 2  # type: ignore[misc]


def test_context_stamped() -> None:
    """Test that stamped returns a copy with a new now."""
    error = OSError()
    context = Context(1.0, 2.0, 3, error)
    stamped = context.stamped(5.0)

    assert stamped == Context(1.0, 5.0, 3, error)
    assert context.now == 2.0
