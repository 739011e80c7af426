r"""Unit tests for parameter validation utilities."""

from __future__ import annotations

import pytest

from aretry.utils import validate_non_negative, validate_positive

###########################################
#     Tests for validate_non_negative     #
###########################################


@pytest.mark.parametrize("value", [0, 0.0, 1, 2.5, 1e9])
def test_validate_non_negative_valid(value: float) -> None:
    """Test that non-negative values pass."""
    validate_non_negative("delay", value)


@pytest.mark.parametrize("value", [-1, -0.001, -1e9, float("nan")])
def test_validate_non_negative_invalid(value: float) -> None:
    """Test that negative and NaN values raise ValueError."""
    with pytest.raises(ValueError, match=r"delay must be non-negative, got"):
        validate_non_negative("delay", value)


#######################################
#     Tests for validate_positive     #
#######################################


@pytest.mark.parametrize("value", [0.001, 1, 60.0])
def test_validate_positive_valid(value: float) -> None:
    """Test that positive values pass."""
    validate_positive("duration", value)


@pytest.mark.parametrize("value", [0, 0.0, -1, float("nan")])
def test_validate_positive_invalid(value: float) -> None:
    """Test that zero, negative and NaN values raise ValueError."""
    with pytest.raises(ValueError, match=r"duration must be greater than 0, got"):
        validate_positive("duration", value)
