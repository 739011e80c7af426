r"""Parameter validation utilities.

Construction-time checks shared by conditions and backoff policies.
Invalid configuration fails fast with ``ValueError`` instead of
surfacing at call time.
"""

from __future__ import annotations

__all__ = ["validate_non_negative", "validate_positive"]

import math


def validate_non_negative(name: str, value: float) -> None:
    """Validate that a parameter is >= 0.

    Args:
        name: The parameter name, used in the error message.
        value: The value to validate.

    Raises:
        ValueError: If ``value`` is negative or NaN.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_non_negative
        >>> validate_non_negative("delay", 0.0)
        >>> validate_non_negative("delay", -1.0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: delay must be non-negative, got -1.0

        ```
    """
    if math.isnan(value) or value < 0:
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)


def validate_positive(name: str, value: float) -> None:
    """Validate that a parameter is > 0.

    Args:
        name: The parameter name, used in the error message.
        value: The value to validate.

    Raises:
        ValueError: If ``value`` is zero, negative or NaN.
    """
    if math.isnan(value) or value <= 0:
        msg = f"{name} must be greater than 0, got {value}"
        raise ValueError(msg)
