r"""Unit tests for the Predicate condition."""

from __future__ import annotations

from unittest.mock import Mock

from aretry.conditions import Predicate, condition
from aretry.context import Context
from tests.helpers import make_context


def is_timeout(context: Context) -> bool:
    return isinstance(context.failure, TimeoutError)


def test_predicate_check() -> None:
    """Test that Predicate delegates to the function."""
    predicate = Predicate(is_timeout)
    assert predicate.check(make_context(failure=TimeoutError()))
    assert not predicate.check(make_context(failure=OSError()))


def test_predicate_receives_context() -> None:
    """Test that the function receives the context."""
    func = Mock(return_value=1)
    context = make_context()

    assert Predicate(func).check(context) is True
    func.assert_called_once_with(context)


def test_predicate_default_name() -> None:
    """Test that the name defaults to the function name."""
    assert str(Predicate(is_timeout)) == "is_timeout(context)"


def test_predicate_describe() -> None:
    """Test that describe includes the evaluated value."""
    predicate = condition(is_timeout, name="timeout")
    assert predicate.describe(make_context(failure=TimeoutError())) == "timeout(context)=True"
