r"""Unit tests for the ExceptionIn condition."""

from __future__ import annotations

import asyncio
import concurrent.futures

import pytest

from aretry.conditions import UNRECOVERABLE_EXCEPTIONS, ExceptionIn, exception_in
from aretry.exceptions import RetryCancelledError
from tests.helpers import make_context

#################################
#     Tests for ExceptionIn     #
#################################


def test_exception_in_exact_match() -> None:
    """Test that the exact failure type matches."""
    assert ExceptionIn(KeyError).check(make_context(failure=KeyError("k")))


def test_exception_in_subclass_match() -> None:
    """Test that registering a base class matches its subclasses."""
    condition = ExceptionIn(OSError)
    assert condition.check(make_context(failure=ConnectionError()))
    assert condition.check(make_context(failure=TimeoutError()))


def test_exception_in_no_match() -> None:
    """Test that unrelated failures do not match."""
    assert not ExceptionIn(KeyError, TypeError).check(make_context(failure=OSError()))


def test_exception_in_superclass_not_matched() -> None:
    """Test that registering a subclass does not match its base class."""
    assert not ExceptionIn(ConnectionError).check(make_context(failure=OSError()))


def test_exception_in_deduplicates_kinds() -> None:
    """Test that duplicated kinds are kept once, in order."""
    assert ExceptionIn(KeyError, OSError, KeyError).kinds == (KeyError, OSError)


def test_exception_in_requires_kinds() -> None:
    """Test that at least one kind is required."""
    with pytest.raises(ValueError, match=r"at least one exception kind is required"):
        ExceptionIn()


@pytest.mark.parametrize("kind", [int, "OSError", OSError()])
def test_exception_in_rejects_non_exception_kinds(kind: object) -> None:
    """Test that kinds must be exception classes."""
    with pytest.raises(TypeError, match=r"kind must be an exception class"):
        ExceptionIn(kind)  # type: ignore[arg-type]


def test_exception_in_equality() -> None:
    """Test that ExceptionIn compares by the set of kinds."""
    assert ExceptionIn(KeyError, OSError) == ExceptionIn(OSError, KeyError)
    assert ExceptionIn(KeyError) != ExceptionIn(OSError)


def test_exception_in_str() -> None:
    """Test the rendering of ExceptionIn."""
    condition = exception_in(KeyError, OSError)
    assert str(condition) == "context.failure is in (KeyError, OSError)"
    assert (
        condition.describe(make_context(failure=KeyError("k")))
        == "context.failure=KeyError('k') is in (KeyError, OSError)"
    )


##############################################
#     Tests for UNRECOVERABLE_EXCEPTIONS     #
##############################################


@pytest.mark.parametrize(
    "failure",
    [
        concurrent.futures.CancelledError(),
        asyncio.CancelledError(),
        RetryCancelledError("call", 1),
        KeyboardInterrupt(),
        TypeError(),
        ValueError(),
        AttributeError(),
        KeyError(),
        IndexError(),
        AssertionError(),
        NotImplementedError(),
        MemoryError(),
        RecursionError(),
    ],
)
def test_unrecoverable_exceptions_match(failure: BaseException) -> None:
    """Test that cancellations and programming errors are unrecoverable."""
    assert UNRECOVERABLE_EXCEPTIONS.check(make_context(failure=failure))


@pytest.mark.parametrize(
    "failure", [OSError(), ConnectionError(), TimeoutError(), RuntimeError(), Exception()]
)
def test_unrecoverable_exceptions_no_match(failure: Exception) -> None:
    """Test that I/O and generic failures are recoverable."""
    assert not UNRECOVERABLE_EXCEPTIONS.check(make_context(failure=failure))
