r"""Shared core logic for retry executors.

Helpers used by the blocking, asynchronous and scheduled executors for
logging the outcome of an invocation and completing futures.
"""

from __future__ import annotations

__all__ = ["complete_exceptionally", "complete_with_result", "log_give_up", "log_success"]

import logging
from concurrent.futures import Future, InvalidStateError
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from aretry.context import Context

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


def log_success(name: str, attempt_count: int) -> None:
    """Log a successful attempt.

    Args:
        name: The name of the invocation.
        attempt_count: The attempt that succeeded (1-indexed).
    """
    if attempt_count > 1:
        logger.debug(f"Finally {name} succeeded after {attempt_count - 1} retries")


def log_give_up(name: str, context: Context) -> None:
    """Log that an invocation gives up.

    Args:
        name: The name of the invocation.
        context: The context of the last failed attempt.
    """
    logger.debug(
        f"Give up {name} after {context.attempt_count} attempts "
        f"({context.elapsed:.3f}s), error: {context.failure!r}"
    )


def complete_with_result(future: Future[T], result: T) -> bool:
    """Complete a future with a result, unless already completed.

    Args:
        future: The future to complete.
        result: The result.

    Returns:
        ``True`` if this call completed the future.
    """
    try:
        future.set_result(result)
    except InvalidStateError:
        return False
    return True


def complete_exceptionally(future: Future[Any], error: BaseException) -> bool:
    """Complete a future with an exception, unless already completed.

    Args:
        future: The future to complete.
        error: The exception.

    Returns:
        ``True`` if this call completed the future.
    """
    try:
        future.set_exception(error)
    except InvalidStateError:
        return False
    return True
