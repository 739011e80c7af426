r"""Failure listeners notified of every retry decision.

A failure listener is any callable accepting
``(context, allow_retry, backoff)``. Listeners observe decisions, they
never influence them. They are invoked once per failed attempt, in
registration order, before the backoff wait or before giving up.

Example:
    ```pycon
    >>> from aretry import RetryPolicy
    >>> from aretry.conditions import MaxAttempts
    >>> from aretry.listeners import LoggingFailureListener
    >>> seen = []
    >>> def record(context, allow_retry, backoff):
    ...     seen.append((context.attempt_count, allow_retry))
    ...
    >>> policy = RetryPolicy(
    ...     retry_condition=MaxAttempts(2),
    ...     failure_listeners=(LoggingFailureListener(), record),
    ... )

    ```
"""

from __future__ import annotations

__all__ = ["FailureListener", "LoggingFailureListener", "logging_listener"]

import logging
from typing import TYPE_CHECKING, Protocol

from aretry.conditions.constant import TRUE

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.conditions.base import BaseCondition
    from aretry.context import Context

logger: logging.Logger = logging.getLogger(__name__)


class FailureListener(Protocol):
    """Callable notified of each failed attempt and of the decision made
    for it."""

    def __call__(self, context: Context, allow_retry: bool, backoff: float) -> None:
        """Handle a failed attempt.

        Args:
            context: The context of the failed attempt.
            allow_retry: Whether the attempt will be retried.
            backoff: The wait in seconds before the next attempt, 0.0 when
                giving up.
        """


class LoggingFailureListener:
    """Failure listener logging failed attempts at INFO level.

    Args:
        log: Condition deciding whether a failure is logged at all.
        stack: Condition deciding whether the traceback of a logged
            failure is included.
        callback: Optional function receiving every failure, logged or
            not.
        logger: The logger to write to. Defaults to this module logger.
    """

    def __init__(
        self,
        log: BaseCondition = TRUE,
        stack: BaseCondition = TRUE,
        callback: Callable[[BaseException], None] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.log = log
        self.stack = stack
        self.callback = callback
        self.logger = logger

    def __call__(self, context: Context, allow_retry: bool, backoff: float) -> None:
        if self.callback is not None:
            self.callback(context.failure)

        if not self.log.check(context):
            return
        log = self.logger if self.logger is not None else logger
        exc_info = context.failure if self.stack.check(context) else None
        if allow_retry:
            log.info(
                f"Invocation failed, attempt: {context.attempt_count}, "
                f"elapsed: {context.elapsed:.3f}s, will retry in {backoff:.3f}s.",
                exc_info=exc_info,
            )
        else:
            log.info(
                f"Invocation failed, attempt: {context.attempt_count}, "
                f"elapsed: {context.elapsed:.3f}s, error: {context.failure!r}.",
                exc_info=exc_info,
            )

    def __repr__(self) -> str:
        return f"LoggingFailureListener(log={self.log!r}, stack={self.stack!r})"


def logging_listener(
    log: BaseCondition = TRUE,
    stack: BaseCondition = TRUE,
    callback: Callable[[BaseException], None] | None = None,
) -> LoggingFailureListener:
    """Create a ``LoggingFailureListener``.

    Args:
        log: Condition deciding whether a failure is logged.
        stack: Condition deciding whether the traceback is included.
        callback: Optional function receiving every failure.

    Returns:
        The listener.
    """
    return LoggingFailureListener(log=log, stack=stack, callback=callback)
