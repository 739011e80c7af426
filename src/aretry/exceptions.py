r"""Exceptions raised by the retry engine itself.

Failures raised by the unit of work are never wrapped: they are
re-raised unchanged when the engine gives up. The classes below cover
the two failure modes that belong to the engine.
"""

from __future__ import annotations

__all__ = ["FailureListenerError", "RetryCancelledError"]

from concurrent.futures import CancelledError
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.context import Context
    from aretry.listeners import FailureListener


class RetryCancelledError(CancelledError):
    """Raised when a retry loop is cancelled while waiting for a backoff.

    Subclasses ``concurrent.futures.CancelledError`` so the default abort
    condition treats it as unrecoverable.

    Args:
        name: Name of the cancelled invocation.
        attempt_count: Number of attempts made before cancellation.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryCancelledError
        >>> raise RetryCancelledError("fetch", 2)
        Traceback (most recent call last):
            ...
        aretry.exceptions.RetryCancelledError: fetch cancelled after 2 attempts

        ```
    """

    def __init__(self, name: str, attempt_count: int) -> None:
        super().__init__(f"{name} cancelled after {attempt_count} attempts")
        self.name = name
        self.attempt_count = attempt_count


class FailureListenerError(RuntimeError):
    """Raised when a failure listener raises while being notified.

    The listener exception is chained as ``__cause__``. The failure of
    the unit of work that triggered the notification remains available
    through ``failure`` and ``context``.

    Args:
        listener: The listener that raised.
        context: The context the listener was notified with.
    """

    def __init__(self, listener: FailureListener, context: Context) -> None:
        super().__init__(
            f"failure listener {listener!r} raised while handling "
            f"{type(context.failure).__name__} (attempt {context.attempt_count})"
        )
        self.listener = listener
        self.context = context

    @property
    def failure(self) -> BaseException:
        """The failure of the unit of work being reported."""
        return self.context.failure
