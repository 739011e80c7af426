r"""Failure listener manager.

This module provides the ``ListenerManager`` class notifying the
failure listeners of a policy, in registration order.
"""

from __future__ import annotations

__all__ = ["ListenerManager"]

from typing import TYPE_CHECKING

from aretry.exceptions import FailureListenerError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aretry.context import Context
    from aretry.listeners import FailureListener


class ListenerManager:
    """Notifies failure listeners of retry decisions.

    A listener raising an exception stops the notification and surfaces
    as ``FailureListenerError``, chained from the listener exception, so
    it is never mistaken for a failure of the unit of work.

    Attributes:
        listeners: The listeners, in notification order.
    """

    def __init__(self, listeners: Iterable[FailureListener]) -> None:
        """Initialize the listener manager.

        Args:
            listeners: The listeners to notify.
        """
        self.listeners = tuple(listeners)

    def notify(self, context: Context, allow_retry: bool, backoff: float) -> None:
        """Notify every listener of a decision.

        Args:
            context: The context of the failed attempt.
            allow_retry: Whether the attempt will be retried.
            backoff: The wait in seconds before the next attempt.

        Raises:
            FailureListenerError: If a listener raises.
        """
        for listener in self.listeners:
            try:
                listener(context, allow_retry, backoff)
            except Exception as exc:
                raise FailureListenerError(listener, context) from exc
