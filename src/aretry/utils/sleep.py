r"""Clock and sleep seams used by the retry executors.

The executors never call ``time.monotonic`` or ``time.sleep`` directly:
they resolve them here at call time so tests can inject fakes (or patch
``time.sleep``) without real wall-clock delay.
"""

from __future__ import annotations

__all__ = ["MAX_WAIT", "cap_wait", "resolve_clock", "resolve_sleeper", "wait_for_backoff"]

import logging
import threading
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)

# Longest single blocking wait in seconds. ``time.sleep``,
# ``Event.wait`` and ``Condition.wait`` raise OverflowError above
# ``threading.TIMEOUT_MAX``, so longer backoffs are capped to it.
MAX_WAIT = threading.TIMEOUT_MAX / 2


def _monotonic() -> float:
    return time.monotonic()


def _sleep(seconds: float) -> None:
    time.sleep(seconds)


def resolve_clock(clock: Callable[[], float] | None) -> Callable[[], float]:
    """Return ``clock`` or the default monotonic clock."""
    return clock if clock is not None else _monotonic


def resolve_sleeper(sleeper: Callable[[float], None] | None) -> Callable[[float], None]:
    """Return ``sleeper`` or the default ``time.sleep`` based sleeper."""
    return sleeper if sleeper is not None else _sleep


def cap_wait(delay: float) -> float:
    """Cap a wait to ``MAX_WAIT`` seconds.

    Example:
        ```pycon
        >>> from aretry.utils.sleep import MAX_WAIT, cap_wait
        >>> cap_wait(2.5)
        2.5
        >>> cap_wait(1e300) == MAX_WAIT
        True

        ```
    """
    return min(delay, MAX_WAIT)


def wait_for_backoff(
    delay: float,
    sleeper: Callable[[float], None],
    cancel_event: threading.Event | None = None,
) -> bool:
    """Block the calling thread for ``delay`` seconds.

    Waits longer than ``MAX_WAIT`` are capped to it.

    Args:
        delay: The wait duration in seconds.
        sleeper: The sleep function used when no cancel event is given.
        cancel_event: Optional event. When given, the wait ends early as
            soon as the event is set.

    Returns:
        ``True`` if the wait completed, ``False`` if it was cancelled
        through ``cancel_event``.

    Example:
        ```pycon
        >>> import threading
        >>> from aretry.utils.sleep import wait_for_backoff
        >>> wait_for_backoff(0.0, sleeper=lambda s: None)
        True
        >>> event = threading.Event()
        >>> event.set()
        >>> wait_for_backoff(10.0, sleeper=lambda s: None, cancel_event=event)
        False

        ```
    """
    delay = cap_wait(delay)
    if cancel_event is None:
        if delay > 0:
            logger.debug(f"Waiting {delay:.3f}s before retry")
            sleeper(delay)
        return True
    if cancel_event.wait(delay):
        logger.debug("Backoff wait cancelled")
        return False
    return True
