r"""Schedulers running retry attempts for ``RetryPolicy.submit``.

``submit`` never blocks a thread for a backoff wait: it hands the first
attempt to ``Scheduler.execute`` and every retry to
``Scheduler.schedule``. Any object with these two methods can be used;
``ScheduledThreadPool`` is a thread-pool backed implementation.

The scheduler is owned by the caller: the retry engine never creates or
shuts one down.

Example:
    ```pycon
    >>> from aretry import RetryPolicy
    >>> from aretry.scheduler import ScheduledThreadPool
    >>> with ScheduledThreadPool(max_workers=4) as scheduler:
    ...     future = RetryPolicy().submit(scheduler, lambda: 42)
    ...     future.result()
    ...
    42

    ```
"""

from __future__ import annotations

__all__ = ["ScheduledThreadPool", "Scheduler"]

import heapq
import itertools
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Protocol

from aretry.utils.sleep import cap_wait

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

logger: logging.Logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    """Runs tasks now or after a delay.

    Both methods raise ``RuntimeError`` once the scheduler no longer
    accepts tasks.
    """

    def execute(self, fn: Callable[[], None]) -> None:
        """Run ``fn`` as soon as possible, without blocking the caller."""

    def schedule(self, fn: Callable[[], None], delay: float) -> None:
        """Run ``fn`` once ``delay`` seconds have passed, without blocking
        the caller."""


class ScheduledThreadPool:
    """Thread pool able to run tasks after a delay.

    Tasks run on a ``concurrent.futures.ThreadPoolExecutor``. Delayed
    tasks are kept on a heap by a single timer thread which hands them to
    the pool once due, so no worker is ever blocked waiting.

    Args:
        max_workers: Maximum number of worker threads. Defaults to the
            ``ThreadPoolExecutor`` default.
        thread_name_prefix: Prefix of the worker and timer thread names.

    Example:
        ```pycon
        >>> import threading
        >>> from aretry.scheduler import ScheduledThreadPool
        >>> done = threading.Event()
        >>> with ScheduledThreadPool(max_workers=1) as pool:
        ...     pool.schedule(done.set, 0.01)
        ...     done.wait(1.0)
        ...
        True

        ```
    """

    def __init__(self, max_workers: int | None = None, thread_name_prefix: str = "aretry") -> None:
        self._pool = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix=thread_name_prefix
        )
        self._delayed: list[tuple[float, int, Callable[[], None]]] = []
        self._counter = itertools.count()
        self._condition = threading.Condition()
        self._shutdown = False
        self._timer = threading.Thread(
            target=self._run_timer, name=f"{thread_name_prefix}-timer", daemon=True
        )
        self._timer.start()

    def execute(self, fn: Callable[[], None]) -> None:
        """Run ``fn`` on a worker thread as soon as one is free.

        Raises:
            RuntimeError: If the pool is shut down.
        """
        self._pool.submit(fn)

    def schedule(self, fn: Callable[[], None], delay: float) -> None:
        """Run ``fn`` on a worker thread after ``delay`` seconds.

        Raises:
            RuntimeError: If the pool is shut down.
        """
        if delay <= 0:
            self.execute(fn)
            return
        with self._condition:
            if self._shutdown:
                msg = "cannot schedule new tasks after shutdown"
                raise RuntimeError(msg)
            deadline = time.monotonic() + delay
            heapq.heappush(self._delayed, (deadline, next(self._counter), fn))
            self._condition.notify()

    def shutdown(self, wait: bool = True) -> None:
        """Stop the pool.

        Delayed tasks that are not due yet are handed to the workers right
        away, in deadline order, so none of them is lost. Tasks they try
        to schedule in turn are rejected with ``RuntimeError``.

        Args:
            wait: Whether to wait for running tasks to complete.
        """
        with self._condition:
            if self._shutdown:
                return
            self._shutdown = True
            pending = [fn for _, _, fn in sorted(self._delayed)]
            self._delayed.clear()
            self._condition.notify()
        self._timer.join()
        if pending:
            logger.debug(f"Running {len(pending)} delayed task(s) early on shutdown")
        for fn in pending:
            self._pool.submit(fn)
        self._pool.shutdown(wait=wait)

    def _run_timer(self) -> None:
        with self._condition:
            while True:
                while not self._shutdown and not self._delayed:
                    self._condition.wait()
                if self._shutdown:
                    return
                deadline, _, fn = self._delayed[0]
                remaining = deadline - time.monotonic()
                if remaining > 0:
                    self._condition.wait(cap_wait(remaining))
                    continue
                heapq.heappop(self._delayed)
                try:
                    self._pool.submit(fn)
                except RuntimeError:
                    logger.exception("Could not hand a delayed task to the pool")

    def __enter__(self) -> ScheduledThreadPool:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.shutdown(wait=True)
