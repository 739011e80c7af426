r"""Shared test helpers.

This module contains fakes used across the unit tests to run retry
loops without real wall-clock delay or real threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from unittest.mock import Mock

from aretry.context import Context

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class FakeClock:
    """Clock returning a manually controlled time in seconds.

    Attributes:
        now: The current time.
    """

    now: float = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def sleep(self, seconds: float) -> None:
        """Sleeper advancing the clock instead of blocking."""
        self.advance(seconds)


@dataclass
class FakeScheduler:
    """Scheduler queueing tasks until ``run_all`` or ``run_next`` is
    called.

    Attributes:
        tasks: Pending tasks, in submission order.
        delays: Delays passed to ``schedule``, in call order.
        executed: Number of tasks run so far.
    """

    tasks: list[Callable[[], None]] = field(default_factory=list)
    delays: list[float] = field(default_factory=list)
    executed: int = 0

    def execute(self, fn: Callable[[], None]) -> None:
        self.tasks.append(fn)

    def schedule(self, fn: Callable[[], None], delay: float) -> None:
        self.delays.append(delay)
        self.tasks.append(fn)

    def run_next(self) -> None:
        task = self.tasks.pop(0)
        self.executed += 1
        task()

    def run_all(self) -> None:
        while self.tasks:
            self.run_next()


def failing_work(failures: int, result: str = "done", error: type[Exception] = OSError) -> Mock:
    """Create a unit of work failing ``failures`` times before returning
    ``result``.

    Args:
        failures: The number of failures before success.
        result: The value returned once the failures are exhausted.
        error: The exception class raised by failing attempts.

    Returns:
        A Mock recording every attempt.
    """
    return Mock(side_effect=[error(f"failure {i + 1}") for i in range(failures)] + [result])


def always_failing_work(error: Exception | None = None) -> Mock:
    """Create a unit of work that always raises ``error``."""
    return Mock(side_effect=error if error is not None else OSError("always"))


def make_context(
    attempt_count: int = 1,
    elapsed: float = 0.0,
    failure: BaseException | None = None,
) -> Context:
    """Create a context starting at 0 with the given elapsed time."""
    return Context(
        start_time=0.0,
        now=elapsed,
        attempt_count=attempt_count,
        failure=failure if failure is not None else OSError("boom"),
    )
