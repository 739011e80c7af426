from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from aretry.scheduler import ScheduledThreadPool
from tests.helpers import FakeClock, FakeScheduler

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def clock() -> FakeClock:
    """Create a manually advanced clock starting at 0."""
    return FakeClock()


@pytest.fixture
def fake_scheduler() -> FakeScheduler:
    """Create a scheduler queueing tasks until drained."""
    return FakeScheduler()


@pytest.fixture
def thread_pool() -> Generator[ScheduledThreadPool, None, None]:
    """Create a real scheduled thread pool, shut down after the test."""
    pool = ScheduledThreadPool(max_workers=5)
    yield pool
    pool.shutdown(wait=True)


@pytest.fixture
def listener() -> Mock:
    """Create a mock failure listener.

    Returns:
        A Mock object accepting ``(context, allow_retry, backoff)``.
    """
    return Mock()
