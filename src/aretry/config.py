r"""Default configuration values for retry policies."""

from __future__ import annotations

__all__ = [
    "DEFAULT_ALWAYS_DELAY",
    "DEFAULT_INIT_INTERVAL",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_INTERVAL",
]

# Default number of attempts allowed by the default retry condition
# The first failure has attempt_count=1, so 3 means 3 attempts in total
DEFAULT_MAX_ATTEMPTS = 3

# Default exponential backoff bounds in seconds
# 1st retry waits 1s, 2nd waits 2s, 3rd waits 4s, ... capped at 60s
DEFAULT_INIT_INTERVAL = 1.0
DEFAULT_MAX_INTERVAL = 60.0

# Delay used by the ALWAYS preset policy
DEFAULT_ALWAYS_DELAY = 1.0
