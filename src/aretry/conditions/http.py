r"""Conditions for failures raised by ``httpx``.

Example:
    ```pycon
    >>> import httpx
    >>> from aretry import RetryPolicy
    >>> from aretry.conditions import MaxAttempts
    >>> from aretry.conditions.http import TRANSIENT_HTTP_ERRORS
    >>> policy = RetryPolicy(retry_condition=TRANSIENT_HTTP_ERRORS & MaxAttempts(5))
    >>> def fetch() -> httpx.Response:
    ...     response = httpx.get("https://api.example.com/data")
    ...     return response.raise_for_status()
    ...
    >>> policy.call(fetch)  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = ["RETRY_STATUS_CODES", "TRANSIENT_HTTP_ERRORS", "HttpStatusIn"]

from typing import TYPE_CHECKING

import httpx

from aretry.conditions.base import BaseCondition
from aretry.conditions.exception import ExceptionIn

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aretry.context import Context

# HTTP status codes worth retrying
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


class HttpStatusIn(BaseCondition):
    """Condition that holds if the failure is an ``httpx.HTTPStatusError``
    whose response status code is one of ``status_codes``.

    Args:
        status_codes: The status codes to match.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.conditions.http import HttpStatusIn
        >>> from aretry.context import Context
        >>> request = httpx.Request("GET", "https://example.com")
        >>> response = httpx.Response(503, request=request)
        >>> error = httpx.HTTPStatusError("unavailable", request=request, response=response)
        >>> HttpStatusIn().check(Context(0.0, 0.0, 1, error))
        True

        ```
    """

    def __init__(self, status_codes: Iterable[int] = RETRY_STATUS_CODES) -> None:
        self.status_codes = tuple(status_codes)

    def check(self, context: Context) -> bool:
        failure = context.failure
        return (
            isinstance(failure, httpx.HTTPStatusError)
            and failure.response.status_code in self.status_codes
        )

    def describe(self, context: Context) -> str:
        failure = context.failure
        status = (
            failure.response.status_code if isinstance(failure, httpx.HTTPStatusError) else None
        )
        return f"context.failure.status_code={status} is in {self.status_codes}"

    def __repr__(self) -> str:
        return f"HttpStatusIn(status_codes={self.status_codes})"

    def __str__(self) -> str:
        return f"context.failure.status_code is in {self.status_codes}"


# Network errors (timeouts, connection failures) or retryable status codes
TRANSIENT_HTTP_ERRORS = ExceptionIn(httpx.TransportError) | HttpStatusIn()
