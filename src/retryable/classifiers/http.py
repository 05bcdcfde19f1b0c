"""
Classifier for operations that talk HTTP through httpx.
"""

from typing import Set

import httpx

DEFAULT_RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class HttpStatusClassifier:
    """
    Retry httpx failures that are likely transient.

    Attributes:
        status_codes: HTTP status codes that trigger retry
        retry_transport_errors: Also retry connect failures, timeouts and
            other ``httpx.TransportError`` subclasses
    """

    def __init__(
        self,
        status_codes: Set[int] | None = None,
        retry_transport_errors: bool = True,
    ):
        self.status_codes = frozenset(
            DEFAULT_RETRYABLE_STATUS_CODES if status_codes is None else status_codes
        )
        self.retry_transport_errors = retry_transport_errors

    def should_retry(self, status_code: int) -> bool:
        """Check if the given status code should trigger a retry."""
        return status_code in self.status_codes

    def __call__(self, error: BaseException) -> bool:
        if isinstance(error, httpx.HTTPStatusError):
            return self.should_retry(error.response.status_code)
        if isinstance(error, httpx.TransportError):
            return self.retry_transport_errors
        return False
