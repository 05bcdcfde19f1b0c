"""
retryable - Exception Hierarchy.

Errors raised by the retry machinery, never by the retried operation.
"""

from .base import (
    RetryableError,
    InvalidRetryPolicyError,
    RetryCancelledError,
)

__all__ = [
    "RetryableError",
    "InvalidRetryPolicyError",
    "RetryCancelledError",
]
