"""
retryable - Generic retry executor.

Invoke a fallible operation until it succeeds, fails with a non-retryable
error, or exhausts its attempt budget.
"""

from .classifiers import (
    AllowList,
    DenyList,
    HttpStatusClassifier,
    always,
    contains_error_message,
    custom,
)
from .exceptions import (
    RetryableError,
    InvalidRetryPolicyError,
    RetryCancelledError,
)
from .retry import (
    DEFAULT_CONFIG,
    RetryConfig,
    RetryPolicy,
    async_execute,
    async_with_retry,
    configure,
    execute,
    retry_always,
    retry_default,
    retry_default_with_custom_check,
    retry_with_custom_check,
    retry_with_non_retryable_errors,
    retry_with_retryable_errors,
    set_logging_sink,
    with_retry,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Classifiers
    "AllowList",
    "DenyList",
    "HttpStatusClassifier",
    "always",
    "contains_error_message",
    "custom",
    # Exceptions
    "RetryableError",
    "InvalidRetryPolicyError",
    "RetryCancelledError",
    # Configuration
    "DEFAULT_CONFIG",
    "RetryConfig",
    "RetryPolicy",
    "configure",
    "set_logging_sink",
    # Retry
    "async_execute",
    "async_with_retry",
    "execute",
    "retry_always",
    "retry_default",
    "retry_default_with_custom_check",
    "retry_with_custom_check",
    "retry_with_non_retryable_errors",
    "retry_with_retryable_errors",
    "with_retry",
]
