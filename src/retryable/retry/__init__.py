"""
retryable - Retry Logic.

Fixed-delay retry executor with pluggable error classification.
"""

from .config import DEFAULT_CONFIG, RetryConfig, RetryPolicy, configure
from .executor import (
    async_execute,
    async_execute_with_settings,
    async_with_retry,
    execute,
    execute_with_settings,
    with_retry,
)
from .functions import (
    retry_always,
    retry_default,
    retry_default_with_custom_check,
    retry_with_custom_check,
    retry_with_non_retryable_errors,
    retry_with_retryable_errors,
)
from .sink import default_sink, get_logging_sink, set_logging_sink

__all__ = [
    "DEFAULT_CONFIG",
    "RetryConfig",
    "RetryPolicy",
    "configure",
    "async_execute",
    "async_execute_with_settings",
    "async_with_retry",
    "execute",
    "execute_with_settings",
    "with_retry",
    "retry_always",
    "retry_default",
    "retry_default_with_custom_check",
    "retry_with_custom_check",
    "retry_with_non_retryable_errors",
    "retry_with_retryable_errors",
    "default_sink",
    "get_logging_sink",
    "set_logging_sink",
]
