"""
Convenience entry points bundling the executor with a classifier.

The ``retry_default*`` variants read the process-wide ``DEFAULT_CONFIG`` (or
an explicitly supplied ``RetryConfig``) on every attempt. The others take an
explicit budget and delay.
"""

import threading
from typing import Callable, Iterable, TypeVar

from .config import DEFAULT_CONFIG, Delay, RetryConfig, RetryPolicy
from .executor import OnRetry, execute, execute_with_settings
from ..classifiers import AllowList, DenyList, ErrorClassifier, always, custom

T = TypeVar("T")


def retry_default(
    operation: Callable[[], T],
    *,
    config: RetryConfig | None = None,
    sleep: Callable[[float], None] | None = None,
    on_retry: OnRetry | None = None,
    cancel_event: threading.Event | None = None,
) -> T:
    """Retry every error using the default budget and delay."""
    return execute_with_settings(
        operation,
        config or DEFAULT_CONFIG,
        always,
        sleep=sleep,
        on_retry=on_retry,
        cancel_event=cancel_event,
    )


def retry_default_with_custom_check(
    operation: Callable[[], T],
    classifier: Callable[[BaseException], object],
    *,
    config: RetryConfig | None = None,
    sleep: Callable[[float], None] | None = None,
    on_retry: OnRetry | None = None,
    cancel_event: threading.Event | None = None,
) -> T:
    """Use the default budget and delay, stopping once ``classifier`` returns False."""
    return execute_with_settings(
        operation,
        config or DEFAULT_CONFIG,
        custom(classifier),
        sleep=sleep,
        on_retry=on_retry,
        cancel_event=cancel_event,
    )


def retry_with_custom_check(
    operation: Callable[[], T],
    max_attempts: int,
    delay: Delay,
    classifier: ErrorClassifier,
    *,
    sleep: Callable[[float], None] | None = None,
    on_retry: OnRetry | None = None,
    cancel_event: threading.Event | None = None,
) -> T:
    """Retry with an explicit budget, letting ``classifier`` decide which errors to retry."""
    policy = RetryPolicy(max_attempts=max_attempts, delay=delay, classifier=custom(classifier))
    return execute(
        operation, policy, sleep=sleep, on_retry=on_retry, cancel_event=cancel_event
    )


def retry_with_non_retryable_errors(
    operation: Callable[[], T],
    max_attempts: int,
    delay: Delay,
    deny_patterns: Iterable[str],
    *,
    sleep: Callable[[float], None] | None = None,
    on_retry: OnRetry | None = None,
    cancel_event: threading.Event | None = None,
) -> T:
    """Retry unless the error message contains one of ``deny_patterns``."""
    policy = RetryPolicy(
        max_attempts=max_attempts, delay=delay, classifier=DenyList(deny_patterns)
    )
    return execute(
        operation, policy, sleep=sleep, on_retry=on_retry, cancel_event=cancel_event
    )


def retry_with_retryable_errors(
    operation: Callable[[], T],
    max_attempts: int,
    delay: Delay,
    allow_patterns: Iterable[str],
    *,
    sleep: Callable[[float], None] | None = None,
    on_retry: OnRetry | None = None,
    cancel_event: threading.Event | None = None,
) -> T:
    """Retry only while the error message contains one of ``allow_patterns``."""
    policy = RetryPolicy(
        max_attempts=max_attempts, delay=delay, classifier=AllowList(allow_patterns)
    )
    return execute(
        operation, policy, sleep=sleep, on_retry=on_retry, cancel_event=cancel_event
    )


def retry_always(
    operation: Callable[[], T],
    max_attempts: int,
    delay: Delay,
    *,
    sleep: Callable[[float], None] | None = None,
    on_retry: OnRetry | None = None,
    cancel_event: threading.Event | None = None,
) -> T:
    """Retry every error until success or until ``max_attempts`` are spent."""
    policy = RetryPolicy(max_attempts=max_attempts, delay=delay, classifier=always)
    return execute(
        operation, policy, sleep=sleep, on_retry=on_retry, cancel_event=cancel_event
    )
