"""
Retry loop and retry decorators.
"""

import asyncio
import functools
import logging
import threading
import time
from typing import Awaitable, Callable, ParamSpec, TypeVar

from .config import DEFAULT_CONFIG, RetryPolicy, RetrySettings, to_seconds, validate
from .sink import log_retry
from ..classifiers import ErrorClassifier, always
from ..exceptions import RetryCancelledError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

OnRetry = Callable[[int, Exception, float], None]


def _check_cancelled(
    cancel_event: threading.Event | None,
    attempts: int,
    last_error: Exception | None,
) -> None:
    if cancel_event is not None and cancel_event.is_set():
        logger.debug(f"Retry cancelled after {attempts} attempt(s)")
        raise RetryCancelledError(attempts=attempts, last_error=last_error) from last_error


def execute_with_settings(
    operation: Callable[[], T],
    settings: RetrySettings,
    classifier: ErrorClassifier,
    *,
    sleep: Callable[[float], None] | None = None,
    on_retry: OnRetry | None = None,
    cancel_event: threading.Event | None = None,
) -> T:
    """
    Invoke an operation until it succeeds, fails terminally or runs out of attempts.

    ``settings.max_attempts`` and ``settings.delay`` are read again on every
    iteration; a delay made negative mid-sequence pauses for zero seconds.
    Every retryable failure is logged and followed by the delay, including
    the one on the final attempt.

    Args:
        operation: Zero-argument callable to invoke
        settings: Source of the attempt budget and delay
        classifier: Returns True if a raised error allows another attempt
        sleep: Pause function (default: cancel_event.wait when an event is
            given, so a pause ends as soon as it is set; otherwise time.sleep)
        on_retry: Optional callback(attempt, exception, delay) after each logged failure
        cancel_event: Optional event checked before each attempt and each pause

    Returns:
        The operation's return value from the first successful attempt

    Raises:
        The last exception raised by the operation, unchanged
    """
    validate(settings.max_attempts, settings.delay)
    if sleep is None:
        sleep = cancel_event.wait if cancel_event is not None else time.sleep

    last_exception: Exception | None = None
    attempt = 0

    while attempt < settings.max_attempts:
        _check_cancelled(cancel_event, attempt, last_exception)
        attempt += 1
        try:
            return operation()
        except Exception as e:
            last_exception = e
            if not classifier(e):
                raise

            max_attempts = settings.max_attempts
            delay = max(0.0, to_seconds(settings.delay))
            log_retry(attempt, max_attempts, e, delay)
            if on_retry:
                on_retry(attempt, e, delay)
            _check_cancelled(cancel_event, attempt, last_exception)
            sleep(delay)

    if last_exception is not None:
        raise last_exception
    raise RuntimeError("Retry loop exited unexpectedly")


def execute(
    operation: Callable[[], T],
    policy: RetryPolicy,
    *,
    sleep: Callable[[float], None] | None = None,
    on_retry: OnRetry | None = None,
    cancel_event: threading.Event | None = None,
) -> T:
    """Run ``operation`` under a fixed policy. See ``execute_with_settings``."""
    return execute_with_settings(
        operation,
        policy,
        policy.classifier,
        sleep=sleep,
        on_retry=on_retry,
        cancel_event=cancel_event,
    )


async def async_execute_with_settings(
    operation: Callable[[], Awaitable[T]],
    settings: RetrySettings,
    classifier: ErrorClassifier,
    *,
    on_retry: OnRetry | None = None,
) -> T:
    """
    Async counterpart of ``execute_with_settings``.

    Pauses with ``asyncio.sleep``; cancel the surrounding task to abort.
    """
    validate(settings.max_attempts, settings.delay)

    last_exception: Exception | None = None
    attempt = 0

    while attempt < settings.max_attempts:
        attempt += 1
        try:
            return await operation()
        except Exception as e:
            last_exception = e
            if not classifier(e):
                raise

            max_attempts = settings.max_attempts
            delay = max(0.0, to_seconds(settings.delay))
            log_retry(attempt, max_attempts, e, delay)
            if on_retry:
                on_retry(attempt, e, delay)
            await asyncio.sleep(delay)

    if last_exception is not None:
        raise last_exception
    raise RuntimeError("Retry loop exited unexpectedly")


async def async_execute(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
    *,
    on_retry: OnRetry | None = None,
) -> T:
    """Run an async ``operation`` under a fixed policy."""
    return await async_execute_with_settings(
        operation, policy, policy.classifier, on_retry=on_retry
    )


def with_retry(
    policy: RetryPolicy | None = None,
    on_retry: OnRetry | None = None,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator for synchronous functions with retry logic.

    Args:
        policy: Retry policy (default: live defaults, retry every error)
        on_retry: Optional callback(attempt, exception, delay) called before each retry

    Returns:
        Decorated function with retry behavior
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            operation = functools.partial(func, *args, **kwargs)
            if policy is None:
                return execute_with_settings(
                    operation, DEFAULT_CONFIG, always, on_retry=on_retry
                )
            return execute(operation, policy, on_retry=on_retry)

        return wrapper

    return decorator


def async_with_retry(
    policy: RetryPolicy | None = None,
    on_retry: OnRetry | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator for async functions with retry logic.

    Args:
        policy: Retry policy (default: live defaults, retry every error)
        on_retry: Optional callback(attempt, exception, delay) called before each retry

    Returns:
        Decorated async function with retry behavior
    """

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            operation = functools.partial(func, *args, **kwargs)
            if policy is None:
                return await async_execute_with_settings(
                    operation, DEFAULT_CONFIG, always, on_retry=on_retry
                )
            return await async_execute(operation, policy, on_retry=on_retry)

        return wrapper

    return decorator
