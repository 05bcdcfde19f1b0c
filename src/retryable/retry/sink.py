"""
Process-wide logging sink for retried attempts.

The sink is called synchronously with a printf-style format and its
arguments. No timeout is enforced, so a slow sink stalls the retry loop.
"""

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

LogSink = Callable[..., None]

RETRY_MESSAGE = "Attempt %d/%d failed: %s. Retrying in %ss..."


def default_sink(fmt: str, *args: Any) -> None:
    """Write the record through the standard logging module."""
    logger.warning(fmt, *args)


_sink: LogSink = default_sink


def set_logging_sink(sink: LogSink | None) -> None:
    """
    Replace the process-wide logging callback.

    Args:
        sink: Callable accepting ``(fmt, *args)``; None restores the default
    """
    global _sink
    _sink = sink if sink is not None else default_sink


def get_logging_sink() -> LogSink:
    """Return the callback currently receiving retry records."""
    return _sink


def log_retry(attempt: int, max_attempts: int, error: BaseException, delay: float) -> None:
    _sink(RETRY_MESSAGE, attempt, max_attempts, error, delay)
