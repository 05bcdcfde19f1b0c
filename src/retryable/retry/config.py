"""
Retry configuration and policy definitions.
"""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Protocol

from ..classifiers import ErrorClassifier, always
from ..exceptions import InvalidRetryPolicyError

logger = logging.getLogger(__name__)

Delay = float | timedelta


def to_seconds(delay: Delay) -> float:
    """Normalize a delay given as seconds or ``timedelta`` to float seconds."""
    if isinstance(delay, timedelta):
        return delay.total_seconds()
    return float(delay)


def validate(max_attempts: int, delay: Delay) -> None:
    """Reject a budget below one attempt or a negative pause."""
    if max_attempts < 1:
        logger.debug(f"Rejected max_attempts={max_attempts}")
        raise InvalidRetryPolicyError(
            f"max_attempts must be at least 1, got {max_attempts}"
        )
    if to_seconds(delay) < 0:
        logger.debug(f"Rejected delay={delay}")
        raise InvalidRetryPolicyError(f"delay must not be negative, got {delay}")


class RetrySettings(Protocol):
    """Anything exposing an attempt budget and a fixed delay."""

    max_attempts: int
    delay: Delay


@dataclass
class RetryConfig:
    """
    Mutable retry settings shared by the zero-configuration entry points.

    Values are read on every loop iteration, so changing them while a retry
    sequence is running affects its remaining attempts. Mutating a shared
    instance from several threads is unsynchronized; treat it as a startup
    concern.

    Attributes:
        max_attempts: Maximum number of operation invocations (default: 3)
        delay: Pause between attempts, seconds or timedelta (default: 1.0)
    """

    max_attempts: int = 3
    delay: Delay = 1.0

    def __post_init__(self) -> None:
        validate(self.max_attempts, self.delay)

    def to_policy(self, classifier: ErrorClassifier = always) -> "RetryPolicy":
        """Snapshot the current values into an immutable policy."""
        return RetryPolicy(
            max_attempts=self.max_attempts,
            delay=self.delay,
            classifier=classifier,
        )

    @classmethod
    def single_attempt(cls) -> "RetryConfig":
        """Preset for no retry (single attempt only)."""
        return cls(max_attempts=1, delay=0.0)

    @classmethod
    def immediate(cls, max_attempts: int = 3) -> "RetryConfig":
        """Preset retrying without pausing between attempts."""
        return cls(max_attempts=max_attempts, delay=0.0)


@dataclass(frozen=True)
class RetryPolicy:
    """
    Immutable settings for one executor invocation.

    Attributes:
        max_attempts: Maximum number of operation invocations, at least 1
        delay: Fixed pause in seconds after each retryable failure
        classifier: Decides whether a raised error allows another attempt
    """

    max_attempts: int = 3
    delay: float = 1.0
    classifier: ErrorClassifier = field(default=always)

    def __post_init__(self) -> None:
        validate(self.max_attempts, self.delay)
        object.__setattr__(self, "delay", to_seconds(self.delay))


DEFAULT_CONFIG = RetryConfig()


def configure(max_attempts: int | None = None, delay: Delay | None = None) -> RetryConfig:
    """
    Update the process-wide defaults in place.

    Args:
        max_attempts: New default attempt budget, unchanged if None
        delay: New default delay, unchanged if None

    Returns:
        The shared default configuration
    """
    validate(
        DEFAULT_CONFIG.max_attempts if max_attempts is None else max_attempts,
        DEFAULT_CONFIG.delay if delay is None else delay,
    )
    if max_attempts is not None:
        DEFAULT_CONFIG.max_attempts = max_attempts
    if delay is not None:
        DEFAULT_CONFIG.delay = delay
    return DEFAULT_CONFIG
