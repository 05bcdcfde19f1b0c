"""Shared fixtures."""

import pytest

from retryable import DEFAULT_CONFIG, set_logging_sink


@pytest.fixture(autouse=True)
def restore_defaults():
    """Put the process-wide defaults and sink back after each test."""
    max_attempts, delay = DEFAULT_CONFIG.max_attempts, DEFAULT_CONFIG.delay
    yield
    DEFAULT_CONFIG.max_attempts = max_attempts
    DEFAULT_CONFIG.delay = delay
    set_logging_sink(None)


class FlakyOperation:
    """Raises the given errors in order, then returns ``result``."""

    def __init__(self, errors: list[Exception], result=None):
        self.errors = list(errors)
        self.result = result
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.errors:
            raise self.errors.pop(0)
        return self.result


class FailingOperation:
    """Always raises a fresh error with the given message."""

    def __init__(self, message: str = "temporary error"):
        self.message = message
        self.calls = 0
        self.raised: list[Exception] = []

    def __call__(self):
        self.calls += 1
        error = RuntimeError(f"{self.message} #{self.calls}")
        self.raised.append(error)
        raise error


@pytest.fixture
def no_sleep():
    """Record requested pauses instead of sleeping."""
    pauses: list[float] = []
    return pauses, pauses.append
