"""
Base exception classes for the retry executor.

Operation failures are never wrapped in these: the executor re-raises the
operation's own exception. These cover misuse and explicit cancellation only.
"""


class RetryableError(Exception):
    """Base exception for all errors raised by the retry machinery itself."""

    def __init__(self, message: str, *, attempts: int | None = None):
        super().__init__(message)
        self.message = message
        self.attempts = attempts

    def __str__(self) -> str:
        if self.attempts is not None:
            return f"{self.message} (after {self.attempts} attempt(s))"
        return self.message


class InvalidRetryPolicyError(RetryableError, ValueError):
    """Raised when a policy has a non-positive budget or a negative delay."""

    def __init__(self, message: str = "Invalid retry policy", **kwargs):
        super().__init__(message, **kwargs)


class RetryCancelledError(RetryableError):
    """Raised when a cancel event is set before an attempt or a pause."""

    def __init__(
        self,
        message: str = "Retry cancelled",
        *,
        last_error: BaseException | None = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.last_error = last_error
