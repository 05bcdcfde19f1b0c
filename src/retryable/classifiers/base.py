"""
Error classifiers deciding whether a failed attempt should be retried.

A classifier is any callable taking the raised exception and returning a
truthy value when another attempt is allowed.
"""

from typing import Callable, Iterable

ErrorClassifier = Callable[[BaseException], bool]


def as_patterns(patterns: Iterable[str]) -> tuple[str, ...]:
    """Collect patterns into a tuple, refusing a bare string."""
    if isinstance(patterns, (str, bytes)):
        raise TypeError(
            f"patterns must be a collection of strings, not {type(patterns).__name__}"
        )
    return tuple(patterns)


def contains_error_message(error: BaseException, patterns: Iterable[str]) -> bool:
    """
    Check whether the error message contains any of the given substrings.

    Matching is case-sensitive against ``str(error)`` and stops at the first
    pattern found. An empty pattern collection never matches.

    Args:
        error: The exception to inspect
        patterns: Substrings to look for

    Returns:
        True if at least one pattern occurs in the message

    Raises:
        TypeError: If patterns is a single str or bytes value
    """
    message = str(error)
    for pattern in as_patterns(patterns):
        if pattern in message:
            return True
    return False


def always(error: BaseException) -> bool:
    """Retry every error until the attempt budget runs out."""
    return True


def custom(predicate: Callable[[BaseException], object]) -> ErrorClassifier:
    """Adapt a caller-supplied predicate to the classifier contract."""

    def classify(error: BaseException) -> bool:
        return bool(predicate(error))

    return classify


class AllowList:
    """Retry only errors whose message contains one of the patterns."""

    def __init__(self, patterns: Iterable[str]):
        self.patterns = as_patterns(patterns)

    def __call__(self, error: BaseException) -> bool:
        return contains_error_message(error, self.patterns)

    def __repr__(self) -> str:
        return f"AllowList({list(self.patterns)!r})"


class DenyList:
    """Retry every error except those whose message contains one of the patterns."""

    def __init__(self, patterns: Iterable[str]):
        self.patterns = as_patterns(patterns)

    def __call__(self, error: BaseException) -> bool:
        return not contains_error_message(error, self.patterns)

    def __repr__(self) -> str:
        return f"DenyList({list(self.patterns)!r})"
