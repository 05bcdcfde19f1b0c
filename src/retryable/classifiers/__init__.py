"""
retryable - Error Classifiers.

Interchangeable policies answering "is this error retryable?".
"""

from .base import (
    ErrorClassifier,
    AllowList,
    DenyList,
    always,
    contains_error_message,
    custom,
)
from .http import DEFAULT_RETRYABLE_STATUS_CODES, HttpStatusClassifier

__all__ = [
    "ErrorClassifier",
    "AllowList",
    "DenyList",
    "always",
    "contains_error_message",
    "custom",
    "DEFAULT_RETRYABLE_STATUS_CODES",
    "HttpStatusClassifier",
]
