"""Search backends for metadata queries.

This module exports the backend interface, its errors, and the Spotlight
implementation.
"""

from mdscriptfilter.backends.base import (
    BackendUnavailableError,
    ClassificationError,
    InvalidPredicateError,
    ScopeError,
    SearchBackend,
    SearchBackendError,
    SearchTimeoutError,
)
from mdscriptfilter.backends.spotlight import SpotlightBackend

__all__ = [
    "BackendUnavailableError",
    "ClassificationError",
    "InvalidPredicateError",
    "ScopeError",
    "SearchBackend",
    "SearchBackendError",
    "SearchTimeoutError",
    "SpotlightBackend",
]
