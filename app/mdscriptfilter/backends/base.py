"""Abstract base class for metadata search backends.

This module defines the SearchBackend interface and the errors a backend
may raise. The result pipeline only talks to this interface.
"""

from abc import ABC, abstractmethod

from mdscriptfilter.models.search import SearchRequest, SearchResult


class SearchBackendError(Exception):
    """Base exception for fatal search failures."""


class BackendUnavailableError(SearchBackendError):
    """Raised when the metadata search service cannot be used."""


class InvalidPredicateError(SearchBackendError):
    """Raised when the backend rejects the query predicate."""


class ScopeError(SearchBackendError):
    """Raised when a scope directory is missing or inaccessible."""


class SearchTimeoutError(SearchBackendError):
    """Raised when the search does not finish within the configured timeout."""


class ClassificationError(Exception):
    """Raised when a file's content type cannot be determined.

    Not a SearchBackendError: callers fall back to a generic icon.
    """


class SearchBackend(ABC):
    """Abstract base class for all search backends.

    Backends run one query to completion and report the matched paths
    in the requested order.

    Example:
        >>> backend = SpotlightBackend()
        >>> if backend.is_available():
        ...     result = backend.search(SearchRequest("kMDItemFSName == '*.pdf'", ("/Users/me",)))
        ...     print(result.paths)
    """

    @abstractmethod
    def search(self, request: SearchRequest) -> SearchResult:
        """Run the query and block until the initial gathering finishes.

        Args:
            request: Predicate, scopes, and ordering.

        Returns:
            SearchResult with paths in the requested order.

        Raises:
            SearchBackendError: If the search cannot be completed.
        """

    @abstractmethod
    def classify(self, path: str) -> str:
        """Return the content type identifier of a file.

        Args:
            path: Absolute path to the file.

        Returns:
            Uniform type identifier such as "public.png".

        Raises:
            ClassificationError: If the type cannot be read.
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this backend can be used on the system.

        Returns:
            True if the backend can be used, False otherwise.
        """
