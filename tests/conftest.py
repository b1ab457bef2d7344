"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable

import pytest
from mdscriptfilter.backends.base import ClassificationError, SearchBackend, SearchBackendError
from mdscriptfilter.models.search import SearchRequest, SearchResult


class FakeBackend(SearchBackend):
    """In-memory backend returning canned paths and content types."""

    def __init__(
        self,
        paths: list[str] | None = None,
        content_types: dict[str, str] | None = None,
        error: SearchBackendError | None = None,
    ) -> None:
        self.paths = paths or []
        self.content_types = content_types or {}
        self.error = error
        self.requests: list[SearchRequest] = []
        self.classified: list[str] = []

    def search(self, request: SearchRequest) -> SearchResult:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return SearchResult(paths=tuple(self.paths))

    def classify(self, path: str) -> str:
        self.classified.append(path)
        try:
            return self.content_types[path]
        except KeyError:
            raise ClassificationError(f"No content type for {path}") from None

    def is_available(self) -> bool:
        return True


@pytest.fixture
def make_backend() -> Callable[..., FakeBackend]:
    """Factory for FakeBackend instances."""
    return FakeBackend


@pytest.fixture
def home() -> str:
    """Home directory used by item building tests."""
    return "/Users/me"


@pytest.fixture
def image_formats() -> frozenset[str]:
    """Small set of previewable content types."""
    return frozenset({"public.png", "public.jpeg", "com.adobe.pdf"})


@pytest.fixture
def mock_mdfind_output() -> str:
    """Sample `mdfind -0` output for testing."""
    return (
        "/Users/me/Documents/report.pdf\0"
        "/Users/me/Desktop/b.png\0"
        "/Users/me/Library/Caches/a.txt\0"
    )
