"""Unit tests for search request and result models."""

import dataclasses

import pytest
from mdscriptfilter.models.search import SearchRequest, SearchResult


class TestSearchRequest:
    """Tests for SearchRequest dataclass."""

    def test_defaults(self) -> None:
        """Sort by file name, descending, by default."""
        request = SearchRequest(predicate="kMDItemFSName == '*'", scopes=("/Users/me",))

        assert request.sort_key == "kMDItemFSName"
        assert request.ascending is False

    def test_requires_scope(self) -> None:
        """At least one scope directory is needed."""
        with pytest.raises(ValueError, match="at least one scope"):
            SearchRequest(predicate="*", scopes=())

    def test_requires_sort_key(self) -> None:
        """Empty sort key is rejected."""
        with pytest.raises(ValueError, match="Sort key"):
            SearchRequest(predicate="*", scopes=("/",), sort_key="")

    def test_predicate_not_validated(self) -> None:
        """Predicates are opaque and accepted as given."""
        request = SearchRequest(predicate="this is not (valid", scopes=("/",))
        assert request.predicate == "this is not (valid"

    def test_is_immutable(self) -> None:
        """Requests cannot be modified."""
        request = SearchRequest(predicate="*", scopes=("/",))
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.predicate = "x"  # type: ignore[misc]


class TestSearchResult:
    """Tests for SearchResult dataclass."""

    def test_empty(self) -> None:
        """Default result has no paths and is falsy."""
        result = SearchResult()
        assert len(result) == 0
        assert not result

    def test_len(self) -> None:
        """Length is the number of paths."""
        assert len(SearchResult(paths=("/a", "/b"))) == 2
