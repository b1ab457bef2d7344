"""Search request and result models.

This module defines the immutable inputs and outputs of a single
metadata search.
"""

from dataclasses import dataclass, field

from mdscriptfilter.core.config import DEFAULT_SORT_KEY


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """A metadata query together with its scope and ordering.

    Attributes:
        predicate: Query in the backend's own grammar. Never parsed here.
        scopes: Directories the search is restricted to, in order.
        sort_key: Metadata attribute to order results by.
        ascending: Sort direction. Descending when False.
    """

    predicate: str
    scopes: tuple[str, ...]
    sort_key: str = field(default=DEFAULT_SORT_KEY)
    ascending: bool = field(default=False)

    def __post_init__(self) -> None:
        """Validate request data after initialization."""
        if not self.scopes:
            msg = "Search request needs at least one scope directory"
            raise ValueError(msg)
        if not self.sort_key:
            msg = "Sort key cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Ordered absolute paths returned by the backend.

    Attributes:
        paths: Matched paths, in the backend's sort order.
    """

    paths: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.paths)

    def __bool__(self) -> bool:
        return bool(self.paths)
