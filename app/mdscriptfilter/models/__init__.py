"""Data models for mdscriptfilter.

This module exports the core data structures used throughout the application.
"""

from mdscriptfilter.models.item import (
    FILE_ICON,
    FILE_SKIPCHECK,
    DisplayItem,
    Icon,
    NoResultsItem,
    ScriptFilterOutput,
)
from mdscriptfilter.models.search import SearchRequest, SearchResult

__all__ = [
    "FILE_ICON",
    "FILE_SKIPCHECK",
    "DisplayItem",
    "Icon",
    "NoResultsItem",
    "ScriptFilterOutput",
    "SearchRequest",
    "SearchResult",
]
