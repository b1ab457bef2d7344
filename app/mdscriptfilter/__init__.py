"""mdscriptfilter - Spotlight search results as Alfred Script Filter JSON."""

__version__ = "25.1"
