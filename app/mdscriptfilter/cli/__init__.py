"""CLI package for mdscriptfilter.

This package contains the Typer application.
"""

from mdscriptfilter.cli.main import app

__all__ = ["app"]
