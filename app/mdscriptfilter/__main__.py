"""Allow running as ``python -m mdscriptfilter``."""

from mdscriptfilter.cli.main import app

app()
