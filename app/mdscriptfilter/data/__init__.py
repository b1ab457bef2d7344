"""Bundled data files for mdscriptfilter."""
