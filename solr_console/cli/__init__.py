"""Command-line interface for Solr Console."""

from solr_console import __version__

__all__ = ["__version__"]
