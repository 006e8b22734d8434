"""Proxy layer between the console API and remote Solr servers."""

from solr_console.core.solr.client import SolrClient
from solr_console.core.solr.connection import ConnectionContext
from solr_console.core.solr.errors import (
    ErrorScope,
    SolrError,
    translate_error,
)
from solr_console.core.solr.service import SolrService

__all__ = [
    "ConnectionContext",
    "ErrorScope",
    "SolrClient",
    "SolrError",
    "SolrService",
    "translate_error",
]
