"""Domain models."""

from solr_console.models.domain.servers import *

__all__ = ["ServerStatus", "SolrServer"]
