"""Configuration models for Solr Console."""

from solr_console.models.config.server import *
from solr_console.models.config.settings import *

__all__ = ["ServerConfig", "ConsoleSettings"]
