"""External service integrations."""

from solr_console.core.services.llm import *

__all__ = [
    # LLM services
    "LLMServiceError",
    "SchemaAssistant",
    "TextGenerator",
]
