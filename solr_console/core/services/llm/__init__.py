"""LLM provider integration and assistant helpers."""

from solr_console.core.services.llm.assistant import (
    AI_DISABLED_MESSAGE,
    INVALID_SCHEMA_MESSAGE,
    SchemaAssistant,
)
from solr_console.core.services.llm.providers import LLMServiceError, TextGenerator

__all__ = [
    "AI_DISABLED_MESSAGE",
    "INVALID_SCHEMA_MESSAGE",
    "LLMServiceError",
    "SchemaAssistant",
    "TextGenerator",
]
