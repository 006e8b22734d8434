"""AI assistant request/response models."""

from typing import Literal

from pydantic import BaseModel, Field

from solr_console.models.api.common import CamelModel


class AIServiceConfig(CamelModel):
    """Provider configuration sent by the browser with every AI call."""

    enabled: bool = False
    provider: Literal["openrouter", "ollama"] = "openrouter"
    api_key: str | None = Field(None, repr=False)
    base_url: str | None = None
    model: str | None = None


class GenerateRequest(BaseModel):
    """Raw prompt forwarded to the configured provider."""

    prompt: str
    config: AIServiceConfig


class SchemaGenerationRequest(BaseModel):
    """Natural-language description of the schema to draft."""

    description: str = Field(..., min_length=1)
    requirements: list[str] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)
    config: AIServiceConfig


class SchemaExamplesRequest(BaseModel):
    config: AIServiceConfig


class QueryOptimizationRequest(BaseModel):
    """Query to optimize and, optionally, the fields it may target."""

    query: str = Field(..., min_length=1)
    fields: list[str] | None = None
    config: AIServiceConfig


class AIResponse(BaseModel):
    text: str | None = None
    error: str | None = None


class SchemaExamplesResponse(BaseModel):
    examples: list[str] = Field(default_factory=list)


__all__ = [
    "AIServiceConfig",
    "GenerateRequest",
    "SchemaGenerationRequest",
    "SchemaExamplesRequest",
    "QueryOptimizationRequest",
    "AIResponse",
    "SchemaExamplesResponse",
]
