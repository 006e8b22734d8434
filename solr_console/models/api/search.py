"""Search-related API models."""

from typing import Any

from pydantic import BaseModel, Field

from solr_console.models.api.common import CamelModel


class SearchQuery(BaseModel):
    """Parameters accepted by the collection search endpoint."""

    q: str = "*:*"
    start: int = Field(0, ge=0)
    rows: int = Field(10, ge=0)
    facet_fields: list[str] = Field(default_factory=list)
    filter_queries: list[str] = Field(default_factory=list)
    sort: str | None = None


class SearchResult(CamelModel):
    """Normalized select response."""

    docs: list[dict[str, Any]] = Field(default_factory=list)
    num_found: int = 0
    start: int = 0
    facets: dict[str, dict[str, int]] = Field(default_factory=dict)
    highlighting: dict[str, dict[str, list[str]]] = Field(default_factory=dict)


__all__ = ["SearchQuery", "SearchResult"]
