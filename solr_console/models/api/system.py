"""System and monitoring related API models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SystemInfo(BaseModel):
    """Subset of ``admin/info/system`` the UI relies on.

    Keys keep Solr's own spelling (``solr_home``) since the browser checks
    for them directly.
    """

    model_config = ConfigDict(extra="allow")

    lucene: dict[str, Any]
    solr_home: str
    mode: str | None = None
    jvm: dict[str, Any] = Field(default_factory=dict)
    system: dict[str, Any] = Field(default_factory=dict)

    @property
    def solr_version(self) -> str | None:
        return self.lucene.get("solr-spec-version")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    timestamp: datetime
    version: str


class RootResponse(BaseModel):
    """Response for root endpoint."""

    message: str
    version: str
    docs: str


__all__ = ["SystemInfo", "HealthResponse", "RootResponse"]
