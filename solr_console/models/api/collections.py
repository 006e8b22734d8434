"""Collection-related API models."""

from pydantic import BaseModel, Field

from solr_console.models.api.common import CamelModel
from solr_console.models.api.schema import SchemaDescriptor


class CollectionCreate(BaseModel):
    """Request model for creating a collection."""

    name: str = Field("", description="Collection name")


class CollectionListResponse(BaseModel):
    """Names of the collections known to the cluster."""

    collections: list[str]


class CollectionStatus(CamelModel):
    """Index statistics for a single collection."""

    num_docs: int = 0
    max_doc: int = 0
    deleted_docs: int = 0
    index_size: str = "0 bytes"
    last_modified: str | None = None


class CollectionSummary(CollectionStatus):
    """Collection status joined with its schema."""

    name: str
    schema_: SchemaDescriptor = Field(..., alias="schema")


__all__ = [
    "CollectionCreate",
    "CollectionListResponse",
    "CollectionStatus",
    "CollectionSummary",
]
