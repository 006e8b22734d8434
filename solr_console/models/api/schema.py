"""Schema-related API models."""

from pydantic import ConfigDict, Field

from solr_console.models.api.common import CamelModel


class SchemaField(CamelModel):
    """A field definition. Extra Solr attributes are passed through untouched."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1)
    type: str | None = None
    required: bool | None = None
    indexed: bool | None = None
    stored: bool | None = None
    multi_valued: bool | None = None
    doc_values: bool | None = None


class DynamicField(CamelModel):
    """A wildcard field definition; ``name`` holds the pattern (e.g. ``*_s``)."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1)
    type: str | None = None
    indexed: bool | None = None
    stored: bool | None = None
    multi_valued: bool | None = None
    doc_values: bool | None = None


class CopyField(CamelModel):
    """Copy-field rule duplicating ``source`` into ``dest`` at index time."""

    source: str = Field(..., min_length=1)
    dest: str = Field(..., min_length=1)
    max_chars: int | None = None


class SchemaDescriptor(CamelModel):
    """Normalized view of a collection schema."""

    name: str = ""
    version: float = 1.0
    unique_key_field: str = "id"
    field_types: list[dict] = Field(default_factory=list)
    fields: list[SchemaField] = Field(default_factory=list)
    dynamic_fields: list[DynamicField] = Field(default_factory=list)
    copy_fields: list[CopyField] = Field(default_factory=list)

    def field_names(self) -> set[str]:
        return {field.name for field in self.fields}


class SchemaResponse(CamelModel):
    """Envelope for a schema fetch."""

    schema_: SchemaDescriptor = Field(..., alias="schema")


__all__ = [
    "SchemaField",
    "DynamicField",
    "CopyField",
    "SchemaDescriptor",
    "SchemaResponse",
]
