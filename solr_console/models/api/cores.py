"""Core administration and replication models."""

from pydantic import BaseModel, ConfigDict, Field

from solr_console.models.api.common import CamelModel


class CoreCreate(BaseModel):
    """Request model for creating a core."""

    name: str = ""


class CoreIndex(CamelModel):
    """Index section of a core status entry.

    Solr keys not modelled here (``current``, ``directory``...) pass through.
    """

    model_config = ConfigDict(extra="allow")

    num_docs: int = 0
    max_doc: int = 0
    deleted_docs: int = 0
    version: int | None = None
    segment_count: int | None = None
    size: str = "0 bytes"
    last_modified: str | None = None


class CoreInfo(CamelModel):
    """Status of a single core, keyed as the cores admin handler reports it."""

    model_config = ConfigDict(extra="allow")

    name: str
    instance_dir: str | None = None
    data_dir: str | None = None
    start_time: str | None = None
    uptime: int | None = None
    index: CoreIndex = Field(default_factory=CoreIndex)


class CoreStatusResponse(CamelModel):
    """Every core by name, plus cores that failed to load."""

    status: dict[str, CoreInfo] = Field(default_factory=dict)
    init_failures: dict[str, str] = Field(default_factory=dict)


class ReplicationEnable(BaseModel):
    """Selects whether the core acts as replication master or slave."""

    master: bool = False


__all__ = ["CoreCreate", "CoreIndex", "CoreInfo", "CoreStatusResponse", "ReplicationEnable"]
