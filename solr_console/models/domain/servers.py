"""Registered Solr server entity."""

import uuid
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field

from solr_console.core.solr.connection import ConnectionContext


class ServerStatus(str, Enum):
    """Result of the most recent connectivity check."""

    ONLINE = "online"
    OFFLINE = "offline"
    ERROR = "error"


class SolrServer(BaseModel):
    """A Solr server the operator has registered.

    The browser owns persistence of these records; the console only builds
    them transiently (e.g. for the CLI probe) and converts them into a
    per-request connection.
    """

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    name: str
    url: str
    username: str | None = None
    password: str | None = Field(None, repr=False)
    status: ServerStatus = ServerStatus.OFFLINE
    last_checked: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def connection(self) -> ConnectionContext:
        return ConnectionContext(
            base_url=self.url, username=self.username, password=self.password
        )

    def with_status(self, status: ServerStatus) -> "SolrServer":
        """Return a copy stamped with ``status`` and the current time."""
        return self.model_copy(
            update={"status": status, "last_checked": datetime.now(timezone.utc)}
        )


__all__ = ["ServerStatus", "SolrServer"]
