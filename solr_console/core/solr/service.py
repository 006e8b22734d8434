"""Logical Solr operations composed from builder, client and normalizers."""

import asyncio
from typing import Any

import httpx

from solr_console.core.logging import get_logger
from solr_console.core.solr import requests as solr_requests
from solr_console.core.solr.client import SolrClient
from solr_console.core.solr.connection import ConnectionContext
from solr_console.core.solr.errors import ClientInputError, ConflictError, SolrError
from solr_console.core.solr.normalizers import (
    normalize_collection_status,
    normalize_collections,
    normalize_core_status,
    normalize_schema,
    normalize_search,
    normalize_system_info,
)
from solr_console.core.solr.requests import READ_TIMEOUT, SolrRequest
from solr_console.models.api.collections import CollectionStatus, CollectionSummary
from solr_console.models.api.common import OperationResult
from solr_console.models.api.cores import CoreStatusResponse
from solr_console.models.api.schema import (
    CopyField,
    DynamicField,
    SchemaDescriptor,
    SchemaField,
)
from solr_console.models.api.search import SearchQuery, SearchResult
from solr_console.models.api.system import SystemInfo

logger = get_logger(__name__)


def _payload(model) -> dict[str, Any]:
    return model.model_dump(by_alias=True, exclude_none=True)


def schema_changes(current: SchemaDescriptor, desired: SchemaDescriptor) -> dict[str, list]:
    """Schema API commands turning ``current`` into ``desired``.

    Internal fields (leading underscore, e.g. ``_version_``) and the unique
    key are never deleted. Command order matters to Solr: copy-field rules
    go before the fields they reference are removed and after new fields
    are added.
    """
    commands: dict[str, list] = {}

    def add(command: str, payload: Any):
        commands.setdefault(command, []).append(payload)

    current_copies = {(c.source, c.dest) for c in current.copy_fields}
    desired_copies = {(c.source, c.dest): c for c in desired.copy_fields}
    for source, dest in sorted(current_copies - desired_copies.keys()):
        add("delete-copy-field", {"source": source, "dest": dest})

    for kind, current_items, desired_items in (
        ("dynamic-field", current.dynamic_fields, desired.dynamic_fields),
        ("field", current.fields, desired.fields),
    ):
        existing = {item.name: _payload(item) for item in current_items}
        wanted = {item.name: _payload(item) for item in desired_items}

        for name in existing.keys() - wanted.keys():
            if name.startswith("_") or name == current.unique_key_field:
                continue
            add(f"delete-{kind}", {"name": name})
        for name, payload in wanted.items():
            if name not in existing:
                add(f"add-{kind}", payload)
            elif existing[name] != payload:
                add(f"replace-{kind}", payload)

    for key, copy_field in desired_copies.items():
        if key not in current_copies:
            add("add-copy-field", _payload(copy_field))

    return commands


class SolrService:
    """All console operations against one Solr server.

    Stateless apart from the connection it was built for; create one per
    inbound request.
    """

    def __init__(
        self,
        connection: ConnectionContext,
        transport: httpx.AsyncBaseTransport | None = None,
        read_timeout: float = READ_TIMEOUT,
    ):
        self.connection = connection
        self.client = SolrClient(connection, transport=transport)
        self.read_timeout = read_timeout

    async def _send(self, request: SolrRequest) -> dict:
        return await self.client.send(request)

    # Collections

    async def list_collections(self) -> list[str]:
        data = await self._send(solr_requests.list_collections(self.read_timeout))
        return normalize_collections(data)

    async def create_collection(self, name: str) -> OperationResult:
        """Create ``name`` unless a collection with that exact name exists."""
        if name in await self.list_collections():
            raise ConflictError(f"Collection '{name}' already exists", status_code=400)

        await self._send(solr_requests.create_collection(name))
        logger.info("Created collection", collection=name)
        return OperationResult(message=f"Collection '{name}' created successfully")

    async def delete_collection(self, name: str) -> OperationResult:
        await self._send(solr_requests.delete_collection(name))
        logger.info("Deleted collection", collection=name)
        return OperationResult(message="Collection deleted successfully")

    async def collection_status(self, name: str) -> CollectionStatus:
        data = await self._send(solr_requests.collection_status(name, self.read_timeout))
        return normalize_collection_status(data)

    async def collection_summary(self, name: str) -> CollectionSummary:
        """Schema and status fetched concurrently; either failing fails the summary."""
        schema, status = await asyncio.gather(
            self.get_schema(name), self.collection_status(name)
        )
        return CollectionSummary(name=name, schema=schema, **status.model_dump())

    # Schema

    async def get_schema(self, collection: str) -> SchemaDescriptor:
        data = await self._send(solr_requests.get_schema(collection, self.read_timeout))
        return normalize_schema(collection, data)

    async def replace_schema(
        self, collection: str, desired: SchemaDescriptor
    ) -> OperationResult:
        if desired.unique_key_field not in desired.field_names():
            raise ClientInputError(
                f"Unique key field '{desired.unique_key_field}' must be defined in fields"
            )

        current = await self.get_schema(collection)
        if desired.unique_key_field != current.unique_key_field:
            raise ClientInputError("The unique key of an existing schema cannot be changed")

        commands = schema_changes(current, desired)
        if not commands:
            return OperationResult(message="Schema is already up to date")

        return await self._mutate_schema(
            collection, solr_requests.schema_commands(collection, commands), "Schema", "updated"
        )

    async def add_field(self, collection: str, field: SchemaField) -> OperationResult:
        request = solr_requests.add_field(collection, _payload(field))
        return await self._mutate_schema(collection, request, "Field", "added")

    async def replace_field(self, collection: str, field: SchemaField) -> OperationResult:
        request = solr_requests.replace_field(collection, _payload(field))
        return await self._mutate_schema(collection, request, "Field", "updated")

    async def delete_field(self, collection: str, name: str) -> OperationResult:
        schema = await self.get_schema(collection)
        if name == schema.unique_key_field:
            raise ClientInputError(f"Cannot delete the unique key field '{name}'")

        request = solr_requests.delete_field(collection, name)
        return await self._mutate_schema(collection, request, "Field", "deleted")

    async def add_dynamic_field(
        self, collection: str, field: DynamicField
    ) -> OperationResult:
        request = solr_requests.schema_commands(
            collection, {"add-dynamic-field": _payload(field)}
        )
        return await self._mutate_schema(collection, request, "Dynamic field", "added")

    async def delete_dynamic_field(self, collection: str, pattern: str) -> OperationResult:
        request = solr_requests.schema_commands(
            collection, {"delete-dynamic-field": {"name": pattern}}
        )
        return await self._mutate_schema(collection, request, "Dynamic field", "deleted")

    async def add_copy_field(self, collection: str, rule: CopyField) -> OperationResult:
        request = solr_requests.schema_commands(
            collection, {"add-copy-field": _payload(rule)}
        )
        return await self._mutate_schema(collection, request, "Copy field", "added")

    async def delete_copy_field(
        self, collection: str, source: str, dest: str
    ) -> OperationResult:
        request = solr_requests.schema_commands(
            collection, {"delete-copy-field": {"source": source, "dest": dest}}
        )
        return await self._mutate_schema(collection, request, "Copy field", "deleted")

    async def _mutate_schema(
        self, collection: str, request: SolrRequest, subject: str, verb: str
    ) -> OperationResult:
        """Apply a schema change, then reload the core so it takes effect.

        The schema change is authoritative: a failed reload is reported as a
        warning on an otherwise successful result.
        """
        await self._send(request)

        try:
            await self._send(solr_requests.reload_core(collection))
        except SolrError as e:
            logger.warning(
                "Core reload failed after schema change",
                collection=collection,
                error=e.message,
            )
            return OperationResult(
                warning=(
                    f"{subject} was {verb} but core reload failed. "
                    "Changes may not be visible until core is reloaded."
                )
            )

        return OperationResult(message=f"{subject} {verb} and core reloaded successfully")

    # Documents

    async def import_documents(
        self,
        collection: str,
        documents: list[dict[str, Any]],
        commit_within: int = solr_requests.DEFAULT_COMMIT_WITHIN_MS,
    ) -> OperationResult:
        await self._send(
            solr_requests.import_documents(collection, documents, commit_within)
        )
        logger.info("Imported documents", collection=collection, count=len(documents))
        return OperationResult(
            message=f"Successfully imported {len(documents)} document(s)"
        )

    async def update_document(
        self, collection: str, document: dict[str, Any]
    ) -> OperationResult:
        await self._send(solr_requests.update_document(collection, document))
        return OperationResult(message="Document updated successfully")

    async def search(self, collection: str, query: SearchQuery) -> SearchResult:
        data = await self._send(solr_requests.search(collection, query))
        return normalize_search(data)

    # Cores and replication

    async def core_status(self) -> CoreStatusResponse:
        data = await self._send(solr_requests.core_status(self.read_timeout))
        return normalize_core_status(data)

    async def create_core(self, name: str) -> OperationResult:
        await self._send(solr_requests.create_core(name))
        logger.info("Created core", core=name)
        return OperationResult(message=f'Core "{name}" created successfully')

    async def reload_core(self, name: str) -> OperationResult:
        await self._send(solr_requests.reload_core(name))
        return OperationResult(message=f'Core "{name}" reloaded successfully')

    async def enable_replication(self, core: str, master: bool) -> OperationResult:
        role = "master" if master else "slave"
        await self._send(
            solr_requests.enable_replication(core, master, self.connection.base_url)
        )
        await self._send(solr_requests.reload_core(core))
        logger.info("Enabled replication", core=core, role=role)
        return OperationResult(message=f"Replication enabled as {role}")

    async def replicate(self, core: str) -> OperationResult:
        await self._send(solr_requests.fetch_index(core))
        return OperationResult(message="Replication process started")

    # System

    async def system_info(self) -> SystemInfo:
        data = await self._send(solr_requests.system_info(self.read_timeout))
        return normalize_system_info(data)


__all__ = ["SolrService", "schema_changes"]
