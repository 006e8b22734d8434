"""Builders for the outbound Solr admin/query API calls.

Each function returns a ``SolrRequest`` describing exactly one HTTP call:
method, path relative to the server's base URL, ordered query parameters
(repeated keys allowed) and an optional JSON body. Nothing here performs I/O.
"""

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from solr_console.models.api.search import SearchQuery

READ_TIMEOUT = 5.0
DEFAULT_COMMIT_WITHIN_MS = 1000

HIGHLIGHT_PRE = "<em>"
HIGHLIGHT_POST = "</em>"

MASTER_HANDLER = "solr.MasterReplicationHandler"
SLAVE_HANDLER = "solr.SlaveReplicationHandler"


@dataclass(frozen=True)
class SolrRequest:
    """One outbound Solr call.

    ``timeout`` of None means no client-side timeout (used for writes).
    """

    method: str
    path: str
    params: tuple[tuple[str, str], ...] = ()
    json: Any = None
    timeout: float | None = None

    def param_values(self, key: str) -> list[str]:
        return [value for name, value in self.params if name == key]


def _segment(name: str) -> str:
    return quote(name, safe="")


def _params(*pairs: tuple[str, Any]) -> tuple[tuple[str, str], ...]:
    return tuple((key, str(value)) for key, value in pairs)


# Collections API


def list_collections(timeout: float = READ_TIMEOUT) -> SolrRequest:
    return SolrRequest(
        "GET",
        "admin/collections",
        _params(("action", "LIST"), ("wt", "json")),
        timeout=timeout,
    )


def create_collection(name: str) -> SolrRequest:
    """Create a single-shard, single-replica collection from the ``_default`` configset."""
    return SolrRequest(
        "GET",
        "admin/collections",
        _params(
            ("action", "CREATE"),
            ("name", name),
            ("collection.configName", "_default"),
            ("numShards", 1),
            ("replicationFactor", 1),
            ("maxShardsPerNode", 1),
            ("wt", "json"),
        ),
    )


def delete_collection(name: str) -> SolrRequest:
    return SolrRequest(
        "POST",
        "admin/collections",
        _params(("action", "DELETE"), ("name", name), ("wt", "json")),
    )


def collection_status(name: str, timeout: float = READ_TIMEOUT) -> SolrRequest:
    """Index statistics via the Luke handler, without term listings."""
    return SolrRequest(
        "GET",
        f"{_segment(name)}/admin/luke",
        _params(("wt", "json"), ("numTerms", 0)),
        timeout=timeout,
    )


# Schema API


def get_schema(collection: str, timeout: float = READ_TIMEOUT) -> SolrRequest:
    return SolrRequest(
        "GET", f"{_segment(collection)}/schema", _params(("wt", "json")), timeout=timeout
    )


def schema_commands(collection: str, commands: dict[str, Any]) -> SolrRequest:
    """POST one or more schema commands, e.g. ``{"add-field": {...}}``."""
    return SolrRequest(
        "POST", f"{_segment(collection)}/schema", _params(("wt", "json")), json=commands
    )


def add_field(collection: str, field: dict[str, Any]) -> SolrRequest:
    return schema_commands(collection, {"add-field": field})


def replace_field(collection: str, field: dict[str, Any]) -> SolrRequest:
    return schema_commands(collection, {"replace-field": field})


def delete_field(collection: str, name: str) -> SolrRequest:
    return schema_commands(collection, {"delete-field": {"name": name}})


# Query and update handlers


def search(collection: str, query: SearchQuery) -> SolrRequest:
    """Select request with optional faceting, filters and sort; always highlighted."""
    pairs: list[tuple[str, Any]] = [
        ("q", query.q or "*:*"),
        ("wt", "json"),
        ("start", query.start),
        ("rows", query.rows),
    ]

    if query.facet_fields:
        pairs.append(("facet", "true"))
        pairs.extend(("facet.field", field) for field in query.facet_fields)
        pairs.append(("facet.mincount", 1))

    pairs.extend(("fq", fq) for fq in query.filter_queries)

    if query.sort:
        pairs.append(("sort", query.sort))

    pairs.extend(
        [
            ("hl", "true"),
            ("hl.fl", "*"),
            ("hl.simple.pre", HIGHLIGHT_PRE),
            ("hl.simple.post", HIGHLIGHT_POST),
        ]
    )
    return SolrRequest("GET", f"{_segment(collection)}/select", _params(*pairs))


def import_documents(
    collection: str,
    documents: list[dict[str, Any]],
    commit_within: int = DEFAULT_COMMIT_WITHIN_MS,
) -> SolrRequest:
    return SolrRequest(
        "POST",
        f"{_segment(collection)}/update",
        _params(("commitWithin", commit_within), ("wt", "json")),
        json=documents,
    )


def update_document(collection: str, document: dict[str, Any]) -> SolrRequest:
    """Single-document update with a hard commit so the edit is visible at once."""
    return SolrRequest(
        "POST",
        f"{_segment(collection)}/update",
        _params(("commit", "true"), ("wt", "json")),
        json=[document],
    )


# Cores API


def core_status(timeout: float = READ_TIMEOUT) -> SolrRequest:
    return SolrRequest(
        "GET",
        "admin/cores",
        _params(("action", "STATUS"), ("wt", "json")),
        timeout=timeout,
    )


def create_core(name: str) -> SolrRequest:
    return SolrRequest(
        "GET",
        "admin/cores",
        _params(
            ("action", "CREATE"),
            ("name", name),
            ("instanceDir", name),
            ("config", "solrconfig.xml"),
            ("dataDir", "data"),
            ("wt", "json"),
        ),
    )


def reload_core(core: str) -> SolrRequest:
    return SolrRequest(
        "GET",
        "admin/cores",
        _params(("action", "RELOAD"), ("core", core), ("wt", "json")),
    )


# Replication


def enable_replication(core: str, master: bool, base_url: str) -> SolrRequest:
    """Register the replication handler through the Config API.

    A slave polls the same server's ``<core>/replication`` endpoint as its master.
    """
    if master:
        value = {
            "class": MASTER_HANDLER,
            "config": {"replicateAfter": ["commit", "optimize"]},
        }
    else:
        value = {
            "class": SLAVE_HANDLER,
            "config": {"masterUrl": f"{base_url.rstrip('/')}/{core}/replication"},
        }

    body = {
        "set-property": {
            "name": "replicator" if master else "replicator.slave",
            "value": value,
        }
    }
    return SolrRequest("POST", f"{_segment(core)}/config", _params(("wt", "json")), json=body)


def fetch_index(core: str) -> SolrRequest:
    return SolrRequest(
        "GET",
        f"{_segment(core)}/replication",
        _params(("command", "fetchindex"), ("wt", "json")),
    )


# System


def system_info(timeout: float = READ_TIMEOUT) -> SolrRequest:
    return SolrRequest(
        "GET", "admin/info/system", _params(("wt", "json")), timeout=timeout
    )


__all__ = [
    "SolrRequest",
    "READ_TIMEOUT",
    "DEFAULT_COMMIT_WITHIN_MS",
    "list_collections",
    "create_collection",
    "delete_collection",
    "collection_status",
    "get_schema",
    "schema_commands",
    "add_field",
    "replace_field",
    "delete_field",
    "search",
    "import_documents",
    "update_document",
    "core_status",
    "create_core",
    "reload_core",
    "enable_replication",
    "fetch_index",
    "system_info",
]
