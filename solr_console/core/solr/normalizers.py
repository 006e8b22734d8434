"""Reshape raw Solr JSON into the console's canonical response models.

Absent optional arrays and objects become empty collections; nested
envelopes (``response``, ``facet_counts``, Luke's ``index``) are unwrapped.
"""

from typing import Any

from solr_console.core.solr.errors import INVALID_SERVER_MESSAGE, InvalidServerError
from solr_console.models.api.collections import CollectionStatus
from solr_console.models.api.cores import CoreInfo, CoreStatusResponse
from solr_console.models.api.schema import SchemaDescriptor
from solr_console.models.api.search import SearchResult
from solr_console.models.api.system import SystemInfo


def _dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _list(value: Any) -> list:
    return value if isinstance(value, list) else []


def normalize_collections(data: dict) -> list[str]:
    return [str(name) for name in _list(data.get("collections"))]


def normalize_schema(collection: str, data: dict) -> SchemaDescriptor:
    """Schema API response -> ``SchemaDescriptor`` with Solr defaults filled in."""
    schema = _dict(data.get("schema"))
    return SchemaDescriptor(
        name=collection,
        version=schema.get("version") or 1.0,
        unique_key_field=schema.get("uniqueKey") or "id",
        field_types=_list(schema.get("fieldTypes")),
        fields=_list(schema.get("fields")),
        dynamic_fields=_list(schema.get("dynamicFields")),
        copy_fields=_list(schema.get("copyFields")),
    )


def fold_facet_counts(values: Any) -> dict[str, int]:
    """Turn Solr's flat ``[value, count, value, count]`` facet list into a mapping.

    Responses already in map form (``json.nl=map``) are passed through.
    """
    if isinstance(values, dict):
        return {str(value): int(count) for value, count in values.items()}

    values = _list(values)
    return {
        str(values[i]): int(values[i + 1])
        for i in range(0, len(values) - 1, 2)
    }


def normalize_search(data: dict) -> SearchResult:
    response = _dict(data.get("response"))
    facet_fields = _dict(_dict(data.get("facet_counts")).get("facet_fields"))

    return SearchResult(
        docs=_list(response.get("docs")),
        num_found=response.get("numFound") or 0,
        start=response.get("start") or 0,
        facets={
            field: fold_facet_counts(values) for field, values in facet_fields.items()
        },
        highlighting=_dict(data.get("highlighting")),
    )


def _index_stats(index: dict) -> dict[str, Any]:
    return {
        "num_docs": index.get("numDocs") or 0,
        "max_doc": index.get("maxDoc") or 0,
        "deleted_docs": index.get("deletedDocs") or 0,
        "index_size": str(index.get("size") or "0 bytes"),
        "last_modified": index.get("lastModified"),
    }


def normalize_collection_status(data: dict) -> CollectionStatus:
    """Luke handler response -> ``CollectionStatus``.

    ``lastModified`` comes from the index itself, so repeated calls over an
    unchanged index return identical payloads.
    """
    return CollectionStatus(**_index_stats(_dict(data.get("index"))))


def normalize_core_status(data: dict) -> CoreStatusResponse:
    """Cores admin STATUS response, keyed by core name as Solr reports it.

    Each entry keeps its ``index`` section (``numDocs``, ``version``,
    ``segmentCount``...) along with any other attributes Solr sent.
    """
    cores = {}
    for name, status in _dict(data.get("status")).items():
        entry = _dict(status)
        entry = {**entry, "index": _dict(entry.get("index"))}
        entry.setdefault("name", name)
        cores[str(name)] = CoreInfo.model_validate(entry)

    return CoreStatusResponse(
        status=cores,
        init_failures={
            str(core): str(reason)
            for core, reason in _dict(data.get("initFailures")).items()
        },
    )


def normalize_system_info(data: dict) -> SystemInfo:
    """Validate that the probe reached a Solr server and keep the useful parts.

    Both the ``lucene`` section and ``solr_home`` must be present; anything
    else is some other HTTP service answering on that URL.
    """
    if not data.get("lucene") or not data.get("solr_home"):
        raise InvalidServerError(INVALID_SERVER_MESSAGE)

    return SystemInfo(
        lucene=_dict(data.get("lucene")),
        solr_home=str(data["solr_home"]),
        mode=data.get("mode"),
        jvm=_dict(data.get("jvm")),
        system=_dict(data.get("system")),
    )


__all__ = [
    "normalize_collections",
    "normalize_schema",
    "fold_facet_counts",
    "normalize_search",
    "normalize_collection_status",
    "normalize_core_status",
    "normalize_system_info",
]
