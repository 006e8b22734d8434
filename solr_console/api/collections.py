"""Collection management API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from solr_console.api.dependencies import get_solr_service
from solr_console.api.error_handlers import handle_collection_errors
from solr_console.core.solr import SolrService
from solr_console.models.api.collections import (
    CollectionCreate,
    CollectionListResponse,
    CollectionStatus,
    CollectionSummary,
)
from solr_console.models.api.common import OperationResult
from solr_console.models.api.search import SearchQuery, SearchResult

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=CollectionListResponse)
@handle_collection_errors("list")
async def list_collections(solr: SolrService = Depends(get_solr_service)):
    """List collection names."""
    return CollectionListResponse(collections=await solr.list_collections())


@router.post("", response_model=OperationResult, response_model_exclude_none=True)
@handle_collection_errors("create")
async def create_collection(
    collection_data: CollectionCreate, solr: SolrService = Depends(get_solr_service)
):
    """Create a collection from the default configset.

    Fails with 400 if a collection with the same name already exists.
    """
    name = collection_data.name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Collection name is required")

    return await solr.create_collection(name)


@router.get("/{name}", response_model=CollectionSummary)
@handle_collection_errors("get")
async def get_collection(name: str, solr: SolrService = Depends(get_solr_service)):
    """Schema and index statistics for one collection."""
    return await solr.collection_summary(name)


@router.delete("/{name}", response_model=OperationResult, response_model_exclude_none=True)
@handle_collection_errors("delete")
async def delete_collection(name: str, solr: SolrService = Depends(get_solr_service)):
    return await solr.delete_collection(name)


@router.get("/{name}/status", response_model=CollectionStatus)
@handle_collection_errors("get status of")
async def collection_status(name: str, solr: SolrService = Depends(get_solr_service)):
    """Index statistics for one collection."""
    return await solr.collection_status(name)


@router.get("/{name}/data/search", response_model=SearchResult)
@handle_collection_errors("search")
async def search_collection(
    name: str,
    request: Request,
    q: str = Query("*:*"),
    sort: str | None = None,
    start: int = Query(0, ge=0),
    rows: int = Query(10, ge=0),
    solr: SolrService = Depends(get_solr_service),
):
    """Search a collection.

    ``facet.field`` and ``fq`` may be repeated; the bracketed forms
    (``facet.field[]``, ``fq[]``) sent by browser query serializers are
    accepted too.
    """
    params = request.query_params
    query = SearchQuery(
        q=q or "*:*",
        start=start,
        rows=rows,
        facet_fields=params.getlist("facet.field") + params.getlist("facet.field[]"),
        filter_queries=params.getlist("fq") + params.getlist("fq[]"),
        sort=sort or None,
    )
    result = await solr.search(name, query)

    logger.debug(
        f"Search {name}: q={query.q!r}, {result.num_found} hits, "
        f"{len(query.facet_fields)} facets, {len(query.filter_queries)} filters"
    )
    return result
