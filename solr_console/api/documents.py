"""Document import and update API endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Header, HTTPException

from solr_console.api.dependencies import get_solr_service
from solr_console.api.error_handlers import handle_document_errors
from solr_console.core.solr import SolrService
from solr_console.core.solr.requests import DEFAULT_COMMIT_WITHIN_MS
from solr_console.models.api.common import OperationResult

logger = logging.getLogger(__name__)
router = APIRouter()


def parse_commit_within(value: str | None) -> int:
    """Milliseconds from the ``x-commit-within`` header, defaulting to 1000."""
    if value is None or not value.strip():
        return DEFAULT_COMMIT_WITHIN_MS
    try:
        commit_within = int(value)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail="x-commit-within must be a whole number of milliseconds",
        )
    if commit_within < 0:
        raise HTTPException(status_code=400, detail="x-commit-within cannot be negative")
    return commit_within


@router.post(
    "/{collection}/data", response_model=OperationResult, response_model_exclude_none=True
)
@handle_document_errors("import")
async def import_documents(
    collection: str,
    documents: Any = Body(...),
    x_commit_within: str | None = Header(None),
    solr: SolrService = Depends(get_solr_service),
):
    """Bulk import documents.

    Accepts an array of document objects or a single object. Solr commits
    them within ``x-commit-within`` milliseconds.
    """
    commit_within = parse_commit_within(x_commit_within)

    if isinstance(documents, dict):
        documents = [documents]
    if not isinstance(documents, list) or not all(
        isinstance(doc, dict) for doc in documents
    ):
        logger.warning(
            f"Rejected import into {collection}: body is {type(documents).__name__}"
        )
        raise HTTPException(
            status_code=400,
            detail="Request body must be a document object or an array of documents",
        )
    if not documents:
        raise HTTPException(status_code=400, detail="No documents to import")

    return await solr.import_documents(collection, documents, commit_within)


@router.put(
    "/{collection}/data/{doc_id}",
    response_model=OperationResult,
    response_model_exclude_none=True,
)
@handle_document_errors("update")
async def update_document(
    collection: str,
    doc_id: str,
    document: dict[str, Any] = Body(...),
    solr: SolrService = Depends(get_solr_service),
):
    """Replace a single document and commit immediately.

    The body is forwarded as sent; it must carry the collection's unique key
    field, whatever that field is named. ``doc_id`` only labels the request.
    """
    logger.info(f"Updating document {doc_id} in {collection}")
    return await solr.update_document(collection, document)
