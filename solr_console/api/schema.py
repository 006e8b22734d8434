"""Schema editing API endpoints.

Every mutation is followed by a core reload. A failed reload does not fail
the request: the response carries ``success: true`` and a ``warning``.
"""

import logging
from typing import Any

import pydantic
from fastapi import APIRouter, Body, Depends, HTTPException, Query

from solr_console.api.dependencies import get_solr_service
from solr_console.api.error_handlers import handle_schema_errors
from solr_console.core.solr import SolrService
from solr_console.models.api.common import OperationResult
from solr_console.models.api.schema import (
    CopyField,
    DynamicField,
    SchemaDescriptor,
    SchemaField,
    SchemaResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/{collection}", response_model=SchemaResponse, response_model_exclude_none=True
)
@handle_schema_errors("get")
async def get_schema(collection: str, solr: SolrService = Depends(get_solr_service)):
    """Normalized schema of a collection."""
    return SchemaResponse(schema=await solr.get_schema(collection))


@router.put(
    "/{collection}", response_model=OperationResult, response_model_exclude_none=True
)
@handle_schema_errors("replace")
async def replace_schema(
    collection: str,
    schema: SchemaDescriptor,
    solr: SolrService = Depends(get_solr_service),
):
    """Replace fields, dynamic fields and copy fields with the given descriptor.

    Field types are left untouched. Internal fields (``_version_``,
    ``_root_``...) missing from the descriptor are kept.
    """
    logger.info(
        f"Replacing schema of {collection}: {len(schema.fields)} fields, "
        f"{len(schema.dynamic_fields)} dynamic fields, {len(schema.copy_fields)} copy fields"
    )
    return await solr.replace_schema(collection, schema)


@router.post(
    "/{collection}/fields", response_model=OperationResult, response_model_exclude_none=True
)
@handle_schema_errors("add field to", resource="Field")
async def add_field(
    collection: str, field: SchemaField, solr: SolrService = Depends(get_solr_service)
):
    return await solr.add_field(collection, field)


@router.put(
    "/{collection}/fields", response_model=OperationResult, response_model_exclude_none=True
)
@handle_schema_errors("replace field in", resource="Field")
async def replace_field(
    collection: str, field: SchemaField, solr: SolrService = Depends(get_solr_service)
):
    return await solr.replace_field(collection, field)


@router.put(
    "/{collection}/fields/{field}",
    response_model=OperationResult,
    response_model_exclude_none=True,
)
@handle_schema_errors("update field in", resource="Field")
async def update_field(
    collection: str,
    field: str,
    definition: dict[str, Any] = Body(...),
    solr: SolrService = Depends(get_solr_service),
):
    """Replace the definition of ``field``; the name comes from the path."""
    try:
        schema_field = SchemaField.model_validate({**definition, "name": field})
    except pydantic.ValidationError as e:
        raise HTTPException(
            status_code=400, detail=f"Invalid field definition: {e.errors()[0]['msg']}"
        )

    return await solr.replace_field(collection, schema_field)


@router.delete(
    "/{collection}/fields/{field}",
    response_model=OperationResult,
    response_model_exclude_none=True,
)
@handle_schema_errors("delete field from", resource="Field")
async def delete_field(
    collection: str, field: str, solr: SolrService = Depends(get_solr_service)
):
    """Delete a field. The unique key field cannot be deleted."""
    return await solr.delete_field(collection, field)


@router.post(
    "/{collection}/dynamic-fields",
    response_model=OperationResult,
    response_model_exclude_none=True,
)
@handle_schema_errors("add dynamic field to", resource="Dynamic field")
async def add_dynamic_field(
    collection: str, field: DynamicField, solr: SolrService = Depends(get_solr_service)
):
    return await solr.add_dynamic_field(collection, field)


@router.delete(
    "/{collection}/dynamic-fields/{pattern}",
    response_model=OperationResult,
    response_model_exclude_none=True,
)
@handle_schema_errors("delete dynamic field from", resource="Dynamic field")
async def delete_dynamic_field(
    collection: str, pattern: str, solr: SolrService = Depends(get_solr_service)
):
    return await solr.delete_dynamic_field(collection, pattern)


@router.post(
    "/{collection}/copy-fields",
    response_model=OperationResult,
    response_model_exclude_none=True,
)
@handle_schema_errors("add copy field to", resource="Copy field")
async def add_copy_field(
    collection: str, rule: CopyField, solr: SolrService = Depends(get_solr_service)
):
    return await solr.add_copy_field(collection, rule)


@router.delete(
    "/{collection}/copy-fields",
    response_model=OperationResult,
    response_model_exclude_none=True,
)
@handle_schema_errors("delete copy field from", resource="Copy field")
async def delete_copy_field(
    collection: str,
    source: str = Query(..., min_length=1),
    dest: str = Query(..., min_length=1),
    solr: SolrService = Depends(get_solr_service),
):
    return await solr.delete_copy_field(collection, source, dest)
