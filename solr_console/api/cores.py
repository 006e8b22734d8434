"""Core administration and replication API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from solr_console.api.dependencies import get_solr_service
from solr_console.api.error_handlers import handle_core_errors
from solr_console.core.solr import SolrService
from solr_console.models.api.common import OperationResult
from solr_console.models.api.cores import CoreCreate, CoreStatusResponse, ReplicationEnable

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=CoreStatusResponse)
@handle_core_errors("get status of")
async def core_status(solr: SolrService = Depends(get_solr_service)):
    """Status of every core, plus cores that failed to initialize."""
    return await solr.core_status()


@router.post("", response_model=OperationResult, response_model_exclude_none=True)
@handle_core_errors("create")
async def create_core(core_data: CoreCreate, solr: SolrService = Depends(get_solr_service)):
    name = core_data.name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Core name is required")

    return await solr.create_core(name)


@router.post(
    "/{core}/reload", response_model=OperationResult, response_model_exclude_none=True
)
@handle_core_errors("reload")
async def reload_core(core: str, solr: SolrService = Depends(get_solr_service)):
    logger.info(f"Reloading core: {core}")
    return await solr.reload_core(core)


@router.post(
    "/{core}/replication/enable",
    response_model=OperationResult,
    response_model_exclude_none=True,
)
@handle_core_errors("enable replication on")
async def enable_replication(
    core: str,
    replication: ReplicationEnable,
    solr: SolrService = Depends(get_solr_service),
):
    """Configure the core as replication master or slave, then reload it."""
    return await solr.enable_replication(core, replication.master)


@router.post(
    "/{core}/replication/replicate",
    response_model=OperationResult,
    response_model_exclude_none=True,
)
@handle_core_errors("replicate")
async def replicate(core: str, solr: SolrService = Depends(get_solr_service)):
    """Ask a slave core to fetch the index from its master."""
    logger.info(f"Requesting index fetch for core: {core}")
    return await solr.replicate(core)
