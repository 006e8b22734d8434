"""Connectivity probe endpoint."""

from fastapi import APIRouter, Depends

from solr_console.api.dependencies import get_probe_service
from solr_console.api.error_handlers import handle_solr_errors
from solr_console.core.solr import SolrService
from solr_console.models.api.system import SystemInfo

router = APIRouter()


@router.get("/test", response_model=SystemInfo)
@handle_solr_errors("probe Solr server", resource="Solr server")
async def test_connection(solr: SolrService = Depends(get_probe_service)):
    """Fetch system info, proving the target is a reachable Solr server.

    Answers 502 when the URL responds but is not Solr.
    """
    return await solr.system_info()
