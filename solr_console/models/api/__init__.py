"""API request/response models for the Solr Console REST endpoints."""

from solr_console.models.api.ai import *
from solr_console.models.api.collections import *
from solr_console.models.api.common import *
from solr_console.models.api.cores import *
from solr_console.models.api.schema import *
from solr_console.models.api.search import *
from solr_console.models.api.system import *

__all__ = [
    # Common
    "CamelModel", "OperationResult", "ErrorResponse",

    # Collection models
    "CollectionCreate", "CollectionListResponse", "CollectionStatus", "CollectionSummary",

    # Schema models
    "SchemaField", "DynamicField", "CopyField", "SchemaDescriptor", "SchemaResponse",

    # Search models
    "SearchQuery", "SearchResult",

    # Core models
    "CoreCreate", "CoreIndex", "CoreInfo", "CoreStatusResponse", "ReplicationEnable",

    # System models
    "SystemInfo", "HealthResponse", "RootResponse",

    # AI models
    "AIServiceConfig", "GenerateRequest", "SchemaGenerationRequest",
    "SchemaExamplesRequest", "QueryOptimizationRequest", "AIResponse",
    "SchemaExamplesResponse",
]
