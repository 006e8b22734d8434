"""Error handling decorators for the console endpoints."""

import logging
from functools import wraps
from typing import Any, Callable, TypeVar

from fastapi import HTTPException

from solr_console.core.services.llm import LLMServiceError
from solr_console.core.solr import ErrorScope, SolrError, translate_error

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_solr_errors(
    operation_name: str, resource: str = "Resource", container: str | None = None
) -> Callable[[F], F]:
    """Decorator translating any failure of a Solr-backed endpoint.

    Args:
        operation_name: Name of the operation for logging (e.g., "create collection")
        resource: Resource named in not-found and conflict messages
        container: Resource named when Solr answers 404 (defaults to resource)

    Usage:
        @handle_solr_errors("delete collection", resource="Collection")
        async def delete_collection(name: str, solr: SolrService = Depends(...)):
            ...
    """

    scope = ErrorScope(resource, container)

    def decorator(func: F) -> F:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPExceptions (they're already handled)
                raise
            except Exception as e:
                error = translate_error(e, scope)

                if error.status_code >= 500:
                    # Unexpected exceptions keep their traceback in the log
                    logger.error(
                        f"Failed to {operation_name}: {e}",
                        exc_info=not isinstance(e, SolrError),
                    )
                else:
                    logger.warning(f"Failed to {operation_name}: {e}")

                raise HTTPException(status_code=error.status_code, detail=error.message)

        return wrapper

    return decorator


def handle_collection_errors(operation: str) -> Callable[[F], F]:
    """Specialized decorator for collection operations."""
    return handle_solr_errors(f"{operation} collection", resource="Collection")


def handle_schema_errors(
    operation: str, resource: str = "Collection"
) -> Callable[[F], F]:
    """Specialized decorator for schema operations."""
    return handle_solr_errors(
        f"{operation} schema", resource=resource, container="Collection"
    )


def handle_document_errors(operation: str) -> Callable[[F], F]:
    """Specialized decorator for document operations."""
    return handle_solr_errors(f"{operation} documents", resource="Collection")


def handle_core_errors(operation: str) -> Callable[[F], F]:
    """Specialized decorator for core and replication operations."""
    return handle_solr_errors(f"{operation} core", resource="Core")


def handle_ai_errors(operation: str) -> Callable[[F], F]:
    """Decorator mapping provider failures to their reported status."""

    def decorator(func: F) -> F:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except LLMServiceError as e:
                logger.warning(f"Failed to {operation}: {e.message}")
                raise HTTPException(status_code=e.status_code, detail=e.message)
            except Exception as e:
                logger.error(f"Failed to {operation}: {e}", exc_info=True)
                raise HTTPException(status_code=500, detail="Failed to generate response")

        return wrapper

    return decorator
