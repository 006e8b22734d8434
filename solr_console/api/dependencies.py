"""FastAPI dependencies shared by the console routers."""

import httpx
from fastapi import Depends, Header, HTTPException, Request

from solr_console.core.services.llm import SchemaAssistant, TextGenerator
from solr_console.core.solr import ConnectionContext, SolrService
from solr_console.core.solr.connection import (
    MISSING_URL_MESSAGE,
    SOLR_PASSWORD_HEADER,
    SOLR_URL_HEADER,
    SOLR_USERNAME_HEADER,
)
from solr_console.core.solr.errors import ClientInputError
from solr_console.models.config import ConsoleSettings

PROBE_MISSING_URL_MESSAGE = "Solr URL is required"


def get_settings(request: Request) -> ConsoleSettings:
    """Dependency to get the console settings the app was created with."""
    return request.app.state.settings


def get_solr_transport() -> httpx.AsyncBaseTransport | None:
    """Transport for outbound Solr calls; None selects the real network."""
    return None


def get_ai_transport() -> httpx.AsyncBaseTransport | None:
    return None


def _connection_from_headers(
    url: str | None,
    username: str | None,
    password: str | None,
    missing_url_message: str,
) -> ConnectionContext:
    try:
        return ConnectionContext.from_headers(
            {
                SOLR_URL_HEADER: url or "",
                SOLR_USERNAME_HEADER: username or "",
                SOLR_PASSWORD_HEADER: password or "",
            },
            missing_url_message=missing_url_message,
        )
    except ClientInputError as e:
        raise HTTPException(status_code=400, detail=e.message)


def get_connection(
    x_solr_url: str | None = Header(None),
    x_solr_username: str | None = Header(None),
    x_solr_password: str | None = Header(None),
) -> ConnectionContext:
    """Per-request Solr target from the ``x-solr-*`` headers.

    Raises 400 before any outbound call when the base URL is missing.
    """
    return _connection_from_headers(
        x_solr_url, x_solr_username, x_solr_password, MISSING_URL_MESSAGE
    )


def get_probe_connection(
    x_solr_url: str | None = Header(None),
    x_solr_username: str | None = Header(None),
    x_solr_password: str | None = Header(None),
) -> ConnectionContext:
    """Connection for the connectivity probe, which always speaks plain HTTP."""
    connection = _connection_from_headers(
        x_solr_url, x_solr_username, x_solr_password, PROBE_MISSING_URL_MESSAGE
    )
    return connection.with_plain_http()


def get_solr_service(
    connection: ConnectionContext = Depends(get_connection),
    transport: httpx.AsyncBaseTransport | None = Depends(get_solr_transport),
    settings: ConsoleSettings = Depends(get_settings),
) -> SolrService:
    return SolrService(connection, transport=transport, read_timeout=settings.read_timeout)


def get_probe_service(
    connection: ConnectionContext = Depends(get_probe_connection),
    transport: httpx.AsyncBaseTransport | None = Depends(get_solr_transport),
    settings: ConsoleSettings = Depends(get_settings),
) -> SolrService:
    return SolrService(connection, transport=transport, read_timeout=settings.read_timeout)


def get_text_generator(
    settings: ConsoleSettings = Depends(get_settings),
    transport: httpx.AsyncBaseTransport | None = Depends(get_ai_transport),
) -> TextGenerator:
    return TextGenerator(
        openrouter_url=settings.openrouter_url,
        openrouter_referer=settings.openrouter_referer,
        default_ollama_url=settings.default_ollama_url,
        timeout=settings.ai_timeout,
        transport=transport,
    )


def get_schema_assistant(
    generator: TextGenerator = Depends(get_text_generator),
) -> SchemaAssistant:
    return SchemaAssistant(generator)
