"""HTTP client executing Solr requests for a single connection."""

import json
import logging
from typing import Any

import httpx

from solr_console.core.solr.connection import ConnectionContext
from solr_console.core.solr.errors import (
    INVALID_SERVER_MESSAGE,
    InvalidServerError,
    UnavailableError,
    UpstreamError,
    connection_refused_message,
    timeout_message,
)
from solr_console.core.solr.requests import SolrRequest

logger = logging.getLogger(__name__)


def extract_error_message(body: Any) -> str | None:
    """Pull the human-readable error text out of a Solr error body.

    Schema API failures put the useful text in ``error.details[].errorMessages``
    while ``error.msg`` only says "error processing commands", so both are kept.
    """
    if not isinstance(body, dict):
        return None

    error = body.get("error")
    if isinstance(error, str):
        return error or None

    parts: list[str] = []
    if isinstance(error, dict):
        if error.get("msg"):
            parts.append(str(error["msg"]).strip())
        for detail in error.get("details") or []:
            if isinstance(detail, dict):
                parts.extend(
                    str(message).strip() for message in detail.get("errorMessages", [])
                )

    # Older schema API responses report errors at the top level
    for message in body.get("errorMessages") or []:
        if isinstance(message, dict):
            parts.extend(str(m).strip() for m in message.get("errorMessages", []))
        else:
            parts.append(str(message).strip())

    parts = [part for part in parts if part]
    return "; ".join(dict.fromkeys(parts)) or None


class SolrClient:
    """Executes ``SolrRequest`` values against one Solr server.

    A fresh ``httpx.AsyncClient`` is opened per call: there is no pooling and
    no retry. Redirects, such as a proxy sending http to https, are followed.
    ``transport`` lets callers (tests, mostly) substitute the network layer.
    """

    def __init__(
        self,
        connection: ConnectionContext,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.connection = connection
        self._transport = transport

    async def send(self, request: SolrRequest) -> dict:
        """Perform the request and return the decoded JSON body."""
        url = self.connection.url(request.path)
        headers = self.connection.headers(json_body=request.json is not None)

        try:
            async with httpx.AsyncClient(
                timeout=request.timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.request(
                    request.method,
                    url,
                    params=list(request.params),
                    json=request.json,
                    headers=headers,
                )
        except httpx.ConnectError as e:
            logger.warning(f"Cannot connect to Solr at {self.connection.base_url}: {e}")
            raise UnavailableError(connection_refused_message(self.connection.base_url))
        except httpx.TimeoutException:
            logger.warning(f"Solr request timed out: {request.method} {url}")
            raise UnavailableError(timeout_message(self.connection.base_url))
        except httpx.RequestError as e:
            raise UpstreamError(f"Request failed: {e}", upstream_message=str(e))

        logger.debug(f"Solr {request.method} {request.path} -> {response.status_code}")
        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> dict:
        """Decode the body and raise for HTTP or Solr-level failures."""
        if response.status_code >= 400:
            body = self._json_or_empty(response)
            message = extract_error_message(body)
            raise UpstreamError(
                message or f"HTTP {response.status_code}",
                status_code=response.status_code,
                details=body if isinstance(body, dict) else {},
                upstream_message=message,
            )

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise InvalidServerError(INVALID_SERVER_MESSAGE)

        if not isinstance(data, dict):
            raise InvalidServerError(INVALID_SERVER_MESSAGE)

        header = data.get("responseHeader")
        if isinstance(header, dict) and header.get("status", 0) != 0:
            message = extract_error_message(data)
            raise UpstreamError(
                message or f"Solr returned status {header.get('status')}",
                details=data,
                upstream_message=message,
            )

        return data

    @staticmethod
    def _json_or_empty(response: httpx.Response) -> Any:
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return {}


__all__ = ["SolrClient", "extract_error_message"]
