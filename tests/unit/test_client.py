"""Unit tests for the Solr HTTP client."""

import httpx
import pytest

from solr_console.core.solr.client import SolrClient, extract_error_message
from solr_console.core.solr.connection import ConnectionContext
from solr_console.core.solr.errors import (
    InvalidServerError,
    UnavailableError,
    UpstreamError,
)
from solr_console.core.solr.requests import SolrRequest

CONNECTION = ConnectionContext(base_url="http://solr.test:8983/solr")


def client_for(handler) -> SolrClient:
    return SolrClient(CONNECTION, transport=httpx.MockTransport(handler))


class TestExtractErrorMessage:
    """Test error text extraction from Solr bodies."""

    def test_plain_msg(self):
        assert extract_error_message({"error": {"msg": "bad request"}}) == "bad request"

    def test_schema_api_details(self):
        body = {
            "error": {
                "msg": "error processing commands",
                "details": [{"errorMessages": ["Field 'a' already exists.\n"]}],
            }
        }

        assert (
            extract_error_message(body)
            == "error processing commands; Field 'a' already exists."
        )

    def test_top_level_error_messages(self):
        body = {"errorMessages": [{"errorMessages": ["no such field"]}]}

        assert extract_error_message(body) == "no such field"

    def test_nothing_to_extract(self):
        assert extract_error_message({"responseHeader": {"status": 0}}) is None
        assert extract_error_message("not a dict") is None


class TestSolrClient:
    """Test request execution and failure detection."""

    @pytest.mark.asyncio
    async def test_sends_params_and_body(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"responseHeader": {"status": 0}})

        request = SolrRequest(
            "POST",
            "products/update",
            (("commitWithin", "1000"), ("wt", "json")),
            json=[{"id": "1"}],
        )
        data = await client_for(handler).send(request)

        assert data == {"responseHeader": {"status": 0}}
        assert str(seen[0].url) == (
            "http://solr.test:8983/solr/products/update?commitWithin=1000&wt=json"
        )
        assert seen[0].headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_http_error_carries_status_and_message(self):
        def handler(request):
            return httpx.Response(400, json={"error": {"msg": "undefined field x"}})

        with pytest.raises(UpstreamError) as exc_info:
            await client_for(handler).send(SolrRequest("GET", "products/select"))

        assert exc_info.value.status_code == 400
        assert exc_info.value.upstream_message == "undefined field x"

    @pytest.mark.asyncio
    async def test_nonzero_response_header_status(self):
        def handler(request):
            return httpx.Response(
                200,
                json={"responseHeader": {"status": 500}, "error": {"msg": "failed"}},
            )

        with pytest.raises(UpstreamError) as exc_info:
            await client_for(handler).send(SolrRequest("GET", "admin/cores"))

        assert exc_info.value.status_code is None
        assert exc_info.value.upstream_message == "failed"

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        def handler(request):
            return httpx.Response(200, text="<html></html>")

        with pytest.raises(InvalidServerError):
            await client_for(handler).send(SolrRequest("GET", "admin/info/system"))

    @pytest.mark.asyncio
    async def test_connection_refused(self):
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        with pytest.raises(UnavailableError) as exc_info:
            await client_for(handler).send(SolrRequest("GET", "admin/collections"))

        assert exc_info.value.status_code == 503
        assert "Is Solr running?" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_follows_redirect_to_https(self):
        """Test that an http to https redirect from a proxy is followed."""

        def handler(request):
            if request.url.scheme == "http":
                return httpx.Response(
                    301, headers={"Location": str(request.url.copy_with(scheme="https"))}
                )
            return httpx.Response(200, json={"responseHeader": {"status": 0}})

        data = await client_for(handler).send(SolrRequest("GET", "admin/info/system"))

        assert data == {"responseHeader": {"status": 0}}
