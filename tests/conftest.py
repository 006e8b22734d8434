"""Shared fixtures: a scripted Solr upstream and a test client wired to it."""

import httpx
import pytest
from fastapi.testclient import TestClient

from solr_console.api.dependencies import get_ai_transport, get_solr_transport
from solr_console.api.main import create_app
from solr_console.models.config import ConsoleSettings

SOLR_URL = "http://solr.test:8983/solr"
SOLR_HEADERS = {"x-solr-url": SOLR_URL}
OK = {"responseHeader": {"status": 0, "QTime": 1}}


class SolrStub:
    """Scripted Solr server behind an ``httpx.MockTransport``.

    Routes are keyed by (method, path relative to the base URL, ``action``
    parameter). A route registered without an action matches any action.
    Every outbound request is recorded in ``calls``.
    """

    def __init__(self):
        self.routes: dict[tuple, tuple] = {}
        self.fallback: tuple | None = None
        self.calls: list[httpx.Request] = []

    def on(
        self,
        method: str,
        path: str,
        action: str | None = None,
        json_body=None,
        status: int = 200,
        content: bytes | None = None,
        error: Exception | None = None,
    ) -> "SolrStub":
        self.routes[(method, path, action)] = (status, json_body, content, error)
        return self

    def respond_to_all(self, json_body=None, status: int = 200) -> "SolrStub":
        self.fallback = (status, json_body, None, None)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)

        path = request.url.path
        if path.startswith("/solr/"):
            path = path[len("/solr/"):]
        action = request.url.params.get("action")

        route = (
            self.routes.get((request.method, path, action))
            or self.routes.get((request.method, path, None))
            or self.fallback
        )
        if route is None:
            return httpx.Response(
                404, json={"error": {"msg": f"No stub for {request.method} {path}"}}
            )

        status, body, content, error = route
        if error is not None:
            raise error
        if content is not None:
            return httpx.Response(status, content=content)
        return httpx.Response(status, json=OK if body is None else body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls_to(self, path: str, action: str | None = None) -> list[httpx.Request]:
        matches = []
        for request in self.calls:
            request_path = request.url.path.removeprefix("/solr/")
            if request_path != path:
                continue
            if action is not None and request.url.params.get("action") != action:
                continue
            matches.append(request)
        return matches


@pytest.fixture
def solr():
    """Scripted upstream Solr server."""
    return SolrStub()


@pytest.fixture
def solr_url():
    return SOLR_URL


@pytest.fixture
def solr_headers():
    """Headers selecting the scripted Solr server."""
    return dict(SOLR_HEADERS)


@pytest.fixture
def settings(tmp_path):
    return ConsoleSettings(config_dir=tmp_path)


@pytest.fixture
def app(solr, settings):
    app = create_app(settings)
    app.dependency_overrides[get_solr_transport] = lambda: solr.transport
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def ai_stub(app):
    """Scripted Ollama server; set ``status``/``body``/``error`` before calling."""

    class OllamaStub:
        def __init__(self):
            self.status = 200
            self.body: dict = {"response": "ok"}
            self.error: Exception | None = None
            self.calls: list[httpx.Request] = []

        def handler(self, request: httpx.Request) -> httpx.Response:
            self.calls.append(request)
            if self.error is not None:
                raise self.error
            return httpx.Response(self.status, json=self.body)

    stub = OllamaStub()
    app.dependency_overrides[get_ai_transport] = lambda: httpx.MockTransport(
        stub.handler
    )
    return stub
