"""Unit tests for the AI assistant endpoints."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

OLLAMA = {"enabled": True, "provider": "ollama", "baseUrl": "http://ollama.test:11434"}
OPENROUTER = {"enabled": True, "provider": "openrouter", "apiKey": "sk-test"}


def openrouter_client(content="generated"):
    """Stand-in for ``openai.AsyncOpenAI`` returning ``content`` once."""
    completion = MagicMock()
    completion.choices = [MagicMock(message=MagicMock(content=content))]
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=completion)
    client.__aenter__.return_value = client
    return client


class TestGenerate:
    """Test the raw generation endpoint."""

    def test_disabled(self, client, ai_stub):
        response = client.post(
            "/ai/generate", json={"prompt": "hi", "config": {"enabled": False}}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "AI service is not configured"}
        assert ai_stub.calls == []

    def test_openrouter_requires_key(self, client):
        response = client.post(
            "/ai/generate",
            json={"prompt": "hi", "config": {"enabled": True, "provider": "openrouter"}},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "OpenRouter API key is required"}

    def test_ollama(self, client, ai_stub):
        ai_stub.body = {"response": "Hello from Ollama"}

        response = client.post("/ai/generate", json={"prompt": "hi", "config": OLLAMA})

        assert response.status_code == 200
        assert response.json() == {"text": "Hello from Ollama"}

        request = ai_stub.calls[0]
        assert str(request.url) == "http://ollama.test:11434/api/generate"
        payload = json.loads(request.content)
        assert payload["model"] == "mistral"
        assert payload["prompt"] == "hi"
        assert payload["stream"] is False
        assert payload["options"] == {"temperature": 0.7, "num_predict": 2000}

    def test_ollama_missing_model(self, client, ai_stub):
        ai_stub.status = 404
        ai_stub.body = {"error": "model not found"}

        response = client.post("/ai/generate", json={"prompt": "hi", "config": OLLAMA})

        assert response.status_code == 404
        assert "pull the model" in response.json()["error"]

    def test_ollama_unreachable(self, client, ai_stub):
        ai_stub.error = httpx.ConnectError("refused")

        response = client.post("/ai/generate", json={"prompt": "hi", "config": OLLAMA})

        assert response.status_code == 503
        assert response.json()["error"].startswith("Could not connect to Ollama")

    def test_ollama_empty_response(self, client, ai_stub):
        ai_stub.body = {"done": True}

        response = client.post("/ai/generate", json={"prompt": "hi", "config": OLLAMA})

        assert response.status_code == 500
        assert response.json() == {"error": "Invalid response from Ollama"}

    def test_openrouter(self, client):
        fake = openrouter_client("Hello from OpenRouter")

        with patch(
            "solr_console.core.services.llm.providers.openai.AsyncOpenAI",
            return_value=fake,
        ) as factory:
            response = client.post(
                "/ai/generate", json={"prompt": "hi", "config": OPENROUTER}
            )

        assert response.status_code == 200
        assert response.json() == {"text": "Hello from OpenRouter"}

        kwargs = factory.call_args.kwargs
        assert kwargs["api_key"] == "sk-test"
        assert kwargs["base_url"] == "https://openrouter.ai/api/v1"
        assert "HTTP-Referer" in kwargs["default_headers"]

        create_kwargs = fake.chat.completions.create.call_args.kwargs
        assert create_kwargs["model"] == "mistralai/mistral-7b-instruct"
        assert create_kwargs["messages"] == [{"role": "user", "content": "hi"}]
        fake.__aexit__.assert_awaited_once()

    def test_missing_config(self, client):
        response = client.post("/ai/generate", json={"prompt": "hi"})

        assert response.status_code == 400
        assert "config" in response.json()["error"]


class TestSchemaEndpoints:
    """Test schema drafting and examples."""

    def test_schema_disabled(self, client):
        response = client.post(
            "/ai/schema",
            json={"description": "products", "config": {"enabled": False}},
        )

        assert response.status_code == 400
        assert "not enabled" in response.json()["error"]

    def test_schema_adds_root_field(self, client, ai_stub):
        generated = {"fields": [{"name": "id", "type": "long"}, {"name": "title", "type": "text_general"}]}
        ai_stub.body = {"response": f"```json\n{json.dumps(generated)}\n```"}

        response = client.post(
            "/ai/schema", json={"description": "products", "config": OLLAMA}
        )

        assert response.status_code == 200
        schema = json.loads(response.json()["text"])
        fields = {field["name"]: field for field in schema["fields"]}
        assert fields["_root_"]["type"] == "long"
        assert "title" in fields

    def test_schema_prompt_includes_requirements(self, client, ai_stub):
        ai_stub.body = {"response": '{"fields": []}'}

        client.post(
            "/ai/schema",
            json={
                "description": "products",
                "requirements": ["faceted by brand"],
                "config": OLLAMA,
            },
        )

        prompt = json.loads(ai_stub.calls[0].content)["prompt"]
        assert "Description: products" in prompt
        assert "faceted by brand" in prompt

    def test_schema_invalid_output(self, client, ai_stub):
        ai_stub.body = {"response": "Sure! Here is a schema you might like."}

        response = client.post(
            "/ai/schema", json={"description": "products", "config": OLLAMA}
        )

        assert response.status_code == 502
        assert response.json() == {
            "error": "Generated schema is not valid JSON. Please try again."
        }

    def test_examples_disabled(self, client, ai_stub):
        response = client.post("/ai/schema/examples", json={"config": {"enabled": False}})

        assert response.status_code == 200
        assert response.json() == {"examples": []}
        assert ai_stub.calls == []

    def test_examples(self, client, ai_stub):
        ai_stub.body = {"response": '["A blog", "A product catalog"]'}

        response = client.post("/ai/schema/examples", json={"config": OLLAMA})

        assert response.json() == {"examples": ["A blog", "A product catalog"]}

    def test_examples_provider_failure_is_empty(self, client, ai_stub):
        ai_stub.error = httpx.ConnectError("refused")

        response = client.post("/ai/schema/examples", json={"config": OLLAMA})

        assert response.status_code == 200
        assert response.json() == {"examples": []}


class TestOptimizeQuery:
    def test_optimize(self, client, ai_stub):
        suggestions = {"suggestions": [{"query": "title:phone^2", "explanation": "boost"}]}
        ai_stub.body = {"response": json.dumps(suggestions)}

        response = client.post(
            "/ai/optimize-query",
            json={"query": "phone", "fields": ["title", "body"], "config": OLLAMA},
        )

        assert response.status_code == 200
        assert json.loads(response.json()["text"]) == suggestions

        prompt = json.loads(ai_stub.calls[0].content)["prompt"]
        assert "Original Query: phone" in prompt
        assert "Available Fields: title, body" in prompt

    def test_optimize_invalid_output(self, client, ai_stub):
        ai_stub.body = {"response": '{"ideas": []}'}

        response = client.post(
            "/ai/optimize-query", json={"query": "phone", "config": OLLAMA}
        )

        assert response.status_code == 502
