"""Text generation against OpenRouter or a local Ollama instance."""

import logging
from typing import Any

import httpx
import openai

from solr_console.models.api.ai import AIServiceConfig

logger = logging.getLogger(__name__)

OPENROUTER_API_URL = "https://openrouter.ai/api/v1"
DEFAULT_OLLAMA_URL = "http://localhost:11434"
DEFAULT_OPENROUTER_MODEL = "mistralai/mistral-7b-instruct"
DEFAULT_OLLAMA_MODEL = "mistral"

TEMPERATURE = 0.7
MAX_TOKENS = 2000


class LLMServiceError(Exception):
    """Generation failed; ``status_code`` is the status to report to the caller."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _provider_error_message(body: Any) -> str | None:
    if isinstance(body, dict):
        error = body.get("error", body)
        if isinstance(error, dict):
            return error.get("message") or error.get("msg")
        if isinstance(error, str):
            return error
    return None


class TextGenerator:
    """Sends a single prompt to the provider selected in ``AIServiceConfig``.

    The configuration arrives with each call; nothing about the provider is
    kept between calls.
    """

    def __init__(
        self,
        openrouter_url: str = OPENROUTER_API_URL,
        openrouter_referer: str | None = None,
        default_ollama_url: str = DEFAULT_OLLAMA_URL,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.openrouter_url = openrouter_url
        self.openrouter_referer = openrouter_referer
        self.default_ollama_url = default_ollama_url
        self.timeout = timeout
        self._transport = transport

    async def generate(self, prompt: str, config: AIServiceConfig) -> str:
        """Return the generated text or raise ``LLMServiceError``."""
        if not config.enabled:
            raise LLMServiceError("AI service is not configured", status_code=400)

        if config.provider == "openrouter":
            if not config.api_key:
                raise LLMServiceError("OpenRouter API key is required", status_code=400)
            return await self._openrouter(prompt, config)

        return await self._ollama(prompt, config)

    async def _openrouter(self, prompt: str, config: AIServiceConfig) -> str:
        headers = {"HTTP-Referer": self.openrouter_referer} if self.openrouter_referer else None
        model = config.model or DEFAULT_OPENROUTER_MODEL

        try:
            async with openai.AsyncOpenAI(
                api_key=config.api_key,
                base_url=self.openrouter_url,
                default_headers=headers,
                timeout=self.timeout,
                max_retries=0,
            ) as client:
                response = await client.chat.completions.create(
                    model=model,
                    messages=[{"role": "user", "content": prompt}],
                    temperature=TEMPERATURE,
                    max_tokens=MAX_TOKENS,
                )
        except openai.APIConnectionError as e:
            logger.error(f"OpenRouter unreachable: {e}")
            raise LLMServiceError("Could not connect to OpenRouter", status_code=503)
        except openai.APIStatusError as e:
            logger.error(f"OpenRouter returned {e.status_code}: {e.message}")
            raise LLMServiceError(
                _provider_error_message(e.body) or "Failed to generate response",
                status_code=e.status_code,
            )

        if not response.choices or not response.choices[0].message.content:
            raise LLMServiceError("Failed to generate response")

        logger.debug(f"OpenRouter generation with {model} succeeded")
        return response.choices[0].message.content

    async def _ollama(self, prompt: str, config: AIServiceConfig) -> str:
        base_url = (config.base_url or self.default_ollama_url).rstrip("/")
        model = config.model or DEFAULT_OLLAMA_MODEL

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    f"{base_url}/api/generate",
                    json={
                        "model": model,
                        "prompt": prompt,
                        "stream": False,
                        "options": {
                            "temperature": TEMPERATURE,
                            "num_predict": MAX_TOKENS,
                        },
                    },
                    headers={"Accept": "application/json"},
                )
        except httpx.ConnectError:
            raise LLMServiceError(
                "Could not connect to Ollama. Please ensure Ollama is running on the specified URL.",
                status_code=503,
            )
        except httpx.TimeoutException:
            raise LLMServiceError("Ollama did not respond in time", status_code=503)

        if response.status_code == 404:
            raise LLMServiceError(
                "The specified model is not available in Ollama. Please pull the model first.",
                status_code=404,
            )
        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = None
            raise LLMServiceError(
                _provider_error_message(body) or "Failed to generate response"
            )

        try:
            text = response.json().get("response")
        except (ValueError, AttributeError):
            text = None
        if not text:
            raise LLMServiceError("Invalid response from Ollama")

        return text


__all__ = [
    "LLMServiceError",
    "TextGenerator",
    "OPENROUTER_API_URL",
    "DEFAULT_OLLAMA_URL",
]
