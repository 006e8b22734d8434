"""Schema drafting and query optimization helpers built on ``TextGenerator``."""

import json
import logging
import re

from solr_console.core.services.llm.providers import LLMServiceError, TextGenerator
from solr_console.models.api.ai import AIResponse, AIServiceConfig

logger = logging.getLogger(__name__)

AI_DISABLED_MESSAGE = "AI features are not enabled. Please enable them in settings."
INVALID_SCHEMA_MESSAGE = "Generated schema is not valid JSON. Please try again."
INVALID_SUGGESTIONS_MESSAGE = "Generated response is not valid JSON. Please try again."
MAX_EXAMPLES = 10

SCHEMA_SYSTEM_PROMPT = """You are an expert in Apache Solr schema design. Generate a Solr schema for the requirements below.
Rules:
1. Return ONLY a JSON object, with no commentary, markdown or code fences.
2. The response must start with { and end with }.
3. Always include an 'id' field and a '_root_' field of the SAME type (usually string) so nested documents work.

JSON structure:
{
  "fields": [
    {"name": "id", "type": "string", "required": true, "indexed": true, "stored": true, "multiValued": false},
    {"name": "_root_", "type": "string", "required": false, "indexed": true, "stored": true, "multiValued": false}
  ],
  "dynamicFields": [
    {"name": "<pattern>", "type": "<type>", "indexed": true, "stored": true, "multiValued": false}
  ],
  "copyFields": [
    {"source": "<field>", "dest": "<field>", "maxChars": 256}
  ]
}"""

EXAMPLES_PROMPT = """Write 5 example requests someone might give when asking for an Apache Solr schema.
Rules:
1. Return ONLY a JSON array of strings, with no commentary, markdown or code fences.
2. The response must start with [ and end with ].
3. Each string describes a use case and its requirements; do not write schemas.

Example item: "Design a schema for an e-commerce product catalog with variants, categories and faceted search. Include SKUs, prices, inventory levels and product attributes." """

QUERY_SYSTEM_PROMPT = """You are an expert in Apache Solr query optimization. Suggest optimized queries for the input query and fields.
Rules:
1. Return ONLY a JSON object, with no commentary, markdown or code fences.
2. The response must start with { and end with }.
3. Every suggestion must be valid Solr query syntax.

JSON structure:
{
  "suggestions": [
    {"query": "<query>", "explanation": "<why>", "performance": {"estimated": "<cost>", "improvement": "<gain>"}}
  ]
}"""

_FENCE = re.compile(r"```(?:json)?")

ID_FIELD = {
    "name": "id",
    "type": "string",
    "required": True,
    "indexed": True,
    "stored": True,
    "multiValued": False,
}
ROOT_FIELD = {
    "name": "_root_",
    "type": "string",
    "required": False,
    "indexed": True,
    "stored": True,
    "multiValued": False,
}


def strip_code_fences(text: str) -> str:
    return _FENCE.sub("", text).strip()


def ensure_key_fields(schema: dict) -> dict:
    """Make sure ``id`` and ``_root_`` exist and share a type."""
    fields = schema["fields"]
    by_name = {field.get("name"): field for field in fields if isinstance(field, dict)}

    if "id" not in by_name:
        by_name["id"] = dict(ID_FIELD)
        fields.insert(0, by_name["id"])
    if "_root_" not in by_name:
        by_name["_root_"] = dict(ROOT_FIELD)
        fields.append(by_name["_root_"])

    by_name["_root_"]["type"] = by_name["id"].get("type") or "string"
    return schema


class SchemaAssistant:
    """Prompts the configured provider for schemas, examples and query rewrites."""

    def __init__(self, generator: TextGenerator):
        self.generator = generator

    async def generate_schema(
        self,
        description: str,
        config: AIServiceConfig,
        requirements: list[str] | None = None,
        examples: list[str] | None = None,
    ) -> AIResponse:
        if not config.enabled:
            return AIResponse(error=AI_DISABLED_MESSAGE)

        parts = [f"Description: {description}"]
        if requirements:
            parts.append("Requirements:\n" + "\n".join(requirements))
        if examples:
            parts.append("Example Documents:\n" + "\n".join(examples))
        prompt = f"{SCHEMA_SYSTEM_PROMPT}\n\n" + "\n".join(parts)

        text = await self.generator.generate(prompt, config)

        try:
            schema = json.loads(strip_code_fences(text))
            if not isinstance(schema, dict) or not isinstance(schema.get("fields"), list):
                raise ValueError("Invalid schema structure")
            schema = ensure_key_fields(schema)
        except ValueError as e:
            logger.warning(f"Discarding generated schema: {e}")
            return AIResponse(error=INVALID_SCHEMA_MESSAGE)

        return AIResponse(text=json.dumps(schema, indent=2))

    async def schema_examples(self, config: AIServiceConfig) -> list[str]:
        """Example schema requests; empty when AI is off or the output is unusable."""
        if not config.enabled:
            return []

        try:
            text = await self.generator.generate(EXAMPLES_PROMPT, config)
            examples = json.loads(strip_code_fences(text))
        except (LLMServiceError, ValueError) as e:
            logger.warning(f"Could not load schema examples: {e}")
            return []

        if not isinstance(examples, list):
            return []
        return [str(example) for example in examples[:MAX_EXAMPLES]]

    async def optimize_query(
        self,
        query: str,
        config: AIServiceConfig,
        fields: list[str] | None = None,
    ) -> AIResponse:
        if not config.enabled:
            return AIResponse(error=AI_DISABLED_MESSAGE)

        prompt = (
            f"{QUERY_SYSTEM_PROMPT}\n\n"
            f"Original Query: {query}\n"
            f"Available Fields: {', '.join(fields) if fields else 'all fields'}\n\n"
            "Suggestions should improve relevance and performance, boost fields "
            "where it helps, use fuzzy matching where appropriate and escape "
            "special characters correctly."
        )

        text = await self.generator.generate(prompt, config)

        try:
            result = json.loads(strip_code_fences(text))
            if not isinstance(result, dict) or not isinstance(result.get("suggestions"), list):
                raise ValueError("Invalid response structure")
        except ValueError as e:
            logger.warning(f"Discarding query suggestions: {e}")
            return AIResponse(error=INVALID_SUGGESTIONS_MESSAGE)

        return AIResponse(text=json.dumps(result, indent=2))


__all__ = [
    "SchemaAssistant",
    "strip_code_fences",
    "ensure_key_fields",
    "AI_DISABLED_MESSAGE",
    "INVALID_SCHEMA_MESSAGE",
]
