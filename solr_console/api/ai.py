"""AI assistant API endpoints.

Provider configuration travels with every request; the server keeps no
API keys.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from solr_console.api.dependencies import get_schema_assistant, get_text_generator
from solr_console.api.error_handlers import handle_ai_errors
from solr_console.core.services.llm import (
    AI_DISABLED_MESSAGE,
    SchemaAssistant,
    TextGenerator,
)
from solr_console.models.api.ai import (
    AIResponse,
    GenerateRequest,
    QueryOptimizationRequest,
    SchemaExamplesRequest,
    SchemaExamplesResponse,
    SchemaGenerationRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter()


def _unwrap(response: AIResponse) -> AIResponse:
    """Turn an assistant-level error into an HTTP error."""
    if response.error:
        status_code = 400 if response.error == AI_DISABLED_MESSAGE else 502
        raise HTTPException(status_code=status_code, detail=response.error)
    return response


@router.post("/generate", response_model=AIResponse, response_model_exclude_none=True)
@handle_ai_errors("generate text")
async def generate(
    request: GenerateRequest, generator: TextGenerator = Depends(get_text_generator)
):
    """Send a raw prompt to the configured provider."""
    logger.debug(f"Generating with {request.config.provider}")
    text = await generator.generate(request.prompt, request.config)
    return AIResponse(text=text)


@router.post("/schema", response_model=AIResponse, response_model_exclude_none=True)
@handle_ai_errors("generate schema")
async def generate_schema(
    request: SchemaGenerationRequest,
    assistant: SchemaAssistant = Depends(get_schema_assistant),
):
    """Draft a Solr schema (as pretty-printed JSON) from a description."""
    response = await assistant.generate_schema(
        request.description,
        request.config,
        requirements=request.requirements,
        examples=request.examples,
    )
    return _unwrap(response)


@router.post("/schema/examples", response_model=SchemaExamplesResponse)
@handle_ai_errors("load schema examples")
async def schema_examples(
    request: SchemaExamplesRequest,
    assistant: SchemaAssistant = Depends(get_schema_assistant),
):
    """Example schema descriptions; empty when AI is disabled or fails."""
    return SchemaExamplesResponse(examples=await assistant.schema_examples(request.config))


@router.post("/optimize-query", response_model=AIResponse, response_model_exclude_none=True)
@handle_ai_errors("optimize query")
async def optimize_query(
    request: QueryOptimizationRequest,
    assistant: SchemaAssistant = Depends(get_schema_assistant),
):
    response = await assistant.optimize_query(
        request.query, request.config, fields=request.fields
    )
    return _unwrap(response)
