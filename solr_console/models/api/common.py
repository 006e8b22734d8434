"""Shared API model bases and generic responses."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model whose JSON keys are camelCase, matching the browser UI."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OperationResult(BaseModel):
    """Outcome of a write operation against Solr.

    ``warning`` is set when the primary change succeeded but a follow-up
    step (usually a core reload) did not.
    """

    success: bool = True
    message: str | None = None
    warning: str | None = None


class ErrorResponse(BaseModel):
    """Uniform error body returned by every endpoint."""

    error: str


__all__ = ["CamelModel", "OperationResult", "ErrorResponse"]
