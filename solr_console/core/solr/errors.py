"""Solr error taxonomy and translation to outward-facing errors.

Every failure reaching an API handler is reduced to one of the categories
below, each carrying the HTTP status and the short message shown to the
operator. ``translate_error`` applies the rules in priority order:

1. transport failures (connection refused, timeout) -> 503
2. upstream HTTP 401 -> 401
3. upstream HTTP 404 -> 404 with a resource-specific message
4. known substrings in the upstream error text (see ``ERROR_PATTERNS``)
5. upstream status (or 500) with the upstream message (or a generic one)
"""

from dataclasses import dataclass

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"
AUTHENTICATION_FAILED_MESSAGE = "Authentication failed"
INVALID_SERVER_MESSAGE = "Invalid Solr response - are you sure this is a Solr server?"


class SolrError(Exception):
    """Base class for failures talking to Solr."""

    default_status: int = 500

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict | None = None,
    ):
        self.message = message
        self.status_code = status_code if status_code is not None else self.default_status
        self.details = details or {}
        super().__init__(message)


class ClientInputError(SolrError):
    """Missing or malformed input; raised before any network call."""

    default_status = 400


class AuthenticationError(SolrError):
    default_status = 401


class NotFoundError(SolrError):
    default_status = 404


class ConflictError(SolrError):
    """Resource in use or already present."""

    default_status = 409


class ValidationError(SolrError):
    """Solr rejected the document or field content."""

    default_status = 400


class UnavailableError(SolrError):
    """Solr could not be reached (refused, unresolvable or timed out)."""

    default_status = 503


class InvalidServerError(SolrError):
    """The target answered, but not like a Solr server."""

    default_status = 502


class UnknownUpstreamError(SolrError):
    """Anything Solr reported that no other category covers."""


class UpstreamError(UnknownUpstreamError):
    """Raw failure reported by Solr, before translation.

    ``status_code`` is the upstream HTTP status, or None when Solr answered
    200 with a non-zero ``responseHeader.status``. ``upstream_message`` is the
    error text extracted from the body, if any.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict | None = None,
        upstream_message: str | None = None,
    ):
        super().__init__(message, details=details)
        self.status_code = status_code
        self.upstream_message = upstream_message


@dataclass(frozen=True)
class ErrorScope:
    """What a handler was operating on, used to word not-found/conflict messages.

    ``container`` names the resource addressed by the request path (the
    collection, for schema edits). An upstream 404 means that resource is
    missing, so it is reported instead of ``resource``.
    """

    resource: str = "Resource"
    container: str | None = None

    @property
    def missing_label(self) -> str:
        return self.container or self.resource


@dataclass(frozen=True)
class ErrorPattern:
    substring: str
    category: type[SolrError]
    status_code: int
    message: str

    def render(self, scope: ErrorScope) -> str:
        return self.message.format(label=scope.resource)


# Best-effort classification of Solr's free-text errors. Only consulted
# after the status-code rules; first match wins.
ERROR_PATTERNS: tuple[ErrorPattern, ...] = (
    ErrorPattern("not found", NotFoundError, 404, "{label} not found"),
    ErrorPattern(
        "in use",
        ConflictError,
        409,
        "{label} is currently in use. Please try again later.",
    ),
    ErrorPattern(
        "missing required field",
        ValidationError,
        400,
        "Missing required field in document",
    ),
    ErrorPattern(
        "unknown field", ValidationError, 400, "Document contains unknown fields"
    ),
    ErrorPattern("already exists", ConflictError, 400, "{label} already exists"),
)


def connection_refused_message(base_url: str) -> str:
    """Operator-facing message for a Solr server that refused the connection."""
    hints = [
        "Solr is running and reachable from the console",
        "the port is correct (Solr listens on 8983 by default)",
        "no firewall is blocking the connection",
    ]
    if base_url.startswith("https:"):
        hints.append("the server accepts HTTPS; most Solr installs only serve http://")
    return (
        f"Connection refused. Is Solr running? Could not connect to {base_url}. "
        f"Check that {'; '.join(hints)}."
    )


def timeout_message(base_url: str) -> str:
    return f"Request to Solr at {base_url} timed out"


def translate_error(error: Exception, scope: ErrorScope | None = None) -> SolrError:
    """Map any failure to a categorized ``SolrError`` with outward status and message."""
    scope = scope or ErrorScope()

    if not isinstance(error, SolrError):
        return UnknownUpstreamError(GENERIC_ERROR_MESSAGE, status_code=500)

    # Errors raised by the console itself are already categorized.
    if not isinstance(error, UpstreamError):
        return error

    if error.status_code == 401:
        return AuthenticationError(AUTHENTICATION_FAILED_MESSAGE)

    if error.status_code == 404:
        return NotFoundError(f"{scope.missing_label} not found")

    text = (error.upstream_message or "").lower()
    for pattern in ERROR_PATTERNS:
        if pattern.substring in text:
            return pattern.category(
                pattern.render(scope), status_code=pattern.status_code
            )

    return UnknownUpstreamError(
        error.upstream_message or GENERIC_ERROR_MESSAGE,
        status_code=error.status_code or 500,
    )


__all__ = [
    "SolrError",
    "ClientInputError",
    "AuthenticationError",
    "NotFoundError",
    "ConflictError",
    "ValidationError",
    "UnavailableError",
    "InvalidServerError",
    "UnknownUpstreamError",
    "UpstreamError",
    "ErrorScope",
    "ErrorPattern",
    "ERROR_PATTERNS",
    "connection_refused_message",
    "timeout_message",
    "translate_error",
]
