"""Per-request Solr connection context built from inbound headers."""

import base64
from collections.abc import Mapping
from dataclasses import dataclass, field, replace

from solr_console.core.solr.errors import ClientInputError

SOLR_URL_HEADER = "x-solr-url"
SOLR_USERNAME_HEADER = "x-solr-username"
SOLR_PASSWORD_HEADER = "x-solr-password"

MISSING_URL_MESSAGE = "Solr base URL is required"


@dataclass(frozen=True)
class ConnectionContext:
    """Target Solr base URL plus optional Basic-Auth credentials.

    Constructed once per inbound request and discarded afterwards; the
    console never caches connections because credentials can change between
    calls.
    """

    base_url: str
    username: str | None = None
    password: str | None = field(default=None, repr=False)

    def __post_init__(self):
        if not self.base_url or not self.base_url.strip():
            raise ClientInputError(MISSING_URL_MESSAGE)
        object.__setattr__(self, "base_url", self.base_url.strip().rstrip("/"))

    @classmethod
    def from_headers(
        cls,
        headers: Mapping[str, str],
        missing_url_message: str = MISSING_URL_MESSAGE,
    ) -> "ConnectionContext":
        """Build a context from ``x-solr-*`` headers."""
        base_url = (headers.get(SOLR_URL_HEADER) or "").strip()
        if not base_url:
            raise ClientInputError(missing_url_message)
        return cls(
            base_url=base_url,
            username=headers.get(SOLR_USERNAME_HEADER) or None,
            password=headers.get(SOLR_PASSWORD_HEADER) or None,
        )

    @property
    def has_credentials(self) -> bool:
        # Only a complete pair authenticates; a lone username or password
        # results in an anonymous request.
        return bool(self.username) and bool(self.password)

    @property
    def authorization(self) -> str | None:
        """HTTP Basic ``Authorization`` header value, if credentials are complete."""
        if not self.has_credentials:
            return None
        token = base64.b64encode(
            f"{self.username}:{self.password}".encode("utf-8")
        ).decode("ascii")
        return f"Basic {token}"

    def headers(self, json_body: bool = False) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        if self.authorization:
            headers["Authorization"] = self.authorization
        return headers

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def with_plain_http(self) -> "ConnectionContext":
        """Copy of this context with an ``https:`` base URL downgraded to ``http:``."""
        if self.base_url.startswith("https:"):
            return replace(self, base_url="http:" + self.base_url[len("https:"):])
        return self


__all__ = [
    "ConnectionContext",
    "SOLR_URL_HEADER",
    "SOLR_USERNAME_HEADER",
    "SOLR_PASSWORD_HEADER",
    "MISSING_URL_MESSAGE",
]
