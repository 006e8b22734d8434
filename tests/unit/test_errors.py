"""Unit tests for error translation."""

import pytest

from solr_console.core.solr.errors import (
    AuthenticationError,
    ClientInputError,
    ConflictError,
    ErrorScope,
    NotFoundError,
    UnavailableError,
    UnknownUpstreamError,
    UpstreamError,
    ValidationError,
    connection_refused_message,
    translate_error,
)


def upstream(message: str | None, status_code: int | None = 500) -> UpstreamError:
    return UpstreamError(message or "error", status_code=status_code, upstream_message=message)


class TestTranslateError:
    """Test the ordered translation rules."""

    def test_status_401_beats_message(self):
        error = translate_error(upstream("collection not found", 401))

        assert isinstance(error, AuthenticationError)
        assert error.status_code == 401
        assert error.message == "Authentication failed"

    def test_status_404_is_resource_specific(self):
        error = translate_error(upstream(None, 404), ErrorScope("Collection"))

        assert isinstance(error, NotFoundError)
        assert error.message == "Collection not found"

    def test_status_404_names_the_container(self):
        """Test that a 404 names the collection while message rules keep the field."""
        scope = ErrorScope("Field", "Collection")

        missing = translate_error(upstream(None, 404), scope)
        assert isinstance(missing, NotFoundError)
        assert missing.message == "Collection not found"

        conflict = translate_error(upstream("Field 'a' already exists"), scope)
        assert conflict.message == "Field already exists"

    @pytest.mark.parametrize(
        "message,category,status_code,expected",
        [
            ("Could not find collection : Products NOT FOUND", NotFoundError, 404, "Collection not found"),
            ("collection is in use", ConflictError, 409, "Collection is currently in use. Please try again later."),
            ("missing required field: id", ValidationError, 400, "Missing required field in document"),
            ("unknown field 'x'", ValidationError, 400, "Document contains unknown fields"),
            ("core already exists", ConflictError, 400, "Collection already exists"),
        ],
    )
    def test_substring_table(self, message, category, status_code, expected):
        error = translate_error(upstream(message), ErrorScope("Collection"))

        assert isinstance(error, category)
        assert error.status_code == status_code
        assert error.message == expected

    def test_first_match_wins(self):
        """Test that table order decides between several matches."""
        error = translate_error(upstream("field not found; already exists"))

        assert isinstance(error, NotFoundError)

    def test_fallback_keeps_upstream_status_and_message(self):
        error = translate_error(upstream("disk full", 507))

        assert isinstance(error, UnknownUpstreamError)
        assert error.status_code == 507
        assert error.message == "disk full"

    def test_fallback_without_status_or_message(self):
        error = translate_error(upstream(None, None))

        assert error.status_code == 500
        assert error.message == "An unexpected error occurred"

    def test_console_errors_pass_through(self):
        original = ClientInputError("Collection name is required")

        assert translate_error(original) is original

        unavailable = UnavailableError("Connection refused")
        assert translate_error(unavailable).status_code == 503

    def test_unexpected_exception(self):
        error = translate_error(KeyError("boom"))

        assert error.status_code == 500
        assert error.message == "An unexpected error occurred"


class TestConnectionRefusedMessage:
    def test_mentions_default_port(self):
        message = connection_refused_message("http://localhost:8983/solr")

        assert message.startswith("Connection refused. Is Solr running?")
        assert "8983" in message
        assert "https" not in message

    def test_https_hint(self):
        message = connection_refused_message("https://solr.example.com/solr")

        assert "http://" in message
