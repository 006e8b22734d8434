"""Unit tests for response normalization."""

import pytest

from solr_console.core.solr.errors import InvalidServerError
from solr_console.core.solr.normalizers import (
    fold_facet_counts,
    normalize_collection_status,
    normalize_schema,
    normalize_search,
    normalize_system_info,
)


class TestSchemaNormalization:
    """Test schema defaults."""

    def test_defaults(self):
        schema = normalize_schema("products", {"schema": {"fields": []}})

        assert schema.name == "products"
        assert schema.unique_key_field == "id"
        assert schema.version == 1.0
        assert schema.dynamic_fields == []
        assert schema.copy_fields == []
        assert schema.field_types == []

    def test_missing_schema_envelope(self):
        schema = normalize_schema("products", {})

        assert schema.fields == []

    def test_fields_are_parsed(self):
        schema = normalize_schema(
            "products",
            {
                "schema": {
                    "uniqueKey": "sku",
                    "fields": [{"name": "sku", "type": "string", "multiValued": False}],
                    "copyFields": [{"source": "a", "dest": "b", "maxChars": 10}],
                }
            },
        )

        assert schema.unique_key_field == "sku"
        assert schema.fields[0].multi_valued is False
        assert schema.copy_fields[0].max_chars == 10
        assert schema.field_names() == {"sku"}


class TestSearchNormalization:
    """Test select response unwrapping."""

    def test_fold_flat_facet_list(self):
        assert fold_facet_counts(["a", 3, "b", 1]) == {"a": 3, "b": 1}

    def test_fold_map_facets(self):
        assert fold_facet_counts({"a": 3}) == {"a": 3}

    def test_fold_odd_length_ignores_dangling_value(self):
        assert fold_facet_counts(["a", 3, "b"]) == {"a": 3}

    def test_empty_response(self):
        result = normalize_search({})

        assert result.docs == []
        assert result.num_found == 0
        assert result.facets == {}
        assert result.highlighting == {}


class TestStatusNormalization:
    def test_missing_index(self):
        status = normalize_collection_status({})

        assert status.num_docs == 0
        assert status.index_size == "0 bytes"
        assert status.last_modified is None

    def test_repeatable(self):
        data = {"index": {"numDocs": 3, "lastModified": "2024-01-01T00:00:00Z"}}

        assert normalize_collection_status(data) == normalize_collection_status(data)


class TestSystemInfoNormalization:
    """Test Solr detection in the system info response."""

    def test_valid(self):
        info = normalize_system_info(
            {"lucene": {"solr-spec-version": "9.4.0"}, "solr_home": "/var/solr"}
        )

        assert info.solr_version == "9.4.0"

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"lucene": {"solr-spec-version": "9.4.0"}},
            {"solr_home": "/var/solr"},
        ],
    )
    def test_not_solr(self, data):
        with pytest.raises(InvalidServerError) as exc_info:
            normalize_system_info(data)

        assert exc_info.value.status_code == 502
