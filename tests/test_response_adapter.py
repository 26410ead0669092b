"""
Tests for search backend response normalization.
"""

import pytest
from unittest.mock import Mock

from src.infrastructure.search import (
    extract_cardinality,
    extract_count,
    extract_hits,
    extract_sources,
    extract_total,
    unwrap_response,
)
from src.shared.exceptions import MalformedResponseError


class TestUnwrapResponse:
    """Test suite for envelope detection."""

    def test_flat_and_wrapped_yield_same_hits(self, flat_search_response, wrapped_search_response):
        assert extract_hits(flat_search_response) == extract_hits(wrapped_search_response)

    def test_flat_preferred_over_body(self):
        raw = {"hits": {"total": 1}, "body": {"hits": {"total": 2}}}
        assert extract_total(extract_hits(raw)) == 1

    def test_client_response_object(self, flat_search_response):
        response = Mock(body=flat_search_response)
        assert unwrap_response(response, "hits") is flat_search_response

    @pytest.mark.parametrize("raw", [None, [], {}, {"body": None}, {"body": {"took": 1}}])
    def test_unrecognized_shape(self, raw):
        with pytest.raises(MalformedResponseError):
            extract_hits(raw)


class TestExtractors:
    """Test suite for field extraction."""

    @pytest.mark.parametrize("total,expected", [
        (42, 42),
        ({"value": 42, "relation": "eq"}, 42),
        (None, 0),
        ({"relation": "gte"}, 0),
        ("42", 0),
    ])
    def test_extract_total(self, total, expected):
        assert extract_total({"total": total, "hits": []}) == expected

    def test_extract_sources_keeps_order(self, flat_search_response, sample_sources):
        hits = extract_hits(flat_search_response)
        assert extract_sources(hits) == sample_sources

    def test_extract_sources_missing_source(self):
        assert extract_sources({"hits": [{"_id": "x"}]}) == [{}]

    def test_extract_count(self):
        assert extract_count({"count": 10}) == 10
        assert extract_count({"body": {"count": 7}}) == 7

    def test_extract_count_malformed(self):
        with pytest.raises(MalformedResponseError):
            extract_count({"count": "ten"})

    def test_extract_cardinality(self):
        raw = {"body": {"aggregations": {"unique_users": {"value": 12}}}}
        assert extract_cardinality(raw, "unique_users") == 12

    def test_missing_aggregation(self):
        with pytest.raises(MalformedResponseError):
            extract_cardinality({"aggregations": {}}, "unique_guilds")
