"""
Tests for search filter parsing and validation.
"""

import pytest

from src.core.entities import SearchFilter
from src.domain.search import normalize_filter_input, parse_search_filter
from src.shared.exceptions import ValidationError


class TestParseSearchFilter:
    """Test suite for raw filter parsing."""

    def test_defaults_applied(self):
        search_filter = parse_search_filter({})
        assert search_filter == SearchFilter(sort="desc", page=1)
        assert not search_filter.has_criteria()

    def test_query_string_values(self):
        search_filter = parse_search_filter({
            "content": "  hello world ",
            "author_id": "123",
            "sort": "asc",
            "page": "3",
        })
        assert search_filter.content == "hello world"
        assert search_filter.author_id == "123"
        assert search_filter.sort == "asc"
        assert search_filter.page == 3
        assert search_filter.has_criteria()

    def test_blank_criteria_become_none(self):
        search_filter = parse_search_filter({"content": "   ", "guild_id": ""})
        assert search_filter.content is None
        assert search_filter.guild_id is None
        assert not search_filter.has_criteria()

    @pytest.mark.parametrize("sort", ["up", "ASC", "descending"])
    def test_invalid_sort_rejected(self, sort):
        with pytest.raises(ValidationError) as exc_info:
            parse_search_filter({"content": "x", "sort": sort})
        assert exc_info.value.field == "sort"
        assert exc_info.value.value == sort

    @pytest.mark.parametrize("page", ["abc", "1.5", 2.0])
    def test_non_integer_page_rejected(self, page):
        with pytest.raises(ValidationError) as exc_info:
            parse_search_filter({"content": "x", "page": page})
        assert exc_info.value.field == "page"
        assert "integer" in exc_info.value.message

    @pytest.mark.parametrize("page", ["0", "-1", 0])
    def test_page_below_one_rejected(self, page):
        with pytest.raises(ValidationError) as exc_info:
            parse_search_filter({"content": "x", "page": page})
        assert exc_info.value.field == "page"

    def test_non_string_criterion_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_search_filter({"author_id": 123})
        assert exc_info.value.field == "author_id"

    def test_boolean_page_rejected(self):
        with pytest.raises(ValidationError):
            parse_search_filter({"content": "x", "page": True})


def test_normalize_keeps_unparseable_page():
    values = normalize_filter_input({"page": "two"})
    assert values["page"] == "two"
    assert values["sort"] == "desc"
