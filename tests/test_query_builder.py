"""
Tests for query building and pagination math.
"""

import pytest

from src.core.entities import SearchFilter
from src.domain.search import QueryBuilder, has_more_results, page_count, page_offset


@pytest.fixture
def builder():
    return QueryBuilder(page_size=100, timeout="60s")


class TestQueryBuilder:
    """Test suite for the query builder."""

    def test_content_only(self, builder):
        request = builder.build(SearchFilter(content="hello world"))
        assert request.query == {
            "bool": {"must": [{"match_phrase": {"content": {"query": "hello world"}}}]}
        }
        assert request.sort == [{"timestamp": {"order": "desc"}}]
        assert request.offset == 0
        assert request.size == 100

    def test_author_only_uses_single_term(self, builder):
        request = builder.build(SearchFilter(author_id="123"))
        clauses = request.query["bool"]["must"]
        assert clauses == [{"term": {"author_id": "123"}}]
        assert not any("match_phrase" in clause for clause in clauses)

    def test_guild_with_page(self, builder):
        request = builder.build(SearchFilter(guild_id="999", page=3))
        assert request.offset == 200
        assert request.query["bool"]["must"] == [{"term": {"guild_id": "999"}}]

    def test_all_criteria_are_conjunctive(self, builder):
        request = builder.build(SearchFilter(
            content="hi", author_id="1", channel_id="2", guild_id="3", sort="asc"
        ))
        clauses = request.query["bool"]["must"]
        assert len(clauses) == 4
        assert {"term": {"channel_id": "2"}} in clauses
        assert request.sort == [{"timestamp": {"order": "asc"}}]

    def test_empty_filter_matches_all(self, builder):
        request = builder.build(SearchFilter())
        assert request.query == {"bool": {"must": [{"match_all": {}}]}}

    def test_search_kwargs(self, builder):
        kwargs = builder.build(SearchFilter(content="x", page=2)).to_search_kwargs()
        assert kwargs["from_"] == 100
        assert kwargs["size"] == 100
        assert kwargs["track_total_hits"] is True
        assert kwargs["timeout"] == "60s"

    def test_same_filter_same_request(self, builder):
        search_filter = SearchFilter(content="x", channel_id="5")
        assert builder.build(search_filter) == builder.build(search_filter)

    def test_invalid_page_size(self):
        with pytest.raises(ValueError):
            QueryBuilder(page_size=0)


class TestPagination:
    """Test suite for pagination helpers."""

    @pytest.mark.parametrize("page,expected", [(1, 0), (2, 100), (3, 200), (11, 1000)])
    def test_page_offset(self, page, expected):
        assert page_offset(page, 100) == expected

    def test_page_offset_rejects_zero(self):
        with pytest.raises(ValueError):
            page_offset(0, 100)

    @pytest.mark.parametrize("offset,total,expected", [
        (0, 250, True),
        (100, 250, True),
        (200, 250, False),
        (0, 100, False),
        (0, 0, False),
    ])
    def test_has_more(self, offset, total, expected):
        assert has_more_results(offset, 100, total) is expected

    def test_page_count(self):
        assert page_count(0) == 0
        assert page_count(250) == 3
        assert page_count(300) == 3
