"""
Query builder for message searches.

This module translates a ``SearchFilter`` into an Elasticsearch boolean
query plus sort and paging clauses. It is pure: no I/O, and the same
filter always produces the same request.
"""

from typing import Any, Dict, List, Optional

from ...core.entities import SearchFilter, SearchRequest
from .pagination import DEFAULT_PAGE_SIZE, page_offset

PHRASE_FIELD = "content"
TERM_FIELDS = ("author_id", "channel_id", "guild_id")
SORT_FIELD = "timestamp"


class QueryBuilder:
    """
    Builds backend search requests from filters.

    Content is matched as an exact phrase; identifiers as exact terms.
    All clauses must match. A filter with no criteria degrades to
    ``match_all``.
    """

    def __init__(
        self,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: Optional[str] = None
    ):
        """
        Initialize the builder.

        Args:
            page_size: Fixed number of hits per page
            timeout: Optional backend-side search timeout, e.g. ``"60s"``
        """
        if page_size < 1:
            raise ValueError("page_size must be a positive integer")
        self.page_size = page_size
        self.timeout = timeout

    @staticmethod
    def build_clauses(search_filter: SearchFilter) -> List[Dict[str, Any]]:
        """
        Build the conjunctive clauses for a filter.

        Args:
            search_filter: Validated filter

        Returns:
            List[Dict[str, Any]]: Zero or more query clauses
        """
        clauses: List[Dict[str, Any]] = []

        if search_filter.content:
            clauses.append({
                "match_phrase": {
                    PHRASE_FIELD: {"query": search_filter.content}
                }
            })

        for field in TERM_FIELDS:
            value = getattr(search_filter, field)
            if value:
                clauses.append({"term": {field: value}})

        return clauses

    def build_query(self, search_filter: SearchFilter) -> Dict[str, Any]:
        """Boolean query for a filter, ``match_all`` when it has no clause."""
        clauses = self.build_clauses(search_filter)
        if not clauses:
            clauses = [{"match_all": {}}]
        return {"bool": {"must": clauses}}

    @staticmethod
    def build_sort(search_filter: SearchFilter) -> List[Dict[str, Any]]:
        """Single-key timestamp sort in the filter's direction."""
        return [{SORT_FIELD: {"order": search_filter.sort}}]

    def build(self, search_filter: SearchFilter) -> SearchRequest:
        """
        Build the complete search request.

        Args:
            search_filter: Validated filter

        Returns:
            SearchRequest: Query, sort, paging window and hit-count tracking
        """
        return SearchRequest(
            query=self.build_query(search_filter),
            sort=self.build_sort(search_filter),
            offset=page_offset(search_filter.page, self.page_size),
            size=self.page_size,
            track_total_hits=True,
            timeout=self.timeout
        )
