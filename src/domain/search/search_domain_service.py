"""
Domain service for search operations.

This module contains pure business logic for assembling search results,
separated from infrastructure concerns.
"""

from typing import Any, Iterable, Mapping

from ...core.entities import Message, SearchResult, Statistics
from .pagination import has_more_results


class SearchDomainService:
    """
    Domain service for search operations.

    This service contains pure business logic for search, with no
    dependencies on external systems or infrastructure.
    """

    @staticmethod
    def create_search_result(
        sources: Iterable[Mapping[str, Any]],
        total: int,
        page: int,
        offset: int,
        page_size: int
    ) -> SearchResult:
        """
        Create a search result from hit sources.

        Args:
            sources: ``_source`` documents in backend order
            total: Total matching hits
            page: Requested page number
            offset: Offset of the first hit on the page
            page_size: Fixed page size

        Returns:
            SearchResult: Page of messages with computed ``has_more``
        """
        messages = [Message.from_source(source) for source in sources]
        return SearchResult(
            messages=messages[:page_size],
            total=total,
            page=page,
            has_more=has_more_results(offset, page_size, total)
        )

    @staticmethod
    def create_statistics(
        total_messages: int,
        unique_users: int,
        unique_guilds: int
    ) -> Statistics:
        """Compose statistics from the three independent counts."""
        return Statistics(
            total_messages=total_messages,
            unique_users=unique_users,
            unique_guilds=unique_guilds
        )
