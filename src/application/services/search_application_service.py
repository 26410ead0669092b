"""
Application service for message search.

This module orchestrates the query builder, the search backend and the
response adapters into a single ``search`` operation.
"""

import time
from typing import Optional, Sequence

from ...core.entities import SearchFilter, SearchResult
from ...core.interfaces import SearchBackendClientInterface, SearchServiceInterface
from ...domain.search import DEFAULT_PAGE_SIZE, QueryBuilder, SearchDomainService
from ...infrastructure.search import extract_hits, extract_sources, extract_total
from ...shared.exceptions import SearchExecutionError
from ...shared.logging import LogFormatter, get_logger

logger = get_logger(__name__)


class SearchApplicationService(SearchServiceInterface):
    """
    Application service for search operations.

    Every search addresses all configured index partitions in one call;
    the backend merges, sorts and paginates across them.
    """

    def __init__(
        self,
        client: SearchBackendClientInterface,
        indices: Sequence[str],
        page_size: int = DEFAULT_PAGE_SIZE,
        request_timeout: Optional[str] = "60s",
        query_builder: Optional[QueryBuilder] = None
    ):
        """
        Initialize the service.

        Args:
            client: Search backend client
            indices: Index partitions searched as one corpus
            page_size: Fixed page size
            request_timeout: Backend-side search timeout
            query_builder: Optional pre-built query builder
        """
        self.client = client
        self.indices = list(indices)
        self.page_size = page_size
        self.query_builder = query_builder or QueryBuilder(
            page_size=page_size,
            timeout=request_timeout
        )
        self.domain_service = SearchDomainService()

    def search(self, search_filter: SearchFilter) -> SearchResult:
        """
        Execute a search.

        An all-empty filter is still executed and returns the unfiltered
        corpus; presentation layers decide whether to skip it.

        Args:
            search_filter: Validated filter

        Returns:
            SearchResult: One page of messages

        Raises:
            SearchExecutionError: If the backend call fails or its response
                cannot be read
        """
        request = self.query_builder.build(search_filter)
        logger.info(
            "Executing search",
            filter=search_filter.to_dict(),
            offset=request.offset,
            size=request.size
        )

        start_time = time.monotonic()
        try:
            response = self.client.search(self.indices, **request.to_search_kwargs())
            hits = extract_hits(response)
            result = self.domain_service.create_search_result(
                sources=extract_sources(hits),
                total=extract_total(hits),
                page=search_filter.page,
                offset=request.offset,
                page_size=self.page_size
            )
        except Exception as e:
            logger.exception("Search failed", exc_info=e, filter=search_filter.to_dict())
            raise SearchExecutionError(f"Search failed: {e}", cause=e) from e

        logger.info(
            "Search completed",
            total=result.total,
            returned=len(result.messages),
            has_more=result.has_more,
            duration=LogFormatter.format_duration(time.monotonic() - start_time)
        )
        return result
