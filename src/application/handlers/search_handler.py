"""
Query handler for search requests coming from the outer layers.
"""

from typing import Any, Mapping

from ...core.entities import SearchResult
from ...core.interfaces import SearchServiceInterface
from ...domain.search import parse_search_filter
from ...shared.logging import get_logger

logger = get_logger(__name__)


class SearchHandler:
    """
    Handler for raw search queries.

    This class validates raw parameters and delegates to the search
    service. A query without any criteria is answered with an empty
    page and never reaches the backend.
    """

    def __init__(self, service: SearchServiceInterface):
        """
        Initialize the handler.

        Args:
            service: Search service
        """
        self.service = service

    def handle_search(self, raw_params: Mapping[str, Any]) -> SearchResult:
        """
        Handle a raw search query.

        Args:
            raw_params: Query string or CLI parameters

        Returns:
            SearchResult: One page of messages

        Raises:
            ValidationError: If the parameters are invalid
            SearchExecutionError: If the search fails
        """
        search_filter = parse_search_filter(raw_params)
        if not search_filter.has_criteria():
            logger.debug("Search without criteria, returning empty page", page=search_filter.page)
            return SearchResult.empty(search_filter.page)
        return self.service.search(search_filter)
