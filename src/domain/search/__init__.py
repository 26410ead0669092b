"""
Search domain: filter model, query builder and pagination.
"""

from .filter_model import parse_search_filter, normalize_filter_input, FILTER_FIELDS
from .pagination import DEFAULT_PAGE_SIZE, page_offset, has_more_results, page_count
from .query_builder import QueryBuilder
from .search_domain_service import SearchDomainService

__all__ = [
    'parse_search_filter',
    'normalize_filter_input',
    'FILTER_FIELDS',
    'DEFAULT_PAGE_SIZE',
    'page_offset',
    'has_more_results',
    'page_count',
    'QueryBuilder',
    'SearchDomainService'
]
