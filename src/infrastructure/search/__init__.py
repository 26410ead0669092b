"""
Search backend adapters.
"""

from .elasticsearch_client import ElasticsearchClient
from .factory import SearchClientFactory
from .response_adapter import (
    ResponseAdapter,
    FlatResponseAdapter,
    BodyWrappedResponseAdapter,
    unwrap_response,
    extract_hits,
    extract_total,
    extract_sources,
    extract_count,
    extract_cardinality
)

__all__ = [
    'ElasticsearchClient',
    'SearchClientFactory',
    'ResponseAdapter',
    'FlatResponseAdapter',
    'BodyWrappedResponseAdapter',
    'unwrap_response',
    'extract_hits',
    'extract_total',
    'extract_sources',
    'extract_count',
    'extract_cardinality'
]
