"""
Core entities module for archive search.

This module provides access to all core entity classes used throughout
the application.
"""

from .message_entity import (
    Message,
    DiscordUser,
    MESSAGE_FIELDS
)
from .search_entity import (
    SearchFilter,
    SearchRequest,
    SearchResult,
    Statistics,
    SORT_ASCENDING,
    SORT_DESCENDING,
    SORT_ORDERS
)

__all__ = [
    'Message',
    'DiscordUser',
    'MESSAGE_FIELDS',
    'SearchFilter',
    'SearchRequest',
    'SearchResult',
    'Statistics',
    'SORT_ASCENDING',
    'SORT_DESCENDING',
    'SORT_ORDERS'
]
