"""
Data models for archive search.

This module contains the data classes used to represent search filters,
backend search requests, paginated results and corpus statistics.
"""

from dataclasses import dataclass
from typing import Dict, List, Any, Optional

from .message_entity import Message


SORT_ASCENDING = "asc"
SORT_DESCENDING = "desc"
SORT_ORDERS = (SORT_ASCENDING, SORT_DESCENDING)


@dataclass(frozen=True)
class SearchFilter:
    """
    Validated user filter for a message search.

    Instances are normally produced by ``parse_search_filter`` from raw
    query parameters; the text criteria are either ``None`` or non-blank.
    """
    content: Optional[str] = None
    author_id: Optional[str] = None
    channel_id: Optional[str] = None
    guild_id: Optional[str] = None
    sort: str = SORT_DESCENDING
    page: int = 1

    def has_criteria(self) -> bool:
        """Return True when at least one text criterion is set."""
        return any((self.content, self.author_id, self.channel_id, self.guild_id))

    def to_dict(self) -> Dict[str, Any]:
        """Convert filter to dictionary representation."""
        return {
            'content': self.content,
            'author_id': self.author_id,
            'channel_id': self.channel_id,
            'guild_id': self.guild_id,
            'sort': self.sort,
            'page': self.page
        }


@dataclass(frozen=True)
class SearchRequest:
    """
    A fully built backend search request.

    ``query`` and ``sort`` are opaque to callers; ``offset`` and ``size``
    carry the paging window for the requested page.
    """
    query: Dict[str, Any]
    sort: List[Dict[str, Any]]
    offset: int
    size: int
    track_total_hits: bool = True
    timeout: Optional[str] = None

    def to_search_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for the Elasticsearch ``search`` API."""
        kwargs = {
            'query': self.query,
            'sort': self.sort,
            'from_': self.offset,
            'size': self.size,
            'track_total_hits': self.track_total_hits
        }
        if self.timeout:
            kwargs['timeout'] = self.timeout
        return kwargs


@dataclass
class SearchResult:
    """
    One page of search results.

    ``has_more`` is always derived from the paging window and the total,
    never taken from the backend.
    """
    messages: List[Message]
    total: int
    page: int
    has_more: bool

    def author_ids(self) -> List[str]:
        """Distinct author ids in result order."""
        seen: Dict[str, None] = {}
        for message in self.messages:
            if message.author_id:
                seen.setdefault(message.author_id, None)
        return list(seen)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary representation."""
        return {
            'messages': [message.to_dict() for message in self.messages],
            'total': self.total,
            'page': self.page,
            'has_more': self.has_more
        }

    @classmethod
    def empty(cls, page: int = 1) -> 'SearchResult':
        """Result returned for a filter without any criteria."""
        return cls(messages=[], total=0, page=page, has_more=False)


@dataclass(frozen=True)
class Statistics:
    """Corpus statistics; the unique counts are approximate."""
    total_messages: int
    unique_users: int
    unique_guilds: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary representation."""
        return {
            'total_messages': self.total_messages,
            'unique_users': self.unique_users,
            'unique_guilds': self.unique_guilds
        }
