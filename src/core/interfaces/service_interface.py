"""
Service interface definitions for archive search business logic.

This module defines the abstract interfaces that all service implementations
must follow to ensure consistent business logic patterns across the application.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from ..entities import (
    SearchFilter,
    SearchResult,
    Statistics,
    DiscordUser
)


class SearchServiceInterface(ABC):
    """Interface for paginated message search."""

    @abstractmethod
    def search(self, search_filter: SearchFilter) -> SearchResult:
        """
        Execute a search for one page of messages.

        Args:
            search_filter: Validated search filter

        Returns:
            SearchResult: Normalized page of results

        Raises:
            SearchExecutionError: If the backend call or parsing fails
        """
        pass


class StatisticsServiceInterface(ABC):
    """Interface for corpus statistics."""

    @abstractmethod
    def get_statistics(self) -> Statistics:
        """
        Compute corpus statistics.

        Returns:
            Statistics: Message count and approximate unique counts

        Raises:
            StatisticsError: If any sub-aggregation fails
        """
        pass


class UserEnrichmentServiceInterface(ABC):
    """Interface for resolving author ids to display identities."""

    @abstractmethod
    def resolve_user(self, user_id: str, bot_token: Optional[str] = None) -> DiscordUser:
        """
        Resolve a single author id; never raises for lookup failures.

        Args:
            user_id: Discord user id
            bot_token: Optional caller-supplied bot credential

        Returns:
            DiscordUser: Real or fallback identity
        """
        pass

    @abstractmethod
    def resolve_users(self, user_ids: Iterable[str]) -> Dict[str, DiscordUser]:
        """
        Resolve several author ids concurrently.

        Args:
            user_ids: Author ids; duplicates are resolved once

        Returns:
            Dict[str, DiscordUser]: Identity per distinct id, in input order
        """
        pass
