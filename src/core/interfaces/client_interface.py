"""
Client interface definitions for external service interactions.

This module defines the abstract interfaces that all client implementations
must follow to ensure consistent external service interaction patterns.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, Sequence

from ..entities import DiscordUser


class SearchBackendClientInterface(ABC):
    """Interface for search backend operations over named index partitions."""

    @abstractmethod
    def is_connected(self) -> bool:
        """Check whether the backend answers a ping."""
        pass

    @abstractmethod
    def search(self, indices: Sequence[str], **params: Any) -> Dict[str, Any]:
        """
        Run a search across the given indices.

        Args:
            indices: Index partitions to query as one logical search
            **params: Search API parameters (query, sort, from_, size, aggs...)

        Returns:
            Dict[str, Any]: Raw response payload, flat or body-wrapped
        """
        pass

    @abstractmethod
    def count(self, indices: Sequence[str]) -> Dict[str, Any]:
        """
        Count documents across the given indices.

        Args:
            indices: Index partitions to count

        Returns:
            Dict[str, Any]: Raw response payload, flat or body-wrapped
        """
        pass

    @abstractmethod
    def set_max_result_window(self, indices: Sequence[str], size: int) -> None:
        """
        Raise the maximum reachable result window on the given indices.

        Args:
            indices: Index partitions to update
            size: New ``index.max_result_window`` value
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the underlying transport."""
        pass


class UserDirectoryClientInterface(ABC):
    """Interface for the user directory (Discord REST API)."""

    @abstractmethod
    def fetch_user(self, user_id: str, token: str) -> DiscordUser:
        """
        Look up a user by id.

        Args:
            user_id: Discord user id
            token: Bot credential used for the request

        Returns:
            DiscordUser: Resolved identity

        Raises:
            UserLookupError: If the lookup fails for any reason
        """
        pass

    @abstractmethod
    def avatar_url(self, user_id: str, avatar_hash: Optional[str]) -> Optional[str]:
        """Build the CDN avatar URL, or None when the user has no avatar."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the underlying HTTP session."""
        pass
