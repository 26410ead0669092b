"""
Search client factory.

This module builds the backend client from configuration so the rest of
the application depends only on ``SearchBackendClientInterface``.
"""

from typing import Optional

from ..config import EnvironmentConfig
from .elasticsearch_client import ElasticsearchClient


class SearchClientFactory:
    """
    Factory for the search backend client.

    The client is created lazily and shared for the lifetime of the factory.
    """

    def __init__(self, config: EnvironmentConfig):
        """
        Initialize the factory.

        Args:
            config: Loaded configuration
        """
        self.config = config
        self._client: Optional[ElasticsearchClient] = None

    @property
    def client(self) -> ElasticsearchClient:
        """
        Get or create the backend client.

        Returns:
            ElasticsearchClient: Backend client
        """
        if self._client is None:
            self._client = ElasticsearchClient(
                cloud_id=self.config.get_elasticsearch_cloud_id(),
                username=self.config.get_elasticsearch_username(),
                password=self.config.get_elasticsearch_password()
            )
        return self._client

    def close(self) -> None:
        """Close the client if it was created."""
        if self._client is not None:
            self._client.close()
            self._client = None
