"""
Elasticsearch client for search operations.

This module provides a client for interacting with an Elastic Cloud
deployment, handling connections and the handful of calls the archive
needs.
"""

from typing import Any, Dict, Optional, Sequence

from elasticsearch import Elasticsearch

from ...core.interfaces import SearchBackendClientInterface
from ...shared.logging import get_logger

logger = get_logger(__name__)


class ElasticsearchClient(SearchBackendClientInterface):
    """
    Client for Elasticsearch operations.

    All calls address the full list of index partitions at once so the
    backend merges, sorts and paginates across them.
    """

    def __init__(
        self,
        cloud_id: str,
        username: str,
        password: str,
        request_timeout: Optional[float] = None,
        client: Optional[Elasticsearch] = None
    ):
        """
        Initialize the client.

        Args:
            cloud_id: Elastic Cloud deployment id
            username: Basic auth user
            password: Basic auth password
            request_timeout: Optional transport timeout in seconds
            client: Pre-built client, mainly for tests
        """
        if client is not None:
            self.client = client
        else:
            options: Dict[str, Any] = {
                "cloud_id": cloud_id,
                "basic_auth": (username, password)
            }
            if request_timeout is not None:
                options["request_timeout"] = request_timeout
            self.client = Elasticsearch(**options)

    def is_connected(self) -> bool:
        """Check if the deployment answers a ping."""
        try:
            return bool(self.client.ping())
        except Exception as e:
            logger.warning("Elasticsearch ping failed", error=str(e))
            return False

    def search(self, indices: Sequence[str], **params: Any) -> Dict[str, Any]:
        response = self.client.search(index=list(indices), **params)
        return getattr(response, "body", response)

    def count(self, indices: Sequence[str]) -> Dict[str, Any]:
        response = self.client.count(index=list(indices))
        return getattr(response, "body", response)

    def set_max_result_window(self, indices: Sequence[str], size: int) -> None:
        """
        Update ``index.max_result_window`` on every partition.

        Args:
            indices: Index partitions to update
            size: New window size
        """
        self.client.indices.put_settings(
            index=list(indices),
            settings={"index": {"max_result_window": size}}
        )
        logger.info("Updated max_result_window", size=size, indices=len(indices))

    def close(self) -> None:
        self.client.close()
