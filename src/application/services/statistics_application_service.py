"""
Application service for corpus statistics.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Sequence

from ...core.entities import Statistics
from ...core.interfaces import SearchBackendClientInterface, StatisticsServiceInterface
from ...domain.search import SearchDomainService
from ...infrastructure.search import extract_cardinality, extract_count
from ...shared.exceptions import StatisticsError
from ...shared.logging import LogFormatter, get_logger

logger = get_logger(__name__)

UNIQUE_USERS_AGGREGATION = "unique_users"
UNIQUE_GUILDS_AGGREGATION = "unique_guilds"


def cardinality_aggregation(name: str, field: str) -> Dict[str, Any]:
    """Build a size-zero search body with a single cardinality aggregation."""
    return {
        "size": 0,
        "aggs": {name: {"cardinality": {"field": field}}}
    }


class StatisticsApplicationService(StatisticsServiceInterface):
    """
    Computes corpus statistics.

    The document count and both unique counts run concurrently and are
    joined; any failure fails the whole call. Unique counts come from
    cardinality aggregations and are approximate.
    """

    def __init__(self, client: SearchBackendClientInterface, indices: Sequence[str]):
        self.client = client
        self.indices = list(indices)
        self.domain_service = SearchDomainService()

    def _count_messages(self) -> int:
        return extract_count(self.client.count(self.indices))

    def _count_unique(self, name: str, field: str) -> int:
        response = self.client.search(self.indices, **cardinality_aggregation(name, field))
        return extract_cardinality(response, name)

    def get_statistics(self) -> Statistics:
        """
        Compute total messages, unique users and unique guilds.

        Returns:
            Statistics: Corpus statistics

        Raises:
            StatisticsError: If any of the three sub-queries fails
        """
        start_time = time.monotonic()
        try:
            with ThreadPoolExecutor(max_workers=3) as executor:
                total_future = executor.submit(self._count_messages)
                users_future = executor.submit(
                    self._count_unique, UNIQUE_USERS_AGGREGATION, "author_id"
                )
                guilds_future = executor.submit(
                    self._count_unique, UNIQUE_GUILDS_AGGREGATION, "guild_id"
                )
                statistics = self.domain_service.create_statistics(
                    total_messages=total_future.result(),
                    unique_users=users_future.result(),
                    unique_guilds=guilds_future.result()
                )
        except Exception as e:
            logger.exception("Statistics query failed", exc_info=e)
            raise StatisticsError(f"Failed to compute statistics: {e}", cause=e) from e

        logger.info(
            "Statistics computed",
            **statistics.to_dict(),
            duration=LogFormatter.format_duration(time.monotonic() - start_time)
        )
        return statistics
