"""
Tests for corpus statistics.
"""

import pytest

from src.application.services import StatisticsApplicationService
from src.application.services.statistics_application_service import cardinality_aggregation
from src.shared.exceptions import StatisticsError


@pytest.fixture
def statistics_service(mock_search_client):
    return StatisticsApplicationService(mock_search_client, ["chunk1", "chunk2"])


def test_cardinality_aggregation_body():
    assert cardinality_aggregation("unique_users", "author_id") == {
        "size": 0,
        "aggs": {"unique_users": {"cardinality": {"field": "author_id"}}},
    }


class TestStatisticsApplicationService:
    """Test suite for statistics aggregation."""

    def test_statistics(self, statistics_service, mock_search_client):
        statistics = statistics_service.get_statistics()
        assert statistics.to_dict() == {
            "total_messages": 123456,
            "unique_users": 4200,
            "unique_guilds": 37,
        }
        mock_search_client.count.assert_called_once_with(["chunk1", "chunk2"])
        assert mock_search_client.search.call_count == 2

    def test_wrapped_count(self, statistics_service, mock_search_client):
        mock_search_client.count.return_value = {"body": {"count": 5}}
        assert statistics_service.get_statistics().total_messages == 5

    def test_count_failure_fails_everything(self, statistics_service, mock_search_client):
        mock_search_client.count.side_effect = TimeoutError("count timed out")
        with pytest.raises(StatisticsError) as exc_info:
            statistics_service.get_statistics()
        assert isinstance(exc_info.value.cause, TimeoutError)

    def test_missing_aggregation_fails(self, statistics_service, mock_search_client):
        mock_search_client.search.side_effect = None
        mock_search_client.search.return_value = {"aggregations": {}}
        with pytest.raises(StatisticsError):
            statistics_service.get_statistics()
