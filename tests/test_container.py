"""
Tests for the service container lifecycle.
"""

from unittest.mock import Mock, patch

from src.presentation.containers import ServiceContainer


class TestServiceContainer:
    """Test suite for wiring and teardown."""

    def test_services_share_configuration(self, container):
        assert container.search_service.indices == ["chunk1", "chunk2"]
        assert container.search_service.page_size == 100
        assert len(container.token_rotator) == 2
        assert container.enrichment_service.cache is container.user_cache

    def test_prepare_backend_sets_result_window(self, container, mock_search_client):
        assert container.prepare_backend() is True
        mock_search_client.set_max_result_window.assert_called_once_with(
            ["chunk1", "chunk2"], 1000000
        )

    def test_prepare_backend_failure_is_not_fatal(self, container, mock_search_client):
        mock_search_client.set_max_result_window.side_effect = PermissionError("forbidden")
        assert container.prepare_backend() is False

    def test_prepare_backend_disabled(self, test_config, mock_search_client, mock_directory):
        from src.infrastructure.config import EnvironmentConfig

        test_config["elasticsearch"]["apply_result_window"] = False
        container = ServiceContainer(EnvironmentConfig(test_config), mock_search_client, mock_directory)
        assert container.prepare_backend() is False
        mock_search_client.set_max_result_window.assert_not_called()

    def test_close_once(self, container, mock_search_client, mock_directory):
        with container:
            pass
        container.close()
        mock_search_client.close.assert_called_once()
        mock_directory.close.assert_called_once()

    def test_from_config_builds_real_clients(self, env_config):
        with patch("src.infrastructure.search.elasticsearch_client.Elasticsearch") as es_class:
            es_class.return_value = Mock()
            container = ServiceContainer.from_config(env_config)
        es_class.assert_called_once_with(
            cloud_id="test:dGVzdA==",
            basic_auth=("elastic", "secret"),
        )
        assert container.directory_client.api_base == "https://discord.com/api/v10"
        container.close()
        es_class.return_value.close.assert_called_once()
