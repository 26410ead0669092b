"""
Tests for layered configuration loading.
"""

import pytest

from src.infrastructure.config import ConfigManager, ConfigValidator, EnvironmentConfig
from src.shared.exceptions import ConfigurationError


@pytest.fixture
def credentials(monkeypatch):
    monkeypatch.setenv("ELASTICSEARCH_CLOUD_ID", "deployment:abc")
    monkeypatch.setenv("ELASTICSEARCH_USERNAME", "elastic")
    monkeypatch.setenv("ELASTICSEARCH_PASSWORD", "changeme")


def _manager(config_dir, environment="test"):
    return ConfigManager(config_dir=str(config_dir), environment=environment, load_env_file=False)


class TestConfigManager:
    """Test suite for configuration loading."""

    def test_defaults(self, tmp_path, credentials):
        config = _manager(tmp_path).load_config()
        assert config.get_indices() == [f"chunk{n}" for n in range(1, 31)]
        assert config.get_page_size() == 100
        assert config.get_request_timeout() == "60s"
        assert config.get_max_result_window() == 1000000
        assert config.get_discord_tokens() == []
        assert config.get_user_cache_capacity() is None
        assert config.get_fallback_ttl() is None

    def test_missing_credentials_named(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ELASTICSEARCH_CLOUD_ID", "deployment:abc")
        with pytest.raises(ConfigurationError) as exc_info:
            _manager(tmp_path).load_config()
        message = exc_info.value.message
        assert "ELASTICSEARCH_USERNAME" in message
        assert "ELASTICSEARCH_PASSWORD" in message
        assert "ELASTICSEARCH_CLOUD_ID" not in message

    def test_yaml_layers(self, tmp_path, credentials):
        (tmp_path / "base.yaml").write_text(
            "elasticsearch:\n  indices: [a, b]\nserver:\n  port: 8080\n"
        )
        (tmp_path / "test.yaml").write_text("server:\n  port: 9090\n")
        config = _manager(tmp_path).load_config()
        assert config.get_indices() == ["a", "b"]
        assert config.get_server_port() == 9090
        assert config.get_page_size() == 100

    def test_environment_overrides_files(self, tmp_path, credentials, monkeypatch):
        (tmp_path / "base.yaml").write_text("logging:\n  level: INFO\n")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("DISCORD_BOT_TOKEN", "one")
        monkeypatch.setenv("DISCORD_BOT_TOKEN3", "three")
        monkeypatch.setenv("ARCHIVE_SEARCH_PORT", "7000")
        config = _manager(tmp_path).load_config()
        assert config.get_log_level() == "DEBUG"
        assert config.get_discord_tokens() == ["one", "three"]
        assert config.get_server_port() == 7000

    def test_invalid_port_from_environment(self, tmp_path, credentials, monkeypatch):
        monkeypatch.setenv("ARCHIVE_SEARCH_PORT", "http")
        with pytest.raises(ConfigurationError) as exc_info:
            _manager(tmp_path).load_config()
        assert "port" in exc_info.value.message

    def test_non_mapping_yaml(self, tmp_path, credentials):
        (tmp_path / "base.yaml").write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationError):
            _manager(tmp_path).load_config()

    def test_config_cached(self, tmp_path, credentials):
        manager = _manager(tmp_path)
        assert manager.load_config() is manager.get_config()


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_collects_all_errors(self, test_config):
        test_config["elasticsearch"]["page_size"] = 0
        test_config["discord"]["user_cache_capacity"] = -1
        test_config["logging"]["level"] = "LOUD"
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigValidator().validate_config(EnvironmentConfig(test_config).config)
        message = exc_info.value.message
        assert "page size" in message
        assert "cache capacity" in message
        assert "Logging level" in message

    def test_window_smaller_than_page(self, test_config):
        test_config["elasticsearch"]["max_result_window"] = 10
        with pytest.raises(ConfigurationError):
            ConfigValidator().validate_config(test_config)

    def test_valid(self, test_config):
        ConfigValidator().validate_config(test_config)
