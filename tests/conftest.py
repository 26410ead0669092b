"""
Test configuration and fixtures for archive search tests.
"""

import copy
import pytest
from typing import Dict, Any, List
from unittest.mock import Mock

from src.core.entities import DiscordUser
from src.infrastructure.config import DEFAULT_CONFIG, EnvironmentConfig
from src.presentation.containers import ServiceContainer
from src.presentation.http import create_app

ENVIRONMENT_VARIABLES = (
    "ELASTICSEARCH_CLOUD_ID",
    "ELASTICSEARCH_USERNAME",
    "ELASTICSEARCH_PASSWORD",
    "DISCORD_BOT_TOKEN",
    "DISCORD_BOT_TOKEN2",
    "DISCORD_BOT_TOKEN3",
    "LOG_LEVEL",
    "LOG_FILE",
    "ARCHIVE_SEARCH_HOST",
    "ARCHIVE_SEARCH_PORT",
    "ARCHIVE_SEARCH_CORS_ORIGINS",
    "ARCHIVE_SEARCH_CONFIG_DIR",
    "APP_ENV",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's environment out of configuration tests."""
    for name in ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_config() -> Dict[str, Any]:
    """Complete configuration with two partitions and two bot tokens."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    config["elasticsearch"].update({
        "cloud_id": "test:dGVzdA==",
        "username": "elastic",
        "password": "secret",
        "indices": ["chunk1", "chunk2"],
    })
    config["discord"]["bot_tokens"] = ["token-a", "token-b"]
    config["server"]["cors_origins"] = "https://archive.test"
    return config


@pytest.fixture
def env_config(test_config) -> EnvironmentConfig:
    return EnvironmentConfig(test_config)


@pytest.fixture
def sample_sources() -> List[Dict[str, Any]]:
    """Three indexed messages from two authors."""
    return [
        {
            "message_id": "1001",
            "content": "hello world",
            "author_id": "111111111111111111",
            "channel_id": "555",
            "guild_id": "999",
            "timestamp": "2021-03-04T10:00:00Z",
        },
        {
            "message_id": "1002",
            "content": "hello world again",
            "author_id": "222222222222222222",
            "channel_id": "555",
            "guild_id": "999",
            "timestamp": "2021-03-04T09:00:00Z",
        },
        {
            "message_id": "1003",
            "content": "say hello world",
            "author_id": "111111111111111111",
            "channel_id": "556",
            "guild_id": "999",
            "timestamp": "2021-03-04T08:00:00Z",
        },
    ]


@pytest.fixture
def flat_search_response(sample_sources) -> Dict[str, Any]:
    return {
        "took": 3,
        "timed_out": False,
        "hits": {
            "total": {"value": 250, "relation": "eq"},
            "hits": [{"_index": "chunk1", "_source": source} for source in sample_sources],
        },
    }


@pytest.fixture
def wrapped_search_response(flat_search_response) -> Dict[str, Any]:
    return {"body": flat_search_response, "statusCode": 200}


def _aggregation_response(params: Dict[str, Any]) -> Dict[str, Any]:
    name = next(iter(params["aggs"]))
    values = {"unique_users": 4200, "unique_guilds": 37}
    return {"hits": {"total": {"value": 0}, "hits": []}, "aggregations": {name: {"value": values[name]}}}


@pytest.fixture
def mock_search_client(flat_search_response):
    """Mock search backend answering searches, counts and aggregations."""
    client = Mock()
    client.is_connected.return_value = True

    def _search(indices, **params):
        if "aggs" in params:
            return _aggregation_response(params)
        return flat_search_response

    client.search.side_effect = _search
    client.count.return_value = {"count": 123456}
    client.set_max_result_window.return_value = None
    return client


@pytest.fixture
def mock_directory():
    """Mock user directory that resolves every id to a named user."""
    directory = Mock()

    def _fetch(user_id, token):
        return DiscordUser(
            id=user_id,
            username=f"user-{user_id[:3]}",
            avatar=f"https://cdn.discordapp.com/avatars/{user_id}/abc.png",
        )

    directory.fetch_user.side_effect = _fetch
    return directory


@pytest.fixture
def container(env_config, mock_search_client, mock_directory) -> ServiceContainer:
    return ServiceContainer(
        config=env_config,
        search_client=mock_search_client,
        directory_client=mock_directory,
    )


@pytest.fixture
def app(container):
    flask_app = create_app(container)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def http_client(app):
    return app.test_client()
