"""
Tests for the Discord and Elasticsearch client adapters.
"""

import pytest
import requests
from unittest.mock import Mock

from src.infrastructure.external import DiscordClient
from src.infrastructure.search import ElasticsearchClient
from src.shared.exceptions import UserLookupError

USER_ID = "80351110224678912"


def _response(status_code=200, payload=None, json_error=None):
    response = Mock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def mock_session():
    return Mock(spec=requests.Session)


class TestDiscordClient:
    """Test suite for Discord user lookups."""

    def test_fetch_user(self, mock_session):
        mock_session.get.return_value = _response(payload={
            "id": USER_ID,
            "username": "Nelly",
            "avatar": "8342729096ea3675442027381ff50dfe",
        })
        client = DiscordClient(session=mock_session, timeout=5)

        user = client.fetch_user(USER_ID, "secret-token")

        mock_session.get.assert_called_once_with(
            f"https://discord.com/api/v10/users/{USER_ID}",
            headers={"Authorization": "Bot secret-token"},
            timeout=5,
        )
        assert user.username == "Nelly"
        assert user.avatar == (
            f"https://cdn.discordapp.com/avatars/{USER_ID}/8342729096ea3675442027381ff50dfe.png"
        )

    def test_user_without_avatar(self, mock_session):
        mock_session.get.return_value = _response(payload={"id": USER_ID, "username": "x", "avatar": None})
        user = DiscordClient(session=mock_session).fetch_user(USER_ID, "t")
        assert user.avatar is None

    @pytest.mark.parametrize("status_code", [401, 404, 429, 500])
    def test_non_success_status(self, mock_session, status_code):
        mock_session.get.return_value = _response(status_code=status_code, payload={})
        with pytest.raises(UserLookupError) as exc_info:
            DiscordClient(session=mock_session).fetch_user(USER_ID, "t")
        assert exc_info.value.status_code == status_code
        assert exc_info.value.user_id == USER_ID

    def test_network_error(self, mock_session):
        mock_session.get.side_effect = requests.ConnectionError("refused")
        with pytest.raises(UserLookupError) as exc_info:
            DiscordClient(session=mock_session).fetch_user(USER_ID, "t")
        assert isinstance(exc_info.value.cause, requests.ConnectionError)

    def test_invalid_json(self, mock_session):
        mock_session.get.return_value = _response(json_error=ValueError("no json"))
        with pytest.raises(UserLookupError):
            DiscordClient(session=mock_session).fetch_user(USER_ID, "t")

    def test_custom_bases(self, mock_session):
        client = DiscordClient(
            api_base="http://discord.local/api/",
            cdn_base="http://cdn.local/",
            session=mock_session,
        )
        assert client.avatar_url("1", "h") == "http://cdn.local/avatars/1/h.png"
        assert client.avatar_url("1", None) is None

    def test_close(self, mock_session):
        DiscordClient(session=mock_session).close()
        mock_session.close.assert_called_once()


class TestElasticsearchClient:
    """Test suite for the Elasticsearch adapter."""

    @pytest.fixture
    def es(self):
        return Mock()

    @pytest.fixture
    def client(self, es):
        return ElasticsearchClient("cloud", "user", "pass", client=es)

    def test_search_passes_indices_and_params(self, client, es):
        es.search.return_value = Mock(body={"hits": {"total": 0, "hits": []}})
        response = client.search(("chunk1", "chunk2"), query={"match_all": {}}, size=100)
        es.search.assert_called_once_with(
            index=["chunk1", "chunk2"], query={"match_all": {}}, size=100
        )
        assert response == {"hits": {"total": 0, "hits": []}}

    def test_count_plain_dict(self, client, es):
        es.count.return_value = {"count": 3}
        assert client.count(["chunk1"]) == {"count": 3}

    def test_set_max_result_window(self, client, es):
        client.set_max_result_window(["chunk1"], 1000000)
        es.indices.put_settings.assert_called_once_with(
            index=["chunk1"],
            settings={"index": {"max_result_window": 1000000}},
        )

    def test_is_connected(self, client, es):
        es.ping.return_value = True
        assert client.is_connected() is True
        es.ping.side_effect = ConnectionError("down")
        assert client.is_connected() is False

    def test_close(self, client, es):
        client.close()
        es.close.assert_called_once()
