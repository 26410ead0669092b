"""
Tests for the command line interface.
"""

import json

import pytest
from click.testing import CliRunner

from src.presentation.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def _invoke(runner, container, *args):
    return runner.invoke(cli, list(args), obj={"container": container})


class TestSearchCommand:
    """Test suite for `archive-search search`."""

    def test_json_output(self, runner, container):
        result = _invoke(runner, container, "search", "--content", "hello world", "--json")
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["total"] == 250
        assert len(payload["messages"]) == 3
        assert payload["users"]["111111111111111111"]["username"] == "user-111"

    def test_plain_table(self, runner, container):
        result = _invoke(runner, container, "search", "--guild-id", "999", "--plain")
        assert result.exit_code == 0, result.output
        assert "Page 1 of 250 matches" in result.output
        assert "user-222" in result.output
        assert "hello world again" in result.output

    def test_no_users_keeps_ids(self, runner, container, mock_directory):
        result = _invoke(runner, container, "search", "--author-id", "1", "--plain", "--no-users")
        assert result.exit_code == 0, result.output
        assert "111111111111111111" in result.output
        mock_directory.fetch_user.assert_not_called()

    def test_no_criteria(self, runner, container, mock_search_client):
        result = _invoke(runner, container, "search", "--plain")
        assert result.exit_code == 0, result.output
        assert "No messages found" in result.output
        mock_search_client.search.assert_not_called()

    def test_invalid_page(self, runner, container):
        result = _invoke(runner, container, "search", "--content", "x", "--page", "0", "--plain")
        assert result.exit_code == 1
        assert "page" in result.output

    def test_backend_failure(self, runner, container, mock_search_client):
        mock_search_client.search.side_effect = ConnectionError("cluster unreachable")
        result = _invoke(runner, container, "search", "--content", "x", "--plain")
        assert result.exit_code == 1
        assert "cluster unreachable" in result.output


class TestStatsCommand:
    """Test suite for `archive-search stats`."""

    def test_json(self, runner, container):
        result = _invoke(runner, container, "stats", "--json")
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["unique_guilds"] == 37

    def test_plain(self, runner, container):
        result = _invoke(runner, container, "stats", "--plain")
        assert result.exit_code == 0, result.output
        assert "123,456" in result.output


class TestUserCommand:
    """Test suite for `archive-search user`."""

    def test_user_json(self, runner, container, mock_directory):
        result = _invoke(runner, container, "user", "42", "--token", "mine", "--json")
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["username"] == "user-42"
        mock_directory.fetch_user.assert_called_once_with("42", "mine")
