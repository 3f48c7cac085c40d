"""
Tests for the click command line interface.
"""

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from startuppong.cli import cli
from startuppong.errors import ConfigError, HttpStatusError
from startuppong.models import Match, Player

from conftest import MATCHES, PLAYERS


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fake_client():
    client = MagicMock()
    client.__enter__.return_value = client
    client.__exit__.return_value = False
    client.get_players.return_value = [Player(**p) for p in PLAYERS]
    client.get_recent_matches_for_company.return_value = [Match(**m) for m in MATCHES]
    client.add_match.return_value = Match(**MATCHES[0])
    with patch("startuppong.cli.Client.from_env", return_value=client):
        yield client


def test_players(runner, fake_client):
    result = runner.invoke(cli, ["players"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "1 (561.8) - Eshaan Bhalla"
    assert lines[2] == "3 (484.8) - Joe Wilm"


def test_matches_with_company(runner, fake_client):
    result = runner.invoke(cli, ["matches", "--company-id", "77"])

    assert result.exit_code == 0
    fake_client.get_recent_matches_for_company.assert_called_once_with("77")
    assert "Collin Green beat Michael Carter" in result.output.splitlines()[0]


def test_player_ids(runner, fake_client):
    result = runner.invoke(cli, ["player-ids", "Collin G", "Joe W"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["Collin G: 55", "Joe W: 60"]


def test_add_match_by_name(runner, fake_client):
    result = runner.invoke(cli, ["add-match", "Collin", "Michael"])

    assert result.exit_code != 0
    assert "Michael" in result.output


def test_add_match_by_id(runner, fake_client):
    result = runner.invoke(cli, ["add-match", "--by-id", "55", "58"])

    assert result.exit_code == 0
    submission = fake_client.add_match.call_args[0][0]
    assert (submission.winner_id, submission.loser_id) == (55, 58)
    assert result.output.startswith("Match 1093: Collin Green")


def test_add_match_by_id_rejects_same_player(runner, fake_client):
    result = runner.invoke(cli, ["add-match", "--by-id", "55", "55"])

    assert result.exit_code == 2
    fake_client.add_match.assert_not_called()


def test_api_error_reported(runner, fake_client):
    fake_client.get_players.side_effect = HttpStatusError(503, "down", "http://pong.test")

    result = runner.invoke(cli, ["players"])

    assert result.exit_code == 1
    assert "HTTP 503" in result.output


def test_missing_credentials(runner):
    with patch("startuppong.cli.Client.from_env", side_effect=ConfigError("STARTUPPONG_ACCOUNT_ID is not set")):
        result = runner.invoke(cli, ["players"])

    assert result.exit_code == 1
    assert "STARTUPPONG_ACCOUNT_ID" in result.output


def test_list_endpoints(runner):
    result = runner.invoke(cli, ["list-endpoints"])

    assert result.exit_code == 0
    assert "get_players (GET /api/v1/get_players)" in result.output
    assert "add_match (POST /api/v1/add_match)" in result.output
