"""
Shared fixtures for the startuppong test suite.
"""

import json
from unittest.mock import Mock

import pytest
import requests

from startuppong.client import Client
from startuppong.config import Account, ClientConfig


PLAYERS = [
    {"name": "Eshaan Bhalla", "rank": 1, "rating": 561.844467876031, "id": 89},
    {"name": "Collin Green", "rank": 2, "rating": 635.422989640755, "id": 55},
    {"name": "Joe Wilm", "rank": 3, "rating": 484.820167747424, "id": 60},
]

MATCHES = [
    {
        "loser_rating_after": 513.938174130505,
        "winner_rating_after": 635.422989640755,
        "played_time": 1432949959,
        "loser_rank_after": 5,
        "winner_name": "Collin Green",
        "winner_rank_before": 2,
        "winner_rating_before": 632.015809629857,
        "loser_name": "Michael Carter",
        "winner_id": 55,
        "loser_rank_before": 5,
        "loser_rating_before": 517.345354141403,
        "id": 1093,
        "winner_rank_after": 2,
        "loser_id": 58,
    },
    {
        "loser_rating_after": 484.820167747424,
        "winner_rating_after": 632.015809629857,
        "played_time": 1432945408,
        "loser_rank_after": 3,
        "winner_name": "Collin Green",
        "winner_rank_before": 3,
        "winner_rating_before": 628.94100790458,
        "loser_name": "Joe Wilm",
        "winner_id": 55,
        "loser_rank_before": 2,
        "loser_rating_before": 487.894969472701,
        "id": 1092,
        "winner_rank_after": 2,
        "loser_id": 60,
    },
    {
        "loser_rating_after": 628.94100790458,
        "winner_rating_after": 487.894969472701,
        "played_time": 1432945400,
        "loser_rank_after": 3,
        "winner_name": "Joe Wilm",
        "winner_rank_before": 4,
        "winner_rating_before": 480.798589900423,
        "loser_name": "Collin Green",
        "winner_id": 60,
        "loser_rank_before": 2,
        "loser_rating_before": 636.037387476858,
        "id": 1091,
        "winner_rank_after": 2,
        "loser_id": 55,
    },
]


def make_response(status_code=200, body=None, text=None):
    """Build a stand-in for requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.text = text if text is not None else json.dumps(body)
    return response


@pytest.fixture
def players_body():
    return {"players": [dict(p) for p in PLAYERS]}


@pytest.fixture
def matches_body():
    return {"matches": [dict(m) for m in MATCHES]}


@pytest.fixture
def account():
    return Account(api_account_id="acct-1", api_access_key="secret-key")


@pytest.fixture
def client_config(account):
    return ClientConfig(account=account, base_url="http://pong.test", timeout=5)


@pytest.fixture
def mock_session():
    """A requests session whose request() is a Mock."""
    session = Mock(spec=requests.Session)
    session.request.return_value = make_response(body={})
    return session


@pytest.fixture
def client(client_config, mock_session):
    return Client(client_config, session=mock_session)
