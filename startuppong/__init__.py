"""
startuppong - Python wrapper for the startuppong.com ladder API.
"""

from .api import add_match_with_names, async_add_match_with_names, async_get_player_ids, get_player_ids
from .client import AsyncClient, Client
from .config import Account, ClientConfig, Config
from .errors import ApiError, ConfigError, DecodeError, HttpStatusError, NetworkError, PlayerNotFound
from .models import Match, MatchSubmission, Player

__version__ = "1.0.0"
__all__ = [
    "Account",
    "ApiError",
    "AsyncClient",
    "Client",
    "ClientConfig",
    "Config",
    "ConfigError",
    "DecodeError",
    "HttpStatusError",
    "Match",
    "MatchSubmission",
    "NetworkError",
    "Player",
    "PlayerNotFound",
    "add_match_with_names",
    "async_add_match_with_names",
    "async_get_player_ids",
    "get_player_ids",
]
