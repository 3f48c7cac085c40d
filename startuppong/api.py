"""
Helpers built on top of the client: resolving player names to ids.
"""

import logging
from typing import List, Sequence

from .client import AsyncClient, Client
from .errors import PlayerNotFound
from .models import Match, MatchSubmission, Player

logger = logging.getLogger(__name__)


def match_player_ids(players: Sequence[Player], names: Sequence[str]) -> List[int]:
    """
    Match each name to the id of the first player whose name contains it.

    Args:
        players: Players in ladder order
        names: Names or name fragments, matched case-sensitively

    Returns:
        list: Ids in the same order as names
    """
    ids = []
    for name in names:
        player = next((p for p in players if name in p.name), None)
        if player is None:
            raise PlayerNotFound(name)
        logger.debug(f"Resolved '{name}' to player {player.id} ({player.name})")
        ids.append(player.id)
    return ids


def get_player_ids(client: Client, names: Sequence[str]) -> List[int]:
    """
    Get ids for players by name.

    The API has no lookup by name, so the full player list is fetched once
    and searched locally. The ids can be used with add_match. Works with the
    blocking Client only; use async_get_player_ids with an AsyncClient.

    Args:
        client: Configured API client
        names: Names to resolve

    Returns:
        list: Player ids in the order of names
    """
    return match_player_ids(client.get_players(), names)


def add_match_with_names(client: Client, winner: str, loser: str) -> Match:
    """
    Record a match between two players given by name.

    Raises PlayerNotFound for the first name that does not resolve; in that
    case no match is submitted. Blocking Client only; see
    async_add_match_with_names.
    """
    winner_id, loser_id = get_player_ids(client, [winner, loser])
    return client.add_match(MatchSubmission(winner_id=winner_id, loser_id=loser_id))


async def async_get_player_ids(client: AsyncClient, names: Sequence[str]) -> List[int]:
    """Async counterpart of get_player_ids."""
    return match_player_ids(await client.get_players(), names)


async def async_add_match_with_names(client: AsyncClient, winner: str, loser: str) -> Match:
    """Async counterpart of add_match_with_names."""
    winner_id, loser_id = await async_get_player_ids(client, [winner, loser])
    return await client.add_match(MatchSubmission(winner_id=winner_id, loser_id=loser_id))
