#!/usr/bin/env python3
"""
CLI interface for the startuppong client.
"""

import logging
from typing import Optional, Tuple

import click
from pydantic import ValidationError

from .api import add_match_with_names, get_player_ids
from .client import Client
from .config import Config
from .errors import ApiError, ConfigError
from .models import MatchSubmission


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _client() -> Client:
    try:
        return Client.from_env()
    except ConfigError as e:
        raise click.ClickException(str(e))


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def cli(verbose: bool):
    """startuppong.com ladder from the command line."""
    setup_logging(verbose)


@cli.command()
def players():
    """Print the current leaderboard."""
    try:
        with _client() as client:
            ladder = client.get_players()
    except ApiError as e:
        raise click.ClickException(str(e))

    for player in ladder:
        click.echo(f"{player.rank} ({player.rating:.1f}) - {player.name}")


@cli.command()
@click.option('--company-id', help='Company to query (defaults to the configured account)')
def matches(company_id: Optional[str]):
    """Print the most recent matches."""
    try:
        with _client() as client:
            recent = client.get_recent_matches_for_company(company_id)
    except ApiError as e:
        raise click.ClickException(str(e))

    for match in recent:
        played = match.played_at.strftime('%Y-%m-%d %H:%M')
        click.echo(f"{played}  {match.winner_name} beat {match.loser_name}")


@cli.command(name='player-ids')
@click.argument('names', nargs=-1, required=True)
def player_ids(names: Tuple[str, ...]):
    """Resolve player names to ids."""
    try:
        with _client() as client:
            ids = get_player_ids(client, names)
    except ApiError as e:
        raise click.ClickException(str(e))

    for name, player_id in zip(names, ids):
        click.echo(f"{name}: {player_id}")


@cli.command(name='add-match')
@click.argument('winner')
@click.argument('loser')
@click.option('--by-id', is_flag=True, help='Treat WINNER and LOSER as player ids')
def add_match(winner: str, loser: str, by_id: bool):
    """Record that WINNER beat LOSER."""
    try:
        with _client() as client:
            if by_id:
                submission = MatchSubmission(winner_id=winner, loser_id=loser)
                match = client.add_match(submission)
            else:
                match = add_match_with_names(client, winner, loser)
    except ValidationError as e:
        raise click.BadParameter(str(e))
    except ApiError as e:
        raise click.ClickException(str(e))

    click.echo(
        f"Match {match.id}: {match.winner_name} "
        f"({match.winner_rating_before:.1f} -> {match.winner_rating_after:.1f}) beat "
        f"{match.loser_name} ({match.loser_rating_before:.1f} -> {match.loser_rating_after:.1f})"
    )


@cli.command()
def list_endpoints():
    """List available API endpoints."""
    config = Config()
    click.echo("Available endpoints:")
    for name in config.list_endpoints():
        endpoint = config.get_endpoint(name)
        click.echo(f"  • {name} ({endpoint.method} {endpoint.path})")


if __name__ == '__main__':
    cli()
