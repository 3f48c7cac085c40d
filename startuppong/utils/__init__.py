"""Utility modules for the startuppong client."""

from .json_parser import parse_json_response, parse_match, parse_matches, parse_players

__all__ = ["parse_json_response", "parse_match", "parse_matches", "parse_players"]
