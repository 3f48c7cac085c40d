"""
JSON decoding utilities for startuppong API responses.
"""

import json
import logging
from typing import Any, List, Optional

from pydantic import TypeAdapter, ValidationError

from ..errors import DecodeError
from ..models import Match, Player

logger = logging.getLogger(__name__)

PLAYER_LIST = TypeAdapter(List[Player])
MATCH_LIST = TypeAdapter(List[Match])
MATCH = TypeAdapter(Match)


def load_json(body: str) -> Any:
    """Parse raw response text, raising DecodeError on malformed JSON."""
    try:
        return json.loads(body)
    except (json.JSONDecodeError, TypeError) as e:
        logger.warning(f"Response body is not valid JSON: {e}")
        raise DecodeError(f"invalid JSON: {e}", body=body) from e


def extract_payload(data: Any, response_key: Optional[str], body: str) -> Any:
    """Return the value stored under response_key, or the whole document when there is none."""
    if response_key is None:
        return data
    if not isinstance(data, dict) or response_key not in data:
        raise DecodeError(f"expected an object with key '{response_key}'", body=body)
    return data[response_key]


def parse_json_response(body: str, adapter: TypeAdapter, response_key: Optional[str] = None) -> Any:
    """
    Parse a JSON response body with the given type adapter.

    Args:
        body: Raw response text
        adapter: Pydantic adapter describing the expected payload
        response_key: Envelope key holding the payload, if any

    Returns:
        Validated payload
    """
    data = extract_payload(load_json(body), response_key, body)
    return validate_payload(data, adapter, body)


def validate_payload(data: Any, adapter: TypeAdapter, body: str) -> Any:
    """
    Validate a decoded payload strictly; wrong JSON types are not coerced.

    Validation runs in JSON mode so nested objects map onto the record models.
    """
    try:
        return adapter.validate_json(json.dumps(data), strict=True)
    except ValidationError as e:
        logger.warning(f"Response does not match expected schema: {e.error_count()} error(s)")
        raise DecodeError(str(e), body=body) from e


def parse_players(body: str, response_key: Optional[str] = "players") -> List[Player]:
    """Decode a get_players response, keeping server order."""
    return parse_json_response(body, PLAYER_LIST, response_key)


def parse_matches(body: str, response_key: Optional[str] = "matches") -> List[Match]:
    """Decode a get_recent_matches_for_company response, keeping server order."""
    return parse_json_response(body, MATCH_LIST, response_key)


def parse_match(body: str, response_key: Optional[str] = None) -> Match:
    """
    Decode the add_match response into the persisted match.

    Without a response_key the object may be returned bare or wrapped as
    {"match": {...}}.
    """
    data = load_json(body)
    if response_key is None and isinstance(data, dict) and isinstance(data.get("match"), dict):
        response_key = "match"
    return validate_payload(extract_payload(data, response_key, body), MATCH, body)
