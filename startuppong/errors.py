"""
Error types raised by the startuppong client.
"""

from typing import Optional


class ApiError(Exception):
    """Base class for every failure surfaced by an API call."""


class NetworkError(ApiError):
    """The request never produced an HTTP response (refused, timeout, DNS)."""

    def __init__(self, message: str, original: Optional[BaseException] = None):
        super().__init__(message)
        self.original = original


class HttpStatusError(ApiError):
    """The server answered with a non-success status code."""

    def __init__(self, status_code: int, body: str, url: Optional[str] = None):
        super().__init__(f"HTTP {status_code} from {url or 'server'}: {body[:200]}")
        self.status_code = status_code
        self.body = body
        self.url = url


class DecodeError(ApiError):
    """The response body could not be decoded into the expected record."""

    def __init__(self, detail: str, body: Optional[str] = None):
        super().__init__(f"Could not decode response: {detail}")
        self.detail = detail
        self.body = body


class PlayerNotFound(ApiError):
    """No player name on the ladder matched the given name."""

    def __init__(self, name: str):
        super().__init__(f"Could not match player name to id: {name}")
        self.name = name


class ConfigError(Exception):
    """Client configuration is missing or invalid."""
