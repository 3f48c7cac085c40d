"""
HTTP clients for the startuppong.com API.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Tuple
import aiohttp
import requests

from .config import ClientConfig, Config
from .errors import DecodeError, HttpStatusError, NetworkError
from .models import Match, MatchSubmission, Player
from .utils.json_parser import parse_match, parse_matches, parse_players

logger = logging.getLogger(__name__)

# (endpoint name, query params, JSON payload)
RequestSpec = Tuple[str, Optional[Dict[str, Any]], Optional[Dict[str, Any]]]


class _BaseClient:
    """Request building shared by the blocking and async clients."""

    def __init__(self, config: ClientConfig, endpoints: Optional[Config] = None):
        self.config = config
        self.endpoints = endpoints or Config()

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }

    def _players_request(self) -> RequestSpec:
        return "get_players", self.config.account.as_params(), None

    def _matches_request(self, company_id: Optional[str]) -> RequestSpec:
        params = self.config.account.as_params()
        if company_id is not None:
            params["api_account_id"] = str(company_id)
        return "get_recent_matches_for_company", params, None

    def _add_match_request(self, submission: MatchSubmission) -> RequestSpec:
        payload = self.config.account.as_params()
        payload.update(submission.model_dump())
        return "add_match", None, payload

    def _resolve(self, endpoint_name: str) -> Tuple[str, str]:
        endpoint = self.endpoints.get_endpoint(endpoint_name)
        return endpoint.method, self.config.url_for(endpoint.path)

    def _response_key(self, endpoint_name: str) -> Optional[str]:
        return self.endpoints.get_endpoint(endpoint_name).response_key

    @staticmethod
    def _check_status(status_code: int, body: str, url: str) -> None:
        if not 200 <= status_code < 300:
            logger.warning(f"Request to {url} failed with HTTP {status_code}")
            raise HttpStatusError(status_code, body, url)


class Client(_BaseClient):
    """
    Blocking client for the startuppong API.

    Each call performs exactly one HTTP round-trip and is never retried.
    The instance holds no state besides its read-only configuration and
    the underlying requests session. requests does not guarantee that a
    Session is thread-safe, so use one Client per thread.
    """

    def __init__(
        self,
        config: ClientConfig,
        endpoints: Optional[Config] = None,
        session: Optional[requests.Session] = None
    ):
        super().__init__(config, endpoints)
        self._session = session or requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self._session.close()

    @classmethod
    def from_env(cls) -> "Client":
        """Create client from environment variables."""
        return cls(ClientConfig.from_env())

    def _send(self, spec: RequestSpec) -> str:
        """
        Send a request and return the raw body of a successful response.

        Raises:
            NetworkError: the server could not be reached
            HttpStatusError: the server answered with a non-2xx status
        """
        endpoint_name, params, payload = spec
        method, url = self._resolve(endpoint_name)

        logger.debug(f"{method} {endpoint_name}")
        try:
            response = self._session.request(
                method,
                url,
                params=params,
                json=payload,
                headers=self.headers,
                timeout=self.config.timeout
            )
        except requests.RequestException as e:
            logger.warning(f"{method} {endpoint_name} failed: {e}")
            raise NetworkError(f"Request to {url} failed: {e}", original=e) from e

        self._check_status(response.status_code, response.text, url)
        return response.text

    def get_players(self) -> List[Player]:
        """
        Return all players associated with the account.

        Wraps `/api/v1/get_players`.
        """
        return parse_players(self._send(self._players_request()), self._response_key("get_players"))

    def get_recent_matches_for_company(self, company_id: Optional[str] = None) -> List[Match]:
        """
        Return the most recent matches, newest first as ordered by the server.

        Wraps `/api/v1/get_recent_matches_for_company`.

        Args:
            company_id: Company to query; defaults to the configured account id
        """
        return parse_matches(
            self._send(self._matches_request(company_id)),
            self._response_key("get_recent_matches_for_company")
        )

    def add_match(self, submission: MatchSubmission) -> Match:
        """
        Record a new match and return it as persisted by the server.

        Wraps `/api/v1/add_match`. The match is created server side, so a
        failed call is not retried here.
        """
        return parse_match(
            self._send(self._add_match_request(submission)),
            self._response_key("add_match")
        )


class AsyncClient(_BaseClient):
    """Async client for the startuppong API, backed by aiohttp."""

    def __init__(self, config: ClientConfig, endpoints: Optional[Config] = None):
        super().__init__(config, endpoints)
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Async context manager entry."""
        self._session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.config.timeout),
            headers=self.headers
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._session:
            await self._session.close()
            self._session = None

    async def _send(self, spec: RequestSpec) -> str:
        if not self._session:
            raise RuntimeError("Client not initialized. Use async context manager.")

        endpoint_name, params, payload = spec
        method, url = self._resolve(endpoint_name)

        logger.debug(f"{method} {endpoint_name}")
        try:
            async with self._session.request(method, url, params=params, json=payload) as response:
                status = response.status
                # undecodable bytes become U+FFFD, as requests does
                body = await response.text(errors="replace")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"{method} {endpoint_name} failed: {e!r}")
            raise NetworkError(f"Request to {url} failed: {e!r}", original=e) from e
        except LookupError as e:
            raise DecodeError(f"unknown response charset: {e}") from e

        self._check_status(status, body, url)
        return body

    async def get_players(self) -> List[Player]:
        return parse_players(await self._send(self._players_request()), self._response_key("get_players"))

    async def get_recent_matches_for_company(self, company_id: Optional[str] = None) -> List[Match]:
        return parse_matches(
            await self._send(self._matches_request(company_id)),
            self._response_key("get_recent_matches_for_company")
        )

    async def add_match(self, submission: MatchSubmission) -> Match:
        return parse_match(
            await self._send(self._add_match_request(submission)),
            self._response_key("add_match")
        )
