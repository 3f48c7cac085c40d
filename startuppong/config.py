"""
Configuration management for credentials, client settings and endpoint definitions.
"""

import os
import yaml
from typing import Dict, List, Literal, Optional
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

DEFAULT_BASE_URL = "http://www.startuppong.com"
DEFAULT_TIMEOUT = 30.0


class Account(BaseModel):
    """
    Account ID and access key, required by every API call.
    """
    model_config = ConfigDict(frozen=True)

    api_account_id: str = Field(min_length=1)
    api_access_key: str = Field(min_length=1, repr=False)

    @classmethod
    def from_env(cls) -> "Account":
        """
        Create an account from STARTUPPONG_ACCOUNT_ID and STARTUPPONG_ACCESS_KEY.

        A .env file in the working directory is loaded first if present.
        """
        load_dotenv()
        return cls(
            api_account_id=_require_env("STARTUPPONG_ACCOUNT_ID"),
            api_access_key=_require_env("STARTUPPONG_ACCESS_KEY"),
        )

    def as_params(self) -> Dict[str, str]:
        return {
            "api_account_id": self.api_account_id,
            "api_access_key": self.api_access_key,
        }


class ClientConfig(BaseModel):
    """Settings owned by a client instance for its whole lifetime."""
    model_config = ConfigDict(frozen=True)

    account: Account
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    user_agent: str = "startuppong-python/1.0"

    def url_for(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create client settings from environment variables."""
        account = Account.from_env()
        settings = {"account": account}
        if os.getenv("STARTUPPONG_BASE_URL"):
            settings["base_url"] = os.getenv("STARTUPPONG_BASE_URL")
        if os.getenv("STARTUPPONG_TIMEOUT"):
            settings["timeout"] = os.getenv("STARTUPPONG_TIMEOUT")
        try:
            return cls(**settings)
        except ValidationError as e:
            raise ConfigError(f"Invalid client configuration: {e}") from e


class EndpointConfig(BaseModel):
    """Model for a single endpoint definition."""
    method: Literal["GET", "POST"]
    path: str
    response_key: Optional[str] = None


class Config:
    """Configuration loader and validator for YAML endpoint definitions."""

    def __init__(self, config_path: Optional[str] = None):
        if config_path is None:
            config_path = Path(__file__).parent / "endpoints.yaml"

        self.config_path = Path(config_path)
        self._endpoints: Dict[str, EndpointConfig] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load and validate YAML configuration."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as file:
            raw_config = yaml.safe_load(file) or {}

        for endpoint_name, endpoint_data in raw_config.get('endpoints', {}).items():
            self._endpoints[endpoint_name] = EndpointConfig(**endpoint_data)

    def get_endpoint(self, name: str) -> EndpointConfig:
        """Get endpoint configuration by name."""
        if name not in self._endpoints:
            available = list(self._endpoints.keys())
            raise ValueError(f"Unknown endpoint '{name}'. Available: {available}")
        return self._endpoints[name]

    def list_endpoints(self) -> List[str]:
        """Get list of available endpoint names."""
        return list(self._endpoints.keys())


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise ConfigError(f"Environment variable {name} is not set")
    return value
