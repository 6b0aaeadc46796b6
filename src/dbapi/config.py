"""Configuration management for the DB open-data API client."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from .api_clients.base_client import DEFAULT_API_URL, DEFAULT_TIMEOUT

MIN_TIMEOUT = 1
MAX_TIMEOUT = 300

logger = logging.getLogger(__name__)


class StationDataConfig(BaseModel):
    """Configuration for the StationData API.

    Set rate_limit_per_minute to zero to disable the client-side throttle.
    """

    rate_limit_per_minute: int = Field(
        default=0, ge=0, description="Maximum calls per minute, 0 = unlimited"
    )


class ClientConfig(BaseModel):
    """Configuration shared by all implemented APIs."""

    api_token: str = Field(default="", description="Bearer token for all APIs")
    api_url: str = Field(default=DEFAULT_API_URL, description="API root URL")
    timeout: int = Field(
        default=DEFAULT_TIMEOUT,
        ge=MIN_TIMEOUT,
        le=MAX_TIMEOUT,
        description="Request timeout in seconds",
    )
    station_data: StationDataConfig = Field(default_factory=StationDataConfig)

    @field_validator("api_url")
    @classmethod
    def api_url_must_be_http(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"api_url must be an http(s) URL. Got: {v}")
        return v.rstrip("/")


def load_config(
    config_path: Optional[Path] = None, use_env: bool = False
) -> ClientConfig:
    """Load configuration from a JSON file and/or environment variables.

    Args:
        config_path: Path to a JSON config file (optional)
        use_env: Whether environment variables override file values

    Returns:
        ClientConfig instance

    Raises:
        FileNotFoundError: If config_path does not exist
        json.JSONDecodeError: If the config file contains invalid JSON
        ValueError: If a value is invalid

    Environment Variables:
        DBAPI_TOKEN: Bearer token
        DBAPI_URL: API root URL
        DBAPI_TIMEOUT: Timeout in seconds
        DBAPI_STADA_RATE_LIMIT: StationData calls per minute
    """
    config_data: Dict[str, Any] = {}

    if config_path is not None:
        path = Path(config_path).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            config_data = json.load(f)
        logger.debug(f"Loaded configuration from {path}")

    if use_env:
        if "DBAPI_TOKEN" in os.environ:
            config_data["api_token"] = os.environ["DBAPI_TOKEN"]
        if "DBAPI_URL" in os.environ:
            config_data["api_url"] = os.environ["DBAPI_URL"]
        if "DBAPI_TIMEOUT" in os.environ:
            config_data["timeout"] = int(os.environ["DBAPI_TIMEOUT"])
        if "DBAPI_STADA_RATE_LIMIT" in os.environ:
            station_data = dict(config_data.get("station_data") or {})
            station_data["rate_limit_per_minute"] = int(
                os.environ["DBAPI_STADA_RATE_LIMIT"]
            )
            config_data["station_data"] = station_data

    return ClientConfig(**config_data)
