"""Entry point to the DB open-data APIs.

An access token is required for every API and can be obtained for free at
https://developer.deutschebahn.com/.
"""

import logging
import threading
from typing import Optional

import httpx

from .api_clients.errors import ClientClosedError
from .api_clients.station_data_client import StationDataAPIClient
from .api_clients.throttle import configure_throttle
from .config import ClientConfig

logger = logging.getLogger(__name__)


class DBAPIClient:
    """Gives access to all implemented APIs.

    Each API client is built on first access and reused afterwards, so every
    API keeps one throttle for the life of this object. All API clients share
    one HTTP session.
    """

    def __init__(
        self,
        api_token: str,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            api_token: Bearer token for all APIs
            config: API configuration, defaults apply if omitted
            transport: httpx transport, e.g. httpx.MockTransport in tests
        """
        self.api_token = api_token
        self.config = config or ClientConfig()
        self._transport = transport
        self._session: Optional[httpx.AsyncClient] = None
        self._station_data_api: Optional[StationDataAPIClient] = None
        self._closed = False
        self._init_lock = threading.Lock()

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "DBAPIClient":
        """Create a client using the token stored in the configuration."""
        return cls(config.api_token, config=config, transport=transport)

    @property
    def session(self) -> httpx.AsyncClient:
        """Get or create the HTTP session shared by all APIs.

        Raises:
            ClientClosedError: If close() has been called
        """
        with self._init_lock:
            if self._closed:
                raise ClientClosedError("DBAPIClient has been closed")
            if self._session is None:
                self._session = httpx.AsyncClient(
                    timeout=self.config.timeout, transport=self._transport
                )
            return self._session

    def station_data(self) -> StationDataAPIClient:
        """Get the StationData API client, building it on first use.

        Raises:
            ClientClosedError: If close() has been called
        """
        if self._closed:
            raise ClientClosedError("DBAPIClient has been closed")
        if self._station_data_api is not None:
            return self._station_data_api

        session = self.session
        with self._init_lock:
            if self._station_data_api is None:
                rate = self.config.station_data.rate_limit_per_minute
                self._station_data_api = StationDataAPIClient(
                    api_url=self.config.api_url,
                    api_token=self.api_token,
                    throttle=configure_throttle(rate),
                    session=session,
                )
                logger.info(
                    f"StationData API initialized (rate limit: {rate or 'none'}/min)"
                )
            return self._station_data_api

    async def close(self) -> None:
        """Close the shared HTTP session.

        The client cannot be used afterwards; create a new one instead.
        """
        with self._init_lock:
            self._closed = True
            session = self._session
        if session and not session.is_closed:
            await session.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
