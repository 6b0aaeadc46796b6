"""Base DB open-data API client.

Provides the authenticated, throttled request path shared by all sub-API
clients: URL composition, Bearer authentication, client-side rate limiting
and transport error classification.
"""

import logging
from typing import Dict, Optional

import httpx

from .errors import ClientClosedError, MissingCredentialsError
from .network_error_handler import NetworkErrorHandler
from .throttle import NoopThrottle, Throttle

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.deutschebahn.com"
DEFAULT_TIMEOUT = 30


class RequestDispatcher:
    """Issues authenticated, rate-limited requests for one sub-API.

    Subclasses set API_PATH to the fixed path segment of their API. The
    token is read-only after construction; the throttle is owned by this
    dispatcher alone.
    """

    API_PATH = ""

    def __init__(
        self,
        api_url: str,
        api_token: str,
        throttle: Optional[Throttle] = None,
        session: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the dispatcher.

        Args:
            api_url: Root URL of the API host
            api_token: Bearer token; an empty token fails every request
            throttle: Client-side rate limiter, no throttling if omitted
            session: Shared HTTP session; the dispatcher creates (and closes)
                its own if omitted
            timeout: Request timeout in seconds for a self-created session
            transport: httpx transport for a self-created session
        """
        self.api_url = api_url.rstrip("/")
        self._api_token = api_token
        self.throttle = throttle if throttle is not None else NoopThrottle()
        self.timeout = timeout
        self._transport = transport
        self._session = session
        self._owns_session = session is None
        self._network_error_handler = NetworkErrorHandler()

    @property
    def api_token(self) -> str:
        return self._api_token

    @property
    def session(self) -> httpx.AsyncClient:
        """Get or create the HTTP session."""
        if self._session is None or self._session.is_closed:
            if not self._owns_session:
                raise ClientClosedError("Shared HTTP session has been closed")
            self._session = httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            )
        return self._session

    def build_url(self, path: str, query_string: Optional[str] = None) -> str:
        """Compose the full URL for a resource path."""
        url = f"{self.api_url}{self.API_PATH}{path}"
        if query_string:
            url = f"{url}?{query_string}"
        return url

    def get_request_headers(self) -> Dict[str, str]:
        """Get all request headers including auth and accept."""
        return {
            "Accept": "application/json",
            "Authorization": f"Bearer {self._api_token}",
        }

    async def send(
        self, method: str, path: str, query_string: Optional[str] = None
    ) -> httpx.Response:
        """Send a request once the throttle releases it.

        The response is returned with its body unread; the caller must read
        or close it (see response_classifier.classify_response).

        Args:
            method: HTTP method
            path: Resource path below API_PATH, e.g. "/stations/1"
            query_string: Encoded query string without the leading '?'

        Returns:
            Streaming HTTP response

        Raises:
            MissingCredentialsError: If no API token is configured
            ClientClosedError: If the shared HTTP session has been closed
            TransportError: If the request fails at the transport level
        """
        # A call rejected here must not use up a throttle slot.
        if not self._api_token:
            raise MissingCredentialsError("no API token given")

        session = self.session
        await self.throttle.wait()

        url = self.build_url(path, query_string)
        request = session.build_request(
            method, url, headers=self.get_request_headers()
        )
        logger.debug(f"{method} {url}")

        try:
            response = await session.send(request, stream=True)
        except httpx.TransportError as e:
            raise self._network_error_handler.classify_transport_error(e) from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    async def close(self) -> None:
        """Close the HTTP session if this dispatcher created it."""
        if self._owns_session and self._session and not self._session.is_closed:
            await self._session.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
