"""Network error classification for the DB open-data API clients.

Maps httpx transport exceptions onto the client's TransportError family so
callers never have to import httpx to tell a refused connection from a
timeout or a DNS failure. Nothing here retries; the caller decides.
"""

import logging
import re

import httpx

from .errors import (
    DNSResolutionError,
    NetworkConnectionError,
    NetworkTimeoutError,
    SSLCertificateError,
    TransportError,
)

logger = logging.getLogger(__name__)


class NetworkErrorHandler:
    """Classifies httpx transport failures."""

    def __init__(self):
        self._dns_error_patterns = [
            r"name.*resolution.*failed",
            r"name.*or.*service.*not.*known",
            r"nodename.*nor.*servname.*provided",
            r"temporary.*failure.*in.*name.*resolution",
            r"getaddrinfo.*failed",
        ]
        self._ssl_error_patterns = [
            r"ssl.*certificate.*verification.*failed",
            r"certificate.*verify.*failed",
            r"ssl.*handshake.*failed",
            r"bad.*certificate",
        ]

    def classify_transport_error(self, error: Exception) -> TransportError:
        """Build the TransportError matching an httpx exception.

        Args:
            error: The original httpx exception

        Returns:
            TransportError subclass describing the failure; the caller raises
            it chained to the original exception.
        """
        error_message = str(error).lower()
        logger.debug(f"Classifying transport error {type(error).__name__}: {error}")

        if isinstance(error, httpx.TimeoutException):
            if isinstance(error, httpx.ConnectTimeout):
                return NetworkTimeoutError(f"Connection timed out: {error}")
            return NetworkTimeoutError(f"Request timed out: {error}")

        if isinstance(error, httpx.ConnectError):
            if self._matches(self._dns_error_patterns, error_message):
                return DNSResolutionError(f"Cannot resolve server address: {error}")
            if self._matches(self._ssl_error_patterns, error_message):
                return SSLCertificateError(
                    f"SSL certificate verification failed: {error}"
                )
            return NetworkConnectionError(f"Connection failed: {error}")

        if isinstance(error, httpx.NetworkError):
            return NetworkConnectionError(f"Network error: {error}")

        return TransportError(f"HTTP transport error: {error}")

    @staticmethod
    def _matches(patterns, error_message: str) -> bool:
        return any(re.search(pattern, error_message) for pattern in patterns)
