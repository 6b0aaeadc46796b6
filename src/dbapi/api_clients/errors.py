"""Exception hierarchy for the DB open-data API clients.

Every failure surfaced by the clients derives from APIClientError so callers
can catch the whole family at once. Errors reported by the API itself carry
the decoded payload fields.
"""

from typing import Optional


class APIClientError(Exception):
    """Base exception for API client errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MissingCredentialsError(APIClientError):
    """Exception raised when no API token is configured."""

    pass


class ClientClosedError(APIClientError):
    """Exception raised when a request is made on a closed client."""

    pass


class TransportError(APIClientError):
    """Exception raised when the HTTP exchange itself fails."""

    pass


class NetworkConnectionError(TransportError):
    """Exception raised for connection-related network failures."""

    pass


class NetworkTimeoutError(TransportError):
    """Exception raised for timeout-related network failures."""

    pass


class DNSResolutionError(TransportError):
    """Exception raised for DNS resolution failures."""

    pass


class SSLCertificateError(TransportError):
    """Exception raised for SSL certificate verification failures."""

    pass


class DecodeError(APIClientError):
    """Exception raised when a response body does not match its expected shape."""

    pass


class QueryEncodingError(APIClientError):
    """Exception raised when a filter value cannot be written as query text."""

    pass


class DomainError(APIClientError):
    """Not-found or server error reported by the API (404, 500)."""

    def __init__(self, err_no: int, err_msg: str, status_code: Optional[int] = None):
        super().__init__(f"Error {err_no}: {err_msg}", status_code)
        self.err_no = err_no
        self.err_msg = err_msg


class RateLimitError(APIClientError):
    """Server-side throttling reported by the API (429).

    Distinct from the client's own throttle, which only ever delays calls.
    """

    def __init__(self, code: int, message: str, description: str):
        super().__init__(f"Error {code}: {message} - {description}", 429)
        self.code = code
        self.message = message
        self.description = description


class UnrecognizedStatusError(APIClientError):
    """Response with a status code the API does not document."""

    def __init__(self, status_code: int, body: bytes):
        super().__init__(body.decode("utf-8", errors="replace"), status_code)
        self.body = body

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")
