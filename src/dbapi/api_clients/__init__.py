"""API client abstractions for the DB open-data APIs.

All HTTP functionality lives in dedicated client classes; callers only deal
with typed models and typed errors.
"""

from .base_client import RequestDispatcher
from .errors import (
    APIClientError,
    MissingCredentialsError,
    ClientClosedError,
    TransportError,
    NetworkConnectionError,
    NetworkTimeoutError,
    DNSResolutionError,
    SSLCertificateError,
    DecodeError,
    QueryEncodingError,
    DomainError,
    RateLimitError,
    UnrecognizedStatusError,
)
from .models import Station, SZentrale, StationResponse, SZentralenResponse
from .query import StationQuery, serialize_query
from .response_classifier import Success, classify_response, decode_payload
from .station_data_client import StationDataAPIClient
from .throttle import Throttle, IntervalThrottle, NoopThrottle, configure_throttle

__all__ = [
    # Base client
    "RequestDispatcher",
    # Errors
    "APIClientError",
    "MissingCredentialsError",
    "ClientClosedError",
    "TransportError",
    "NetworkConnectionError",
    "NetworkTimeoutError",
    "DNSResolutionError",
    "SSLCertificateError",
    "DecodeError",
    "QueryEncodingError",
    "DomainError",
    "RateLimitError",
    "UnrecognizedStatusError",
    # Models
    "Station",
    "SZentrale",
    "StationResponse",
    "SZentralenResponse",
    # Query builder
    "StationQuery",
    "serialize_query",
    # Response classifier
    "Success",
    "classify_response",
    "decode_payload",
    # StationData client
    "StationDataAPIClient",
    # Throttle
    "Throttle",
    "IntervalThrottle",
    "NoopThrottle",
    "configure_throttle",
]
