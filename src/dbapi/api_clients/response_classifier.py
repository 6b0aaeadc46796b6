"""Response classification for the StationData API.

The status code alone decides how a body is decoded:

    200       -> Success wrapping the envelope model
    404, 500  -> DomainError (errNo, errMsg)
    429       -> RateLimitError (code, message, description)
    otherwise -> UnrecognizedStatusError carrying the raw body

Error outcomes are returned, not raised, so the classifier yields a closed
set of outcomes; the sub-API methods raise them. Bodies that do not decode
into the expected shape raise DecodeError whatever the status code.
"""

import logging
from dataclasses import dataclass
from typing import Generic, Type, TypeVar, Union

import httpx
from pydantic import ValidationError

from .errors import (
    DecodeError,
    DomainError,
    RateLimitError,
    TransportError,
    UnrecognizedStatusError,
)
from .models import Envelope, ErrorPayload, RateErrorPayload

logger = logging.getLogger(__name__)

EnvelopeT = TypeVar("EnvelopeT", bound=Envelope)

DOMAIN_ERROR_STATUSES = frozenset({404, 500})
RATE_LIMIT_STATUS = 429


@dataclass(frozen=True)
class Success(Generic[EnvelopeT]):
    """Successful (200) outcome."""

    envelope: EnvelopeT


Outcome = Union[
    Success[EnvelopeT], DomainError, RateLimitError, UnrecognizedStatusError
]


def _decode(body: bytes, model, status_code: int):
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        # pydantic reports malformed JSON as a json_invalid validation error
        raise DecodeError(
            f"Cannot decode {status_code} response as {model.__name__}: {e}",
            status_code,
        ) from e


def decode_payload(
    status_code: int, body: bytes, envelope_model: Type[EnvelopeT]
) -> "Outcome[EnvelopeT]":
    """Decode a fully read response body according to its status code.

    Args:
        status_code: HTTP status code of the response
        body: Raw response body
        envelope_model: Envelope type a 200 body decodes into

    Returns:
        Success, DomainError, RateLimitError or UnrecognizedStatusError

    Raises:
        DecodeError: If the body does not match the shape for its status code
    """
    if status_code == 200:
        return Success(_decode(body, envelope_model, status_code))

    if status_code in DOMAIN_ERROR_STATUSES:
        error = _decode(body, ErrorPayload, status_code)
        return DomainError(error.err_no, error.err_msg, status_code)

    if status_code == RATE_LIMIT_STATUS:
        rate_error = _decode(body, RateErrorPayload, status_code).error
        return RateLimitError(
            rate_error.code, rate_error.message, rate_error.description
        )

    return UnrecognizedStatusError(status_code, body)


async def _release_after_error(response: httpx.Response) -> None:
    try:
        await response.aclose()
    except Exception as e:
        # An earlier error is already propagating and takes precedence.
        logger.warning(f"Failed to release response body after error: {e}")


async def read_body(response: httpx.Response) -> bytes:
    """Read a streamed response body, releasing the stream exactly once.

    Raises:
        TransportError: If reading or releasing the stream fails
    """
    try:
        body = await response.aread()
    except Exception as e:
        await _release_after_error(response)
        raise TransportError(
            f"Failed to read response body: {e}", response.status_code
        ) from e

    try:
        # No-op once aread() has drained and released the stream.
        await response.aclose()
    except Exception as e:
        raise TransportError(
            f"Failed to release response body: {e}", response.status_code
        ) from e
    return body


async def classify_response(
    response: httpx.Response, envelope_model: Type[EnvelopeT]
) -> "Outcome[EnvelopeT]":
    """Read, release and classify a streamed response.

    Args:
        response: Response returned by RequestDispatcher.send()
        envelope_model: Envelope type a 200 body decodes into

    Returns:
        Success, DomainError, RateLimitError or UnrecognizedStatusError

    Raises:
        TransportError: If the body cannot be read or released
        DecodeError: If the body does not match the shape for its status code
    """
    body = await read_body(response)
    logger.debug(f"Classifying {response.status_code} response ({len(body)} bytes)")
    return decode_payload(response.status_code, body, envelope_model)
