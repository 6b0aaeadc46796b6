"""StationData (StaDa v2) API client.

Queries stations and 3-S-Zentralen either by id or, for stations, by filter.
See https://developer.deutschebahn.com/ for the API documentation.
"""

import logging
from typing import Optional, Type

from .base_client import RequestDispatcher
from .errors import APIClientError
from .models import StationResponse, SZentralenResponse
from .query import StationQuery, serialize_query
from .response_classifier import EnvelopeT, classify_response

logger = logging.getLogger(__name__)


class StationDataAPIClient(RequestDispatcher):
    """Client for the StationData API.

    Every query method raises the error the API reported instead of
    returning it:

    - DomainError for 404 and 500 responses
    - RateLimitError for 429 responses (server-side throttling)
    - UnrecognizedStatusError for any other non-200 status
    """

    API_PATH = "/stada/v2"

    async def _get(
        self,
        path: str,
        envelope_model: Type[EnvelopeT],
        query_string: Optional[str] = None,
    ) -> EnvelopeT:
        response = await self.send("GET", path, query_string)
        outcome = await classify_response(response, envelope_model)
        if isinstance(outcome, APIClientError):
            logger.debug(f"GET {path} failed: {type(outcome).__name__}: {outcome}")
            raise outcome
        return outcome.envelope

    async def station_by_id(self, station_id: int) -> StationResponse:
        """Get the station with the given number.

        Args:
            station_id: Station number

        Returns:
            Envelope holding the station

        Raises:
            MissingCredentialsError: If no API token is configured
            TransportError: If the request fails at the transport level
            DecodeError: If the response body cannot be decoded
            DomainError: If the station does not exist or the server failed
            RateLimitError: If the API rejected the call as too frequent
            UnrecognizedStatusError: For any other status code
        """
        return await self._get(f"/stations/{station_id}", StationResponse)

    async def station_by_filter(self, query: StationQuery) -> StationResponse:
        """Get the stations matching a filter.

        An empty filter returns all stations (at most 10,000 per page).

        Raises:
            QueryEncodingError: If the filter cannot be serialized
            (plus everything station_by_id raises)
        """
        return await self._get("/stations", StationResponse, serialize_query(query))

    async def station_all(self) -> StationResponse:
        """Get all stations; same as station_by_filter(StationQuery())."""
        return await self.station_by_filter(StationQuery())

    async def szentralen_by_id(self, szentrale_id: int) -> SZentralenResponse:
        """Get the 3-S-Zentrale with the given number."""
        return await self._get(f"/szentralen/{szentrale_id}", SZentralenResponse)

    async def szentralen_all(self) -> SZentralenResponse:
        """Get all 3-S-Zentralen."""
        return await self._get("/szentralen", SZentralenResponse)
