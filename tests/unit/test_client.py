"""Tests for the DBAPIClient facade.

Uses httpx.MockTransport as the injected transport so request counts and
timing can be observed without a network.
"""

import time
from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest

from dbapi import ClientConfig, DBAPIClient, StationDataConfig
from dbapi.api_clients.errors import (
    APIClientError,
    ClientClosedError,
    MissingCredentialsError,
)
from dbapi.api_clients.station_data_client import StationDataAPIClient
from dbapi.api_clients.throttle import IntervalThrottle, NoopThrottle


class CannedTransport:
    """Request handler always answering with the same 200 body."""

    def __init__(self, body: bytes):
        self.body = body
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            200, content=self.body, headers={"Content-Type": "application/json"}
        )


class TestStationDataAccessor:
    """Test construct-once semantics of the sub-API accessor."""

    def test_returns_same_instance(self):
        client = DBAPIClient("token")

        first = client.station_data()
        second = client.station_data()

        assert isinstance(first, StationDataAPIClient)
        assert first is second

    def test_concurrent_first_access_builds_one_instance(self):
        client = DBAPIClient("token")

        with ThreadPoolExecutor(max_workers=8) as pool:
            apis = list(pool.map(lambda _: client.station_data(), range(32)))

        assert all(api is apis[0] for api in apis)

    def test_rate_limit_selects_interval_throttle(self):
        config = ClientConfig(
            station_data=StationDataConfig(rate_limit_per_minute=20)
        )

        api = DBAPIClient("token", config).station_data()

        assert isinstance(api.throttle, IntervalThrottle)
        assert api.throttle.interval_ns == 3_000_000_000

    def test_zero_rate_limit_disables_throttle(self):
        api = DBAPIClient("token").station_data()

        assert isinstance(api.throttle, NoopThrottle)

    def test_configuration_threaded_through(self):
        config = ClientConfig(api_url="http://localhost:9000/", timeout=5)
        client = DBAPIClient("secret", config)

        api = client.station_data()

        assert api.api_token == "secret"
        assert api.build_url("/stations/1") == (
            "http://localhost:9000/stada/v2/stations/1"
        )
        assert api.session is client.session
        assert client.session.timeout.read == 5

    def test_from_config_uses_configured_token(self):
        client = DBAPIClient.from_config(ClientConfig(api_token="from-config"))

        assert client.station_data().api_token == "from-config"


@pytest.mark.asyncio
class TestEndToEnd:
    """Test full request flows through an injected transport."""

    async def test_station_by_id(self, station_body):
        handler = CannedTransport(station_body)
        transport = httpx.MockTransport(handler)

        async with DBAPIClient("token", transport=transport) as client:
            response = await client.station_data().station_by_id(1)

        assert response.result[0].name == "Aachen Hbf"
        assert len(handler.requests) == 1
        assert handler.requests[0].headers["Authorization"] == "Bearer token"

    async def test_missing_token_makes_no_request(self, station_body):
        handler = CannedTransport(station_body)

        async with DBAPIClient("", transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(MissingCredentialsError):
                await client.station_data().station_by_id(1)

        assert handler.requests == []

    async def test_rate_limited_calls_are_spaced(self, station_body):
        """20 calls per minute: the second call waits for the 3s spacing."""
        handler = CannedTransport(station_body)
        config = ClientConfig(
            station_data=StationDataConfig(rate_limit_per_minute=20)
        )

        async with DBAPIClient(
            "token", config, transport=httpx.MockTransport(handler)
        ) as client:
            api = client.station_data()

            start = time.monotonic()
            await api.station_by_id(1)
            first_done = time.monotonic()
            await api.station_by_id(1)
            second_done = time.monotonic()

        assert first_done - start < 1.0
        assert second_done - start >= 3.0
        assert len(handler.requests) == 2

    async def test_close_closes_shared_session(self):
        client = DBAPIClient("token")
        session = client.session

        await client.close()

        assert session.is_closed

    async def test_closed_client_refuses_reuse(self, station_body):
        handler = CannedTransport(station_body)
        client = DBAPIClient("token", transport=httpx.MockTransport(handler))
        api = client.station_data()
        await api.station_by_id(1)

        await client.close()

        with pytest.raises(ClientClosedError):
            client.station_data()
        with pytest.raises(ClientClosedError):
            client.session
        with pytest.raises(APIClientError):
            await api.station_by_id(1)
        assert len(handler.requests) == 1

    async def test_call_on_closed_client_uses_no_throttle_slot(self, station_body):
        handler = CannedTransport(station_body)
        config = ClientConfig(
            station_data=StationDataConfig(rate_limit_per_minute=20)
        )
        client = DBAPIClient("token", config, transport=httpx.MockTransport(handler))
        api = client.station_data()

        await client.close()

        with pytest.raises(ClientClosedError):
            await api.station_by_id(1)
        assert not api.throttle.has_fired
