"""
Shared pytest fixtures for dbapi tests.

Provides canned StationData API bodies and helpers for building responses.
"""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "stada"


def load_fixture_bytes(name: str) -> bytes:
    """Read a canned API response body from tests/fixtures/stada."""
    return (FIXTURES_DIR / name).read_bytes()


@pytest.fixture
def station_body() -> bytes:
    """Body of GET /stada/v2/stations/1 (Aachen Hbf)."""
    return load_fixture_bytes("stations_1.json")


@pytest.fixture
def station_json(station_body: bytes) -> Dict[str, Any]:
    return json.loads(station_body)


@pytest.fixture
def szentralen_body() -> bytes:
    """Body of GET /stada/v2/szentralen/15 (Duisburg Hbf)."""
    return load_fixture_bytes("szentralen_15.json")
