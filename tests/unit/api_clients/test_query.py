"""Unit tests for station filter serialization."""

from urllib.parse import parse_qsl

import pytest
from pydantic import ValidationError

from dbapi.api_clients.errors import QueryEncodingError
from dbapi.api_clients.query import StationQuery, query_items, serialize_query


class TestSerializeQuery:
    """Test query-string serialization of StationQuery."""

    def test_empty_filter_serializes_to_empty_string(self):
        assert serialize_query(StationQuery()) == ""

    def test_single_field(self):
        assert serialize_query(StationQuery(limit=10)) == "limit=10"

    def test_zero_values_are_omitted(self):
        query = StationQuery(offset=0, limit=5, eva=0, searchstring="")

        assert serialize_query(query) == "limit=5"

    def test_fields_in_stable_order(self):
        query = StationQuery(
            logicaloperator="and",
            ril="KA",
            eva=8000001,
            federalstate="bayern",
            category="1-3",
            searchstring="aachen",
            limit=20,
            offset=40,
        )

        assert serialize_query(query) == (
            "offset=40&limit=20&searchstring=aachen&category=1-3"
            "&federalstate=bayern&eva=8000001&ril=KA&logicaloperator=and"
        )

    def test_values_are_percent_encoded(self):
        query = StationQuery(
            searchstring="Frankfurt (Main) Hbf", federalstate="Thüringen"
        )

        serialized = serialize_query(query)

        assert " " not in serialized
        assert "ü" not in serialized
        assert "(" not in serialized

    def test_round_trip_recovers_set_fields(self):
        query = StationQuery(
            searchstring="Köln*", federalstate="Nordrhein-Westfalen", eva=8000207
        )

        parsed = dict(parse_qsl(serialize_query(query)))

        assert parsed == {
            "searchstring": "Köln*",
            "federalstate": "Nordrhein-Westfalen",
            "eva": "8000207",
        }

    def test_query_items_skip_defaults(self):
        assert query_items(StationQuery(ril="FF")) == [("ril", "FF")]


class TestStationQueryValidation:
    """Test validation and encoding failures."""

    def test_negative_offset_rejected(self):
        with pytest.raises(ValidationError):
            StationQuery(offset=-1)

    def test_negative_eva_rejected(self):
        with pytest.raises(ValidationError):
            StationQuery(eva=-8000001)

    def test_unrepresentable_value_raises_encoding_error(self):
        query = StationQuery.model_construct(searchstring=["aachen"])

        with pytest.raises(QueryEncodingError, match="searchstring"):
            serialize_query(query)

    def test_boolean_value_raises_encoding_error(self):
        query = StationQuery.model_construct(eva=True)

        with pytest.raises(QueryEncodingError, match="eva"):
            serialize_query(query)
