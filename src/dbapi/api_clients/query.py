"""Station filter and its query-string serialization."""

from typing import List, Tuple

import httpx
from pydantic import BaseModel, Field

from .errors import QueryEncodingError


class StationQuery(BaseModel):
    """Filter for the station list endpoint.

    Unset fields keep their zero value and are left out of the query string,
    so an empty StationQuery selects all stations.
    """

    offset: int = Field(default=0, ge=0, description="Number of stations to skip")
    limit: int = Field(default=0, ge=0, description="Maximum number of stations")
    searchstring: str = Field(
        default="", description="Station name pattern, '*' and '?' are wildcards"
    )
    category: str = Field(
        default="", description="Station category or range, e.g. '1' or '1-3'"
    )
    federalstate: str = Field(default="", description="Federal state name")
    eva: int = Field(default=0, ge=0, description="EVA station number")
    ril: str = Field(default="", description="RIL100 identifier")
    logicaloperator: str = Field(
        default="", description="Operator combining the other criteria"
    )


def query_items(query: StationQuery) -> List[Tuple[str, str]]:
    """Return the non-default filter fields as (name, text) pairs.

    Pairs are in field declaration order.

    Raises:
        QueryEncodingError: If a field value cannot be written as text
    """
    items: List[Tuple[str, str]] = []
    for name in type(query).model_fields:
        value = getattr(query, name)
        if value is None or value == 0 or value == "":
            continue
        # bool is an int subclass but has no meaning as a filter value
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise QueryEncodingError(
                f"Cannot encode {name}={value!r} ({type(value).__name__}) as query text"
            )
        items.append((name, str(value)))
    return items


def serialize_query(query: StationQuery) -> str:
    """Serialize a station filter into a percent-encoded query string.

    Args:
        query: Station filter

    Returns:
        Query string without the leading '?', empty when no field is set

    Raises:
        QueryEncodingError: If a field value cannot be written as text
    """
    return str(httpx.QueryParams(query_items(query)))
