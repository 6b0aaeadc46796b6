"""Response models for the StationData (StaDa v2) API.

Plain data records mirroring the JSON the API returns. Every field is
optional because the API omits empty values; field names follow Python
conventions and map onto the camelCase JSON keys through aliases.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StadaModel(BaseModel):
    """Base for all StaDa records: accepts JSON keys and Python names."""

    model_config = ConfigDict(populate_by_name=True)


class MailingAddress(StadaModel):
    """Postal address of a station."""

    city: Optional[str] = None
    zipcode: Optional[str] = None
    street: Optional[str] = None
    house_number: Optional[str] = Field(None, alias="houseNumber")


class GeographicCoordinates(StadaModel):
    """GeoJSON-style point; coordinates are [longitude, latitude]."""

    type: Optional[str] = None
    coordinates: Optional[List[float]] = None


class EvaNumber(StadaModel):
    """EVA number of a station; a station may have several."""

    number: Optional[int] = None
    is_main: Optional[bool] = Field(None, alias="isMain")
    geographic_coordinates: Optional[GeographicCoordinates] = Field(
        None, alias="geographicCoordinates"
    )


class Ril100Identifier(StadaModel):
    """RIL100 (Richtlinie 100) identifier of a station."""

    ril_identifier: Optional[str] = Field(None, alias="rilIdentifier")
    is_main: Optional[bool] = Field(None, alias="isMain")
    has_steam_permission: Optional[bool] = Field(None, alias="hasSteamPermission")
    geographic_coordinates: Optional[GeographicCoordinates] = Field(
        None, alias="geographicCoordinates"
    )


class TimetableOffice(StadaModel):
    """Office responsible for the timetable at a station."""

    name: Optional[str] = None
    email: Optional[str] = None


class StationManagement(StadaModel):
    """Office managing a station."""

    name: Optional[str] = None
    number: Optional[int] = None


class OpeningTimes(StadaModel):
    from_time: Optional[str] = Field(None, alias="fromTime")
    to_time: Optional[str] = Field(None, alias="toTime")


class Availability(StadaModel):
    """Opening times per weekday plus holidays."""

    monday: Optional[OpeningTimes] = None
    tuesday: Optional[OpeningTimes] = None
    wednesday: Optional[OpeningTimes] = None
    thursday: Optional[OpeningTimes] = None
    friday: Optional[OpeningTimes] = None
    saturday: Optional[OpeningTimes] = None
    sunday: Optional[OpeningTimes] = None
    holiday: Optional[OpeningTimes] = None


class LocalServiceStaff(StadaModel):
    availability: Optional[Availability] = None


class DBInformation(StadaModel):
    """Opening times of the DB Information desk."""

    availability: Optional[Availability] = None


class Regionalbereich(StadaModel):
    """Regional division of DB Netz the station belongs to."""

    name: Optional[str] = None
    short_name: Optional[str] = Field(None, alias="shortName")
    number: Optional[int] = None


class SZentraleAddress(StadaModel):
    city: Optional[str] = None
    zipcode: Optional[str] = None
    street: Optional[str] = None


class SZentrale(StadaModel):
    """3-S-Zentrale responsible for service, security and cleanliness."""

    address: Optional[SZentraleAddress] = None
    public_fax_number: Optional[str] = None
    mobile_phone_number: Optional[str] = None
    internal_phone_number: Optional[str] = None
    internal_fax_number: Optional[str] = None
    email: Optional[str] = None
    number: Optional[int] = None
    public_phone_number: Optional[str] = None
    name: Optional[str] = None


class Aufgabentraeger(StadaModel):
    """Authority responsible for local train services."""

    shortname: Optional[str] = None
    name: Optional[str] = None


class Station(StadaModel):
    """All fields the StationData API may return for a station."""

    number: Optional[int] = None
    name: Optional[str] = None
    mailing_address: Optional[MailingAddress] = Field(None, alias="mailingAddress")
    category: Optional[int] = None
    price_category: Optional[int] = Field(None, alias="priceCategory")
    federal_state: Optional[str] = Field(None, alias="federalState")
    has_parking: Optional[bool] = Field(None, alias="hasParking")
    has_bicycle_parking: Optional[bool] = Field(None, alias="hasBicycleParking")
    has_local_public_transport: Optional[bool] = Field(
        None, alias="hasLocalPublicTransport"
    )
    has_public_facilities: Optional[bool] = Field(None, alias="hasPublicFacilities")
    has_locker_system: Optional[bool] = Field(None, alias="hasLockerSystem")
    has_taxi_rank: Optional[bool] = Field(None, alias="hasTaxiRank")
    has_travel_necessities: Optional[bool] = Field(
        None, alias="hasTravelNecessities"
    )
    # "yes", "no", "partial" or free text, not a boolean
    has_stepless_access: Optional[str] = Field(None, alias="hasSteplessAccess")
    has_mobility_service: Optional[str] = Field(None, alias="hasMobilityService")
    has_wifi: Optional[bool] = Field(None, alias="hasWiFi")
    has_travel_center: Optional[bool] = Field(None, alias="hasTravelCenter")
    has_railway_mission: Optional[bool] = Field(None, alias="hasRailwayMission")
    has_db_lounge: Optional[bool] = Field(None, alias="hasDBLounge")
    has_lost_and_found: Optional[bool] = Field(None, alias="hasLostAndFound")
    has_car_rental: Optional[bool] = Field(None, alias="hasCarRental")
    eva_numbers: Optional[List[EvaNumber]] = Field(None, alias="evaNumbers")
    ril100_identifiers: Optional[List[Ril100Identifier]] = Field(
        None, alias="ril100Identifiers"
    )
    timetable_office: Optional[TimetableOffice] = Field(None, alias="timetableOffice")
    station_management: Optional[StationManagement] = Field(
        None, alias="stationManagement"
    )
    local_service_staff: Optional[LocalServiceStaff] = Field(
        None, alias="localServiceStaff"
    )
    db_information: Optional[DBInformation] = Field(None, alias="DBinformation")
    regionalbereich: Optional[Regionalbereich] = None
    szentrale: Optional[SZentrale] = None
    aufgabentraeger: Optional[Aufgabentraeger] = None


class Envelope(StadaModel):
    """Pagination metadata shared by all list responses.

    len(result) may be smaller than total; offset and limit page through
    the full set.
    """

    offset: int
    total: int
    limit: int


class StationResponse(Envelope):
    result: List[Station]


class SZentralenResponse(Envelope):
    result: List[SZentrale]


class ErrorPayload(StadaModel):
    """Body of a 404 or 500 response."""

    err_no: int = Field(..., alias="errNo")
    err_msg: str = Field(..., alias="errMsg")


class RateErrorDetails(StadaModel):
    code: int
    message: str
    description: str


class RateErrorPayload(StadaModel):
    """Body of a 429 response."""

    error: RateErrorDetails
