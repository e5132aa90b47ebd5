"""
Pydantic models for RocketLaunch.Live responses.

Every endpoint answers with the same envelope (Response) whose result list
holds records of the endpoint's type. Records mirror the server JSON:
missing keys fall back to None, an empty list or an empty sub-record, and
unknown keys are ignored, so a response never fails to decode only because
the server omitted or added a field.

Fields whose shape the API does not document (weather_*, win_open,
win_close, EstimatedDate.quarter) are typed Any and kept as the raw JSON
value.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Record(BaseModel):
    """Base for all API records: immutable, tolerant of unknown keys."""

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


class Country(Record):
    name: Optional[str] = None
    code: Optional[str] = None


class Company(Record):
    """Launch service provider or vehicle manufacturer."""

    id: Optional[int] = None
    name: Optional[str] = None
    inactive: Optional[bool] = None
    country: Country = Field(default_factory=Country)


class Provider(Record):
    """Company operating a launch, as embedded in a Launch."""

    id: Optional[int] = None
    name: Optional[str] = None
    slug: Optional[str] = None


class Vehicle(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    company_id: Optional[int] = None
    slug: Optional[str] = None


class Location(Record):
    """Launch site containing one or more pads."""

    id: Optional[int] = None
    name: Optional[str] = None
    state: Optional[str] = None
    statename: Optional[str] = None
    country: Optional[str] = None
    slug: Optional[str] = None


class Pad(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    location: Location = Field(default_factory=Location)


class Mission(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None


class EstimatedDate(Record):
    """Launch date known only to month, quarter or year precision."""

    month: Optional[int] = None
    day: Optional[int] = None
    year: Optional[int] = None
    quarter: Any = None


class Tag(Record):
    id: Optional[int] = None
    text: Optional[str] = None


class Media(Record):
    """Video or stream attached to a launch."""

    id: Optional[int] = None
    media_url: Optional[str] = None
    youtube_vidid: Optional[str] = None
    featured: Optional[bool] = None
    ldfeatured: Optional[bool] = None
    approved: Optional[bool] = None


class Launch(Record):
    """A single launch with its provider, vehicle, pad and missions."""

    id: Optional[int] = None
    cospar_id: Optional[str] = None
    sort_date: Optional[str] = None
    name: Optional[str] = None
    provider: Provider = Field(default_factory=Provider)
    vehicle: Vehicle = Field(default_factory=Vehicle)
    pad: Pad = Field(default_factory=Pad)
    missions: list[Mission] = Field(default_factory=list)
    mission_description: Optional[str] = None
    launch_description: Optional[str] = None
    win_open: Any = None
    t0: Optional[str] = None
    win_close: Any = None
    est_date: EstimatedDate = Field(default_factory=EstimatedDate)
    date_str: Optional[str] = None
    tags: list[Tag] = Field(default_factory=list)
    slug: Optional[str] = None
    weather_summary: Any = None
    weather_temp: Any = None
    weather_condition: Any = None
    weather_wind_mph: Any = None
    weather_icon: Any = None
    weather_updated: Any = None
    quicktext: Optional[str] = None
    media: list[Media] = Field(default_factory=list)
    result: Optional[int] = None
    suborbital: Optional[bool] = None
    modified: Optional[str] = None


class Response(BaseModel, Generic[T]):
    """
    Envelope returned by every endpoint.

    When valid_auth is false the server is expected to send an empty result
    and populate errors. Nothing here enforces that; check both fields.
    """

    errors: Optional[list[str]] = Field(
        default=None,
        description="Error messages reported by the API"
    )
    valid_auth: bool = Field(
        ...,
        description="Whether the API key was accepted"
    )
    count: Optional[int] = Field(
        default=None,
        description="Number of records in this page"
    )
    limit: Optional[int] = Field(
        default=None,
        description="Maximum number of records per page"
    )
    total: Optional[int] = Field(
        default=None,
        description="Total number of matching records"
    )
    last_page: Optional[int] = Field(
        default=None,
        description="Number of the last available page"
    )
    result: list[T] = Field(
        default_factory=list,
        description="Records of the requested type"
    )

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @property
    def ok(self) -> bool:
        """True when the key was accepted and no errors were reported."""
        return self.valid_auth and not self.errors
