"""
Query parameter builders for the RocketLaunch.Live endpoints.

Each endpoint has a fluent builder: setters store a filter value and return
the builder, and build() renders every value that was set into an immutable
Params. Fields shared by several endpoints live in CommonParams, which each
builder owns rather than inherits.

Example:
    params = (
        LaunchParamsBuilder()
        .country_code("US")
        .after_date(date(2023, 9, 1))
        .search("ISS")
        .direction(Direction.DESCENDING)
        .limit(10)
        .build()
    )
    params.query_string
    # 'country_code=US&after_date=2023-09-01&search=ISS&limit=10&direction=desc'
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Iterator, Optional, Union
from urllib.parse import quote

DateInput = Union[date, str, None]
TimeInput = Union[time, str, None]


class Direction(str, Enum):
    """Sort order of results."""
    ASCENDING = "asc"
    DESCENDING = "desc"


class DateParseError(ValueError):
    """A date or time filter could not be parsed."""


@dataclass(frozen=True)
class Params:
    """Rendered `key=value` query entries, ready to send."""

    entries: tuple[str, ...] = ()

    @property
    def query_string(self) -> str:
        return "&".join(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return self.query_string


@dataclass
class CommonParams:
    """Filters shared by several endpoints."""

    id: Optional[int] = None
    name: Optional[str] = None
    state_abbr: Optional[str] = None
    country_code: Optional[str] = None
    slug: Optional[str] = None
    page: Optional[int] = None


def render_value(value: Any) -> str:
    """
    Render a filter value the way the API expects it.

    Booleans become `true`/`false`, dates `YYYY-MM-DD`, enums their value.
    Everything else is stringified and percent-encoded, keeping `:` so that
    timestamps stay readable.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        value = value.value
    elif isinstance(value, date):
        value = value.isoformat()
    return quote(str(value), safe=":")


def add_param(params: list[str], value: Any, name: str) -> None:
    """Append `name=value` to params unless value is None."""
    if value is not None:
        params.append(f"{name}={render_value(value)}")


def parse_date(value: DateInput) -> date:
    """
    Coerce a date filter input.

    Raises:
        DateParseError: If value is None, empty or not an ISO date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            pass
    raise DateParseError("Could not parse date.")


def parse_time(value: TimeInput) -> time:
    """
    Coerce a time filter input.

    Raises:
        DateParseError: If value is None, empty or not an ISO time.
    """
    if isinstance(value, time):
        return value.replace(tzinfo=None)
    if isinstance(value, str) and value.strip():
        try:
            return time.fromisoformat(value.strip()).replace(tzinfo=None)
        except ValueError:
            pass
    raise DateParseError("Could not parse time.")


class _ParamsBuilder:
    """Holds the CommonParams and the setters every endpoint supports."""

    def __init__(self):
        self.common = CommonParams()

    def id(self, id: int):
        """Set the id filter."""
        self.common.id = id
        return self

    def page(self, page: int):
        """Set the result page to fetch."""
        self.common.page = page
        return self

    def build(self) -> Params:
        params: list[str] = []
        self._render(params)
        return Params(tuple(params))

    def _render(self, params: list[str]) -> None:
        raise NotImplementedError


class CompanyParamsBuilder(_ParamsBuilder):
    """Filters for the companies endpoint."""

    def __init__(self):
        super().__init__()
        self.inactive_: Optional[bool] = None

    def name(self, name: str) -> "CompanyParamsBuilder":
        self.common.name = name
        return self

    def country_code(self, country_code: str) -> "CompanyParamsBuilder":
        self.common.country_code = country_code
        return self

    def slug(self, slug: str) -> "CompanyParamsBuilder":
        self.common.slug = slug
        return self

    def inactive(self, inactive: bool) -> "CompanyParamsBuilder":
        self.inactive_ = inactive
        return self

    def _render(self, params: list[str]) -> None:
        add_param(params, self.common.id, "id")
        add_param(params, self.common.name, "name")
        add_param(params, self.common.country_code, "country_code")
        add_param(params, self.common.slug, "slug")
        add_param(params, self.inactive_, "inactive")
        add_param(params, self.common.page, "page")


class LaunchParamsBuilder(_ParamsBuilder):
    """
    Filters for the launches endpoint.

    The date setters validate their input immediately and raise
    DateParseError without touching the builder when it is missing or
    malformed. They accept `datetime.date` objects or ISO strings.
    """

    def __init__(self):
        super().__init__()
        self.cospar_id_: Optional[str] = None
        self.after_date_: Optional[date] = None
        self.before_date_: Optional[date] = None
        self.modified_since_: Optional[datetime] = None
        self.location_id_: Optional[int] = None
        self.pad_id_: Optional[int] = None
        self.provider_id_: Optional[int] = None
        self.tag_id_: Optional[int] = None
        self.vehicle_id_: Optional[int] = None
        self.search_: Optional[str] = None
        self.limit_: Optional[int] = None
        self.direction_: Optional[Direction] = None

    def state_abbr(self, state_abbr: str) -> "LaunchParamsBuilder":
        self.common.state_abbr = state_abbr
        return self

    def country_code(self, country_code: str) -> "LaunchParamsBuilder":
        self.common.country_code = country_code
        return self

    def slug(self, slug: str) -> "LaunchParamsBuilder":
        self.common.slug = slug
        return self

    def cospar_id(self, cospar_id: str) -> "LaunchParamsBuilder":
        """Set the international designator filter, e.g. `2023-123`."""
        self.cospar_id_ = cospar_id
        return self

    def after_date(self, after_date: DateInput) -> "LaunchParamsBuilder":
        self.after_date_ = parse_date(after_date)
        return self

    def before_date(self, before_date: DateInput) -> "LaunchParamsBuilder":
        self.before_date_ = parse_date(before_date)
        return self

    def modified_since(
        self,
        modified_date: DateInput,
        modified_time: TimeInput,
    ) -> "LaunchParamsBuilder":
        """
        Only return launches modified after the given date and time.

        Args:
            modified_date: Calendar date (`date` or `YYYY-MM-DD`)
            modified_time: Time of day (`time` or `HH:MM:SS`)

        Raises:
            DateParseError: If either part is missing or malformed.
        """
        self.modified_since_ = datetime.combine(
            parse_date(modified_date),
            parse_time(modified_time),
        )
        return self

    def location_id(self, location_id: int) -> "LaunchParamsBuilder":
        self.location_id_ = location_id
        return self

    def pad_id(self, pad_id: int) -> "LaunchParamsBuilder":
        self.pad_id_ = pad_id
        return self

    def provider_id(self, provider_id: int) -> "LaunchParamsBuilder":
        self.provider_id_ = provider_id
        return self

    def tag_id(self, tag_id: int) -> "LaunchParamsBuilder":
        self.tag_id_ = tag_id
        return self

    def vehicle_id(self, vehicle_id: int) -> "LaunchParamsBuilder":
        self.vehicle_id_ = vehicle_id
        return self

    def search(self, search: str) -> "LaunchParamsBuilder":
        """Set the free-text search filter."""
        self.search_ = search
        return self

    def limit(self, limit: int) -> "LaunchParamsBuilder":
        self.limit_ = limit
        return self

    def direction(self, direction: Direction) -> "LaunchParamsBuilder":
        self.direction_ = Direction(direction)
        return self

    def _render(self, params: list[str]) -> None:
        add_param(params, self.common.id, "id")
        add_param(params, self.common.name, "name")
        add_param(params, self.common.state_abbr, "state_abbr")
        add_param(params, self.common.country_code, "country_code")
        add_param(params, self.common.slug, "slug")
        add_param(params, self.cospar_id_, "cospar_id")
        add_param(params, self.after_date_, "after_date")
        add_param(params, self.before_date_, "before_date")

        if self.modified_since_ is not None:
            since = self.modified_since_
            add_param(
                params,
                f"{since.date().isoformat()}T{since.time().isoformat()}Z",
                "modified_since",
            )

        add_param(params, self.location_id_, "location_id")
        add_param(params, self.pad_id_, "pad_id")
        add_param(params, self.provider_id_, "provider_id")
        add_param(params, self.tag_id_, "tag_id")
        add_param(params, self.vehicle_id_, "vehicle_id")
        add_param(params, self.search_, "search")
        add_param(params, self.limit_, "limit")
        add_param(params, self.direction_, "direction")
        add_param(params, self.common.page, "page")


class LocationParamsBuilder(_ParamsBuilder):
    """Filters for the locations endpoint."""

    def name(self, name: str) -> "LocationParamsBuilder":
        self.common.name = name
        return self

    def state_abbr(self, state_abbr: str) -> "LocationParamsBuilder":
        self.common.state_abbr = state_abbr
        return self

    def country_code(self, country_code: str) -> "LocationParamsBuilder":
        self.common.country_code = country_code
        return self

    def _render(self, params: list[str]) -> None:
        add_param(params, self.common.id, "id")
        add_param(params, self.common.name, "name")
        add_param(params, self.common.state_abbr, "state_abbr")
        add_param(params, self.common.country_code, "country_code")
        add_param(params, self.common.page, "page")


class MissionParamsBuilder(_ParamsBuilder):
    """Filters for the missions endpoint."""

    def name(self, name: str) -> "MissionParamsBuilder":
        self.common.name = name
        return self

    def _render(self, params: list[str]) -> None:
        add_param(params, self.common.id, "id")
        add_param(params, self.common.name, "name")
        add_param(params, self.common.page, "page")


class PadParamsBuilder(_ParamsBuilder):
    """Filters for the pads endpoint."""

    def name(self, name: str) -> "PadParamsBuilder":
        self.common.name = name
        return self

    def state_abbr(self, state_abbr: str) -> "PadParamsBuilder":
        self.common.state_abbr = state_abbr
        return self

    def country_code(self, country_code: str) -> "PadParamsBuilder":
        self.common.country_code = country_code
        return self

    def _render(self, params: list[str]) -> None:
        add_param(params, self.common.id, "id")
        add_param(params, self.common.name, "name")
        add_param(params, self.common.state_abbr, "state_abbr")
        add_param(params, self.common.country_code, "country_code")
        add_param(params, self.common.page, "page")


class TagParamsBuilder(_ParamsBuilder):
    """Filters for the tags endpoint."""

    def __init__(self):
        super().__init__()
        self.text_: Optional[str] = None

    def text(self, text: str) -> "TagParamsBuilder":
        self.text_ = text
        return self

    def _render(self, params: list[str]) -> None:
        add_param(params, self.common.id, "id")
        add_param(params, self.text_, "text")
        add_param(params, self.common.page, "page")


class VehicleParamsBuilder(_ParamsBuilder):
    """Filters for the vehicles endpoint."""

    def name(self, name: str) -> "VehicleParamsBuilder":
        self.common.name = name
        return self

    def _render(self, params: list[str]) -> None:
        add_param(params, self.common.id, "id")
        add_param(params, self.common.name, "name")
        add_param(params, self.common.page, "page")
