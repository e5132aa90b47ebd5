# Rocket Launch Live package
"""
Typed async client for the RocketLaunch.Live API.

- Fluent parameter builders for each endpoint
- Pydantic record models and a generic Response envelope
- RocketLaunchLive client built on httpx
"""

from .client import RocketLaunchLive, RocketLaunchLiveError
from .models import (
    Company,
    Country,
    EstimatedDate,
    Launch,
    Location,
    Media,
    Mission,
    Pad,
    Provider,
    Response,
    Tag,
    Vehicle,
)
from .params import (
    CommonParams,
    CompanyParamsBuilder,
    DateParseError,
    Direction,
    LaunchParamsBuilder,
    LocationParamsBuilder,
    MissionParamsBuilder,
    PadParamsBuilder,
    Params,
    TagParamsBuilder,
    VehicleParamsBuilder,
)

__all__ = [
    "RocketLaunchLive",
    "RocketLaunchLiveError",
    "Company",
    "Country",
    "EstimatedDate",
    "Launch",
    "Location",
    "Media",
    "Mission",
    "Pad",
    "Provider",
    "Response",
    "Tag",
    "Vehicle",
    "CommonParams",
    "CompanyParamsBuilder",
    "DateParseError",
    "Direction",
    "LaunchParamsBuilder",
    "LocationParamsBuilder",
    "MissionParamsBuilder",
    "PadParamsBuilder",
    "Params",
    "TagParamsBuilder",
    "VehicleParamsBuilder",
]
