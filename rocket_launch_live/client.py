"""
RocketLaunch.Live API client.

RocketLaunch.Live: https://www.rocketlaunch.live/api
- Requires an API key, sent as a bearer token
- Seven read-only collections under /json/<endpoint>

Every call is a single GET with no retries. Transport errors, bad statuses
and undecodable bodies all surface as RocketLaunchLiveError. A rejected key
does not raise: the server answers with valid_auth=false and a list of
errors, which is returned to the caller as is.
"""

import logging
from typing import Optional, TypeVar

import httpx
from pydantic import ValidationError

from .config import ENDPOINTS, resolve_api_key, resolve_base_url
from .models import (
    Company,
    Launch,
    Location,
    Mission,
    Pad,
    Response,
    Tag,
    Vehicle,
)
from .params import Params

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RocketLaunchLiveError(Exception):
    """A request to the API failed or its response could not be decoded."""

    def __init__(self, endpoint: str, message: str):
        super().__init__(f"{endpoint}: {message}")
        self.endpoint = endpoint


class RocketLaunchLive:
    """
    Async client for the RocketLaunch.Live API.

    One coroutine per endpoint. Each takes an optional Params built by the
    matching builder and the record type to decode into. The record type is
    not checked against the endpoint: a mismatched model decodes whatever
    keys happen to match and leaves the rest at their defaults.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: API key. If not provided, uses the RLL_API_KEY
                    environment variable.
            base_url: API host. Defaults to RLL_BASE_URL or the
                    production host.
            http_client: Shared AsyncClient to send requests with. The
                    caller owns it (timeouts, proxies, closing). When
                    omitted, a client is opened per request.

        Raises:
            ValueError: If no API key can be found.
        """
        self.api_key = resolve_api_key(api_key)
        self.base_url = resolve_base_url(base_url)
        self.http_client = http_client

    def build_url(self, endpoint: str, params: Optional[Params] = None) -> str:
        """Return the full request URL for an endpoint and its filters."""
        query = params.query_string if params is not None else ""
        return f"{self.base_url}/json/{endpoint}?{query}"

    @property
    def headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
        }

    async def _request(self, endpoint: str, params: Optional[Params] = None):
        """
        Send a GET request and return the decoded JSON body.

        Args:
            endpoint: Collection name, e.g. "launches"
            params: Rendered filters, or None for no filtering

        Returns:
            Parsed JSON body

        Raises:
            RocketLaunchLiveError: On connection errors, non-2xx statuses
                or a body that is not JSON
        """
        url = self.build_url(endpoint, params)
        logger.info(f"{endpoint}: GET {url}")

        try:
            if self.http_client is not None:
                response = await self.http_client.get(url, headers=self.headers)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.get(url, headers=self.headers)
            response.raise_for_status()
            data = response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                f"{endpoint}: HTTP {e.response.status_code} - "
                f"{e.response.text[:200]}"
            )
            raise RocketLaunchLiveError(
                endpoint, f"HTTP {e.response.status_code}"
            ) from e

        except httpx.HTTPError as e:
            logger.error(f"{endpoint}: Request error - {str(e)}")
            raise RocketLaunchLiveError(endpoint, f"request failed: {e}") from e

        except ValueError as e:
            logger.error(f"{endpoint}: Invalid JSON body - {str(e)}")
            raise RocketLaunchLiveError(endpoint, "response is not valid JSON") from e

        logger.info(f"{endpoint}: Success")
        return data

    async def fetch(
        self,
        endpoint: str,
        params: Optional[Params] = None,
        model: type[T] = dict,
    ) -> Response[T]:
        """
        Request an endpoint and decode the envelope with records of `model`.

        Raises:
            ValueError: If endpoint is not one of the API collections
            RocketLaunchLiveError: If the request fails or the body does not
                match the envelope
        """
        if endpoint not in ENDPOINTS:
            raise ValueError(f"Unknown endpoint: {endpoint}")

        data = await self._request(endpoint, params)

        try:
            response = Response[model].model_validate(data)
        except ValidationError as e:
            logger.error(f"{endpoint}: Unexpected response shape - {str(e)}")
            raise RocketLaunchLiveError(
                endpoint, "response does not match the expected schema"
            ) from e

        if not response.valid_auth:
            logger.warning(f"{endpoint}: API key rejected - {response.errors}")

        return response

    async def companies(
        self, params: Optional[Params] = None, model: type[T] = Company
    ) -> Response[T]:
        """Retrieve companies, optionally filtered by CompanyParamsBuilder."""
        return await self.fetch("companies", params, model)

    async def launches(
        self, params: Optional[Params] = None, model: type[T] = Launch
    ) -> Response[T]:
        """
        Retrieve launches, optionally filtered by LaunchParamsBuilder.

        Args:
            params: Built launch filters
            model: Record type for the result list (default Launch)

        Returns:
            Response envelope with pagination metadata and records
        """
        return await self.fetch("launches", params, model)

    async def locations(
        self, params: Optional[Params] = None, model: type[T] = Location
    ) -> Response[T]:
        """Retrieve launch sites, optionally filtered by LocationParamsBuilder."""
        return await self.fetch("locations", params, model)

    async def missions(
        self, params: Optional[Params] = None, model: type[T] = Mission
    ) -> Response[T]:
        """Retrieve missions, optionally filtered by MissionParamsBuilder."""
        return await self.fetch("missions", params, model)

    async def pads(
        self, params: Optional[Params] = None, model: type[T] = Pad
    ) -> Response[T]:
        """Retrieve launch pads, optionally filtered by PadParamsBuilder."""
        return await self.fetch("pads", params, model)

    async def tags(
        self, params: Optional[Params] = None, model: type[T] = Tag
    ) -> Response[T]:
        """Retrieve tags, optionally filtered by TagParamsBuilder."""
        return await self.fetch("tags", params, model)

    async def vehicles(
        self, params: Optional[Params] = None, model: type[T] = Vehicle
    ) -> Response[T]:
        """Retrieve vehicles, optionally filtered by VehicleParamsBuilder."""
        return await self.fetch("vehicles", params, model)
