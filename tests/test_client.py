"""
Tests for the RocketLaunch.Live client.

These tests verify:
- URL and header construction
- Decoding into the caller-selected record type
- Error wrapping for transport, status and decode failures
- In-band authentication failures returned as data
"""

import logging
import os
from datetime import date
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from rocket_launch_live.client import RocketLaunchLive, RocketLaunchLiveError
from rocket_launch_live.models import (
    Company,
    Launch,
    Location,
    Mission,
    Pad,
    Response,
    Tag,
    Vehicle,
)
from rocket_launch_live.params import Direction, LaunchParamsBuilder, TagParamsBuilder


def mock_http_client(handler) -> httpx.AsyncClient:
    """Create an AsyncClient that answers every request with handler."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class Recorder:
    """MockTransport handler that records requests and replies with JSON."""

    def __init__(self, status_code: int = 200, json=None, content: bytes = None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.json = json if json is not None else {"valid_auth": True, "result": []}
        self.content = content

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json)


class TestClientInit:
    """Tests for client construction."""

    def test_explicit_key_and_default_url(self):
        with patch.dict(os.environ, {}, clear=True):
            with patch("rocket_launch_live.config.load_dotenv"):
                client = RocketLaunchLive(api_key="test_key")

        assert client.api_key == "test_key"
        assert client.base_url == "https://fdo.rocketlaunch.live"

    def test_key_from_environment(self):
        with patch.dict(os.environ, {"RLL_API_KEY": "env_key_123"}):
            client = RocketLaunchLive()

        assert client.api_key == "env_key_123"

    def test_missing_key_raises(self):
        with patch.dict(os.environ, {}, clear=True):
            with patch("rocket_launch_live.config.load_dotenv"):
                with pytest.raises(ValueError):
                    RocketLaunchLive()

    def test_custom_base_url(self):
        client = RocketLaunchLive(api_key="k", base_url="http://localhost:9000/")

        assert client.base_url == "http://localhost:9000"

    def test_headers(self):
        client = RocketLaunchLive(api_key="secret")

        assert client.headers["Authorization"] == "Bearer secret"
        assert client.headers["Accept"] == "application/json"


class TestBuildUrl:
    """Tests for request URL construction."""

    @pytest.fixture
    def client(self):
        return RocketLaunchLive(api_key="k", base_url="https://api.example.com")

    def test_without_params(self, client):
        assert client.build_url("launches") == "https://api.example.com/json/launches?"

    def test_with_empty_params(self, client):
        url = client.build_url("tags", TagParamsBuilder().build())

        assert url == "https://api.example.com/json/tags?"

    def test_with_params(self, client):
        params = TagParamsBuilder().text("Crewed").page(2).build()

        assert client.build_url("tags", params) == (
            "https://api.example.com/json/tags?text=Crewed&page=2"
        )


class TestRequests:
    """Wire-level tests using httpx.MockTransport."""

    @pytest.mark.asyncio
    async def test_iss_launch_query(self):
        """Should send the documented query with a bearer token."""
        recorder = Recorder()
        async with mock_http_client(recorder) as http_client:
            client = RocketLaunchLive(api_key="test_key", http_client=http_client)
            params = (
                LaunchParamsBuilder()
                .country_code("US")
                .after_date(date(2023, 9, 1))
                .search("ISS")
                .direction(Direction.DESCENDING)
                .limit(10)
                .build()
            )

            resp = await client.launches(params)

        request = recorder.requests[0]
        assert request.method == "GET"
        assert str(request.url) == (
            "https://fdo.rocketlaunch.live/json/launches"
            "?country_code=US&after_date=2023-09-01&search=ISS&limit=10&direction=desc"
        )
        assert request.headers["Authorization"] == "Bearer test_key"
        assert resp.valid_auth is True
        assert resp.result == []

    @pytest.mark.asyncio
    async def test_no_params_sends_empty_query(self):
        recorder = Recorder()
        async with mock_http_client(recorder) as http_client:
            client = RocketLaunchLive(api_key="k", http_client=http_client)
            await client.vehicles()

        request = recorder.requests[0]
        assert request.url.path == "/json/vehicles"
        assert request.url.query == b""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,endpoint", [
        ("companies", "companies"),
        ("launches", "launches"),
        ("locations", "locations"),
        ("missions", "missions"),
        ("pads", "pads"),
        ("tags", "tags"),
        ("vehicles", "vehicles"),
    ])
    async def test_endpoint_paths(self, method, endpoint):
        recorder = Recorder()
        async with mock_http_client(recorder) as http_client:
            client = RocketLaunchLive(api_key="k", http_client=http_client)
            await getattr(client, method)()

        assert recorder.requests[0].url.path == f"/json/{endpoint}"

    @pytest.mark.asyncio
    async def test_escaped_search_stays_in_one_param(self):
        recorder = Recorder()
        async with mock_http_client(recorder) as http_client:
            client = RocketLaunchLive(api_key="k", http_client=http_client)
            params = LaunchParamsBuilder().search("a&b=c").limit(1).build()
            await client.launches(params)

        request = recorder.requests[0]
        assert request.url.params["search"] == "a&b=c"
        assert request.url.params["limit"] == "1"

    @pytest.mark.asyncio
    async def test_decodes_native_records(self):
        recorder = Recorder(json={
            "valid_auth": True,
            "count": 1,
            "result": [{"id": 1, "name": "Falcon 9", "company_id": 1, "slug": "falcon-9"}],
        })
        async with mock_http_client(recorder) as http_client:
            client = RocketLaunchLive(api_key="k", http_client=http_client)
            resp = await client.vehicles()

        assert resp.count == 1
        assert isinstance(resp.result[0], Vehicle)
        assert resp.result[0].slug == "falcon-9"


class TestDecoding:
    """Tests for envelope decoding with a stubbed request layer."""

    @pytest.fixture
    def client(self):
        return RocketLaunchLive(api_key="test_key")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,model", [
        ("companies", Company),
        ("launches", Launch),
        ("locations", Location),
        ("missions", Mission),
        ("pads", Pad),
        ("tags", Tag),
        ("vehicles", Vehicle),
    ])
    async def test_default_record_types(self, client, method, model):
        mock_response = {"valid_auth": True, "result": [{"id": 1}]}

        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = mock_response

            resp = await getattr(client, method)()

            assert isinstance(resp.result[0], model)
            assert resp.result[0].id == 1

    @pytest.mark.asyncio
    async def test_params_passed_through(self, client):
        params = LaunchParamsBuilder().limit(3).build()

        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = {"valid_auth": True, "result": []}

            await client.launches(params)

            mock_request.assert_called_once_with("launches", params)

    @pytest.mark.asyncio
    async def test_caller_selected_model_not_cross_checked(self, client):
        """Should decode launch JSON into whichever type the caller asks for."""
        mock_response = {
            "valid_auth": True,
            "result": [{"id": 7, "name": "Crew-7", "launch_description": "..."}],
        }

        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = mock_response

            resp = await client.launches(model=Mission)

            assert isinstance(resp.result[0], Mission)
            assert resp.result[0].name == "Crew-7"
            assert resp.result[0].description is None

    @pytest.mark.asyncio
    async def test_raw_dict_model(self, client):
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = {"valid_auth": True, "result": [{"anything": 1}]}

            resp = await client.fetch("tags", model=dict)

            assert resp.result == [{"anything": 1}]

    @pytest.mark.asyncio
    async def test_invalid_auth_returned_as_data(self, client, caplog):
        """Should not raise when the key is rejected."""
        mock_response = {"errors": ["Invalid API Key"], "valid_auth": False}

        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = mock_response

            with caplog.at_level(logging.WARNING, logger="rocket_launch_live.client"):
                resp = await client.launches()

        assert isinstance(resp, Response)
        assert resp.valid_auth is False
        assert resp.errors == ["Invalid API Key"]
        assert resp.result == []
        assert "API key rejected" in caplog.text

    @pytest.mark.asyncio
    async def test_unexpected_shape_raises(self, client):
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = ["not", "an", "envelope"]

            with pytest.raises(RocketLaunchLiveError) as exc_info:
                await client.tags()

        assert exc_info.value.endpoint == "tags"
        assert exc_info.value.__cause__ is not None

    @pytest.mark.asyncio
    async def test_unknown_endpoint(self, client):
        with pytest.raises(ValueError, match="Unknown endpoint"):
            await client.fetch("rockets")


class TestErrors:
    """Tests for transport and decode failures."""

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        recorder = Recorder(status_code=500, json={"message": "boom"})
        async with mock_http_client(recorder) as http_client:
            client = RocketLaunchLive(api_key="k", http_client=http_client)

            with pytest.raises(RocketLaunchLiveError, match="HTTP 500") as exc_info:
                await client.launches()

        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    @pytest.mark.asyncio
    async def test_client_error_status_not_retried(self):
        recorder = Recorder(status_code=401, json={"message": "unauthorized"})
        async with mock_http_client(recorder) as http_client:
            client = RocketLaunchLive(api_key="k", http_client=http_client)

            with pytest.raises(RocketLaunchLiveError):
                await client.pads()

        assert len(recorder.requests) == 1

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        async with mock_http_client(handler) as http_client:
            client = RocketLaunchLive(api_key="k", http_client=http_client)

            with pytest.raises(RocketLaunchLiveError) as exc_info:
                await client.companies()

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_invalid_json_body(self):
        recorder = Recorder(content=b"<html>maintenance</html>")
        async with mock_http_client(recorder) as http_client:
            client = RocketLaunchLive(api_key="k", http_client=http_client)

            with pytest.raises(RocketLaunchLiveError, match="not valid JSON"):
                await client.missions()

    @pytest.mark.asyncio
    async def test_error_is_logged(self, caplog):
        recorder = Recorder(status_code=503, json={})
        async with mock_http_client(recorder) as http_client:
            client = RocketLaunchLive(api_key="k", http_client=http_client)

            with caplog.at_level(logging.ERROR, logger="rocket_launch_live.client"):
                with pytest.raises(RocketLaunchLiveError):
                    await client.tags()

        assert "tags: HTTP 503" in caplog.text

    @pytest.mark.asyncio
    async def test_injected_client_left_open(self):
        recorder = Recorder()
        http_client = mock_http_client(recorder)
        client = RocketLaunchLive(api_key="k", http_client=http_client)

        await client.tags()
        await client.tags()

        assert not http_client.is_closed
        assert len(recorder.requests) == 2
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_per_request_client_when_none_injected(self):
        client = RocketLaunchLive(api_key="k")
        recorder = Recorder()
        real_async_client = httpx.AsyncClient

        def factory(*args, **kwargs):
            return real_async_client(transport=httpx.MockTransport(recorder))

        with patch("rocket_launch_live.client.httpx.AsyncClient", side_effect=factory):
            resp = await client.tags()

        assert resp.valid_auth is True
        assert len(recorder.requests) == 1
