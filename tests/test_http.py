import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest
from aiohttp import test_utils, web

from ngo_nearby.core.config import ProviderConfig
from ngo_nearby.core.exceptions import ServiceError
from ngo_nearby.core.http import JsonHttpClient
from ngo_nearby.geocoding import MapboxGeocoder
from ngo_nearby.models import Coordinate


def fake_session(status=200, payload=None, json_error=None, text=""):
    response = MagicMock()
    response.status = status
    if json_error is not None:
        response.json = AsyncMock(side_effect=json_error)
    else:
        response.json = AsyncMock(return_value=payload)
    response.text = AsyncMock(return_value=text)

    session = MagicMock()
    session.get.return_value.__aenter__.return_value = response
    session.get.return_value.__aexit__.return_value = False
    return session


@pytest.mark.asyncio
async def test_get_json_adds_token_and_joins_url(provider_config):
    session = fake_session(payload={"features": []})
    http = JsonHttpClient(provider_config, session=session)

    data = await http.get_json("restaurant.json", {"limit": 5})

    assert data == {"features": []}
    url = session.get.call_args.args[0]
    params = session.get.call_args.kwargs["params"]
    assert url == "https://example.test/geocode/restaurant.json"
    assert params == {"access_token": "pk.test", "limit": 5}


@pytest.mark.asyncio
async def test_non_2xx_is_service_error(provider_config):
    http = JsonHttpClient(provider_config, session=fake_session(status=401, text="Not Authorized"))

    with pytest.raises(ServiceError) as exc_info:
        await http.get_json("x.json")

    assert "HTTP 401" in str(exc_info.value)
    assert exc_info.value.provider == "mapbox"


@pytest.mark.asyncio
async def test_malformed_json_is_service_error(provider_config):
    error = json.JSONDecodeError("Expecting value", "<html>", 0)
    http = JsonHttpClient(provider_config, session=fake_session(json_error=error))

    with pytest.raises(ServiceError, match="Malformed JSON"):
        await http.get_json("x.json")


@pytest.mark.asyncio
async def test_non_object_json_is_service_error(provider_config):
    http = JsonHttpClient(provider_config, session=fake_session(payload=["not", "an", "object"]))

    with pytest.raises(ServiceError, match="Expected a JSON object"):
        await http.get_json("x.json")


@pytest.mark.asyncio
async def test_connection_error_is_service_error(provider_config):
    session = MagicMock()
    session.get.side_effect = aiohttp.ClientConnectionError("connection refused")
    http = JsonHttpClient(provider_config, session=session)

    with pytest.raises(ServiceError, match="Request failed"):
        await http.get_json("x.json")


@pytest.mark.asyncio
async def test_timeout_is_service_error(provider_config):
    session = MagicMock()
    session.get.side_effect = asyncio.TimeoutError()
    http = JsonHttpClient(provider_config, session=session)

    with pytest.raises(ServiceError, match="Timeout"):
        await http.get_json("x.json")


def provider_app() -> web.Application:
    """Serves the provider responses that are awkward to fake with mocks."""

    async def bad_gateway(request):
        return web.Response(status=502, body=b"Bad gateway \xff\xfe")

    async def empty(request):
        return web.Response(status=200, body=b"")

    async def html(request):
        return web.Response(status=200, text="<html>maintenance</html>", content_type="text/html")

    async def found(request):
        return web.json_response({"features": [{"center": [10.0, 20.0]}]})

    app = web.Application()
    app.router.add_get("/bad-gateway/{query}", bad_gateway)
    app.router.add_get("/empty/{query}", empty)
    app.router.add_get("/html/{query}", html)
    app.router.add_get("/found/{query}", found)
    return app


def server_config(server: test_utils.TestServer, prefix: str) -> ProviderConfig:
    return ProviderConfig(access_token="pk.test", base_url=str(server.make_url(f"/{prefix}")), timeout=5.0)


@pytest.mark.asyncio
async def test_undecodable_error_body_is_service_error():
    async with test_utils.TestServer(provider_app()) as server:
        http = JsonHttpClient(server_config(server, "bad-gateway"))

        with pytest.raises(ServiceError, match="HTTP 502"):
            await http.get_json("x.json")


@pytest.mark.asyncio
async def test_geocode_absorbs_undecodable_error_body():
    async with test_utils.TestServer(provider_app()) as server:
        geocoder = MapboxGeocoder(server_config(server, "bad-gateway"))

        assert await geocoder.geocode("123 Main St, Springfield") is None


@pytest.mark.asyncio
async def test_empty_body_is_service_error():
    async with test_utils.TestServer(provider_app()) as server:
        http = JsonHttpClient(server_config(server, "empty"))

        with pytest.raises(ServiceError):
            await http.get_json("x.json")


@pytest.mark.asyncio
async def test_html_body_is_service_error():
    async with test_utils.TestServer(provider_app()) as server:
        http = JsonHttpClient(server_config(server, "html"))

        with pytest.raises(ServiceError, match="Malformed JSON"):
            await http.get_json("x.json")


@pytest.mark.asyncio
async def test_real_response_round_trip():
    async with test_utils.TestServer(provider_app()) as server:
        async with aiohttp.ClientSession() as session:
            geocoder = MapboxGeocoder(server_config(server, "found"), session=session)

            assert await geocoder.resolve("123 Main St, Springfield") == Coordinate(lng=10.0, lat=20.0)
