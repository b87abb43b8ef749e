import asyncio

import httpx

from app.core.errors import ErrorKind, Failure
from app.schemas.geocode_schema import GeocodeResult
from app.services.geocode_service import geocode


def test_geocode_returns_first_match(http_client, test_settings, upstream):
    upstream.places["Berlin"] = [
        {"lat": "52.5170365", "lon": "13.3888599", "display_name": "Berlin, Deutschland"},
        {"lat": "0", "lon": "0", "display_name": "ignored"},
    ]

    result = asyncio.run(geocode(http_client, test_settings, "Berlin"))

    assert result == GeocodeResult(lat=52.5170365, lon=13.3888599, display_name="Berlin, Deutschland")


def test_geocode_request_shape(http_client, test_settings, upstream):
    asyncio.run(geocode(http_client, test_settings, "Berlin"))

    request = upstream.requests[0]
    assert request.headers["User-Agent"] == "easymap-tests"
    assert request.url.params["q"] == "Berlin"
    assert request.url.params["limit"] == "1"
    assert request.url.params["addressdetails"] == "1"
    assert request.url.params["format"] == "json"


def test_geocode_no_results(http_client, test_settings):
    result = asyncio.run(geocode(http_client, test_settings, "NowhereTownXYZ"))

    assert isinstance(result, Failure)
    assert result.kind == ErrorKind.PLACE_NOT_FOUND
    assert "NowhereTownXYZ" in result.message


def test_geocode_upstream_error(http_client, test_settings, upstream):
    upstream.geocode_status = 503

    result = asyncio.run(geocode(http_client, test_settings, "Berlin"))

    assert result.kind == ErrorKind.GEOCODING_SERVICE_UNAVAILABLE


def test_geocode_transport_error(test_settings):
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    result = asyncio.run(geocode(client, test_settings, "Berlin"))

    assert result.kind == ErrorKind.GEOCODING_SERVICE_UNAVAILABLE


def test_geocode_unexpected_body(http_client, test_settings, upstream):
    upstream.geocode_body = {"error": "Unable to geocode"}

    result = asyncio.run(geocode(http_client, test_settings, "Berlin"))

    assert result.kind == ErrorKind.GEOCODING_SERVICE_UNAVAILABLE


def test_geocode_result_without_coordinates(http_client, test_settings, upstream):
    upstream.places["Berlin"] = [{"display_name": "Berlin"}]

    result = asyncio.run(geocode(http_client, test_settings, "Berlin"))

    assert result.kind == ErrorKind.GEOCODING_SERVICE_UNAVAILABLE
