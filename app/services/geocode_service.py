import logging

import httpx

from app.core.config import Settings
from app.core.errors import ErrorKind, Failure
from app.schemas.geocode_schema import GeocodeResult

logger = logging.getLogger(__name__)


async def geocode(client: httpx.AsyncClient, settings: Settings, query: str) -> GeocodeResult | Failure:
    # Nominatim usage policy requires an identifying User-Agent
    headers = {"User-Agent": settings.geocode_user_agent}
    params = {
        "q": query,
        "format": "json",
        "limit": 1,
        "addressdetails": 1,
    }

    try:
        resp = await client.get(settings.geocode_url, headers=headers, params=params)
    except httpx.RequestError as exc:
        logger.warning(f"Geocoding request failed for '{query}': {exc!r}")
        return Failure(kind=ErrorKind.GEOCODING_SERVICE_UNAVAILABLE, message="Geocoding service error")

    if resp.status_code != 200:
        logger.warning(f"Geocoding service returned {resp.status_code} for '{query}'")
        return Failure(kind=ErrorKind.GEOCODING_SERVICE_UNAVAILABLE, message="Geocoding service error")

    try:
        data = resp.json()
    except ValueError:
        logger.warning(f"Geocoding service returned a non-JSON body for '{query}'")
        return Failure(kind=ErrorKind.GEOCODING_SERVICE_UNAVAILABLE, message="Geocoding service error")

    if not isinstance(data, list):
        logger.warning(f"Geocoding service returned an unexpected body for '{query}': {data!r}")
        return Failure(kind=ErrorKind.GEOCODING_SERVICE_UNAVAILABLE, message="Geocoding service error")
    if not data:
        return Failure(kind=ErrorKind.PLACE_NOT_FOUND, message=f"Place not found: {query}")

    first = data[0]
    try:
        return GeocodeResult(
            lat=float(first["lat"]),
            lon=float(first["lon"]),
            display_name=first.get("display_name", ""),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        logger.warning(f"Geocoding service returned a malformed result for '{query}': {exc!r}")
        return Failure(kind=ErrorKind.GEOCODING_SERVICE_UNAVAILABLE, message="Geocoding service error")

