import asyncio
import logging

import httpx
from pydantic import ValidationError

from app.core.config import Settings
from app.core.errors import ErrorKind, Failure
from app.schemas.route_schema import RouteResponse, RouteResult
from app.services.location_service import resolve_location

logger = logging.getLogger(__name__)

OSRM_PARAMS = {
    "overview": "full",
    "geometries": "geojson",
    "alternatives": "false",
    "steps": "false",
}


async def find_route(client: httpx.AsyncClient, settings: Settings, start: str, end: str) -> RouteResult | Failure:
    """start, end 는 OSRM 형식의 "lon,lat" 문자열"""
    url = f"{settings.osrm_base_url}/{start};{end}"

    try:
        resp = await client.get(url, params=OSRM_PARAMS)
    except httpx.RequestError as exc:
        logger.warning(f"Routing request failed for {start};{end}: {exc!r}")
        return Failure(kind=ErrorKind.ROUTING_SERVICE_UNAVAILABLE, message="Routing service error")

    if resp.status_code != 200:
        logger.warning(f"Routing service returned {resp.status_code} for {start};{end}")
        return Failure(kind=ErrorKind.ROUTING_SERVICE_UNAVAILABLE, message="Routing service error")

    try:
        data = resp.json()
    except ValueError:
        logger.warning(f"Routing service returned a non-JSON body for {start};{end}")
        return Failure(kind=ErrorKind.ROUTING_SERVICE_UNAVAILABLE, message="Routing service error")

    if not isinstance(data, dict):
        logger.warning(f"Routing service returned an unexpected body for {start};{end}")
        return Failure(kind=ErrorKind.ROUTING_SERVICE_UNAVAILABLE, message="Routing service error")

    routes = data.get("routes") or []
    if not routes:
        return Failure(kind=ErrorKind.NO_ROUTE_FOUND, message="No route found")

    try:
        route = routes[0]
        return RouteResult(
            distance_meters=route["distance"],
            duration_seconds=route["duration"],
            geometry=route["geometry"],
        )
    except (KeyError, TypeError, IndexError, ValidationError) as exc:
        logger.warning(f"Routing service returned a malformed route for {start};{end}: {exc!r}")
        return Failure(kind=ErrorKind.ROUTING_SERVICE_UNAVAILABLE, message="Routing service error")


async def plan_route(client: httpx.AsyncClient, settings: Settings, start: str | None, end: str | None) -> RouteResponse | Failure:
    start = (start or "").strip()
    end = (end or "").strip()
    if not start or not end:
        return Failure(kind=ErrorKind.MISSING_PARAMETER, message="start and end required")

    tasks = [
        asyncio.ensure_future(resolve_location(client, settings, start)),
        asyncio.ensure_future(resolve_location(client, settings, end)),
    ]
    try:
        start_coords, end_coords = await asyncio.gather(*tasks)
    except Exception:
        # 한쪽이 예외로 끝나면 나머지 조회도 취소
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    # start 쪽 실패를 우선 보고
    for resolved in (start_coords, end_coords):
        if isinstance(resolved, Failure):
            return resolved

    route = await find_route(client, settings, start_coords, end_coords)
    if isinstance(route, Failure):
        return route

    return RouteResponse(
        **route.model_dump(),
        start_coords=start_coords,
        end_coords=end_coords,
    )
