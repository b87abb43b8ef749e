import math
import re

import httpx

from app.core.config import Settings
from app.core.errors import ErrorKind, Failure
from app.schemas.route_schema import Coordinate, format_number
from app.services.geocode_service import geocode

COORDINATE_PATTERN = re.compile(r"-?\d+\.?\d*,-?\d+\.?\d*", re.ASCII)


def is_coordinate_string(text: str) -> bool:
    """Syntactic "lat,lon" check only; numeric ranges are left to the routing backend."""
    return COORDINATE_PATTERN.fullmatch(text.strip()) is not None


def parse_coordinate(text: str) -> Coordinate | Failure:
    parts = text.split(",")
    if len(parts) != 2:
        return Failure(kind=ErrorKind.INVALID_COORDINATE_FORMAT, message=f"Invalid coordinate format: {text}")
    try:
        lat, lon = (float(part.strip()) for part in parts)
    except ValueError:
        return Failure(kind=ErrorKind.INVALID_COORDINATE_FORMAT, message=f"Invalid coordinate format: {text}")
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return Failure(kind=ErrorKind.INVALID_COORDINATE_FORMAT, message=f"Invalid coordinate format: {text}")
    return Coordinate(latitude=lat, longitude=lon)


async def resolve_location(client: httpx.AsyncClient, settings: Settings, text: str) -> str | Failure:
    """
    사용자 입력(좌표 또는 장소명)을 라우팅용 "lon,lat" 문자열로 변환
    Args:
      text: "lat,lon" 좌표 문자열 또는 장소명
    Returns:
      "lon,lat" 문자열, 실패 시 Failure
    """
    text = text.strip()
    if is_coordinate_string(text):
        result = parse_coordinate(text)
        if isinstance(result, Failure):
            return result
        return result.to_lon_lat()

    result = await geocode(client, settings, text)
    if isinstance(result, Failure):
        return result
    return f"{format_number(result.lon)},{format_number(result.lat)}"
