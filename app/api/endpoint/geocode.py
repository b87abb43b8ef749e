import logging

import httpx
from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_http_client, get_settings
from app.api.function.common import error_response
from app.core.config import Settings
from app.core.errors import ErrorKind, Failure
from app.schemas.geocode_schema import GeocodeResult
from app.services.geocode_service import geocode

logger = logging.getLogger(__name__)
router = APIRouter()

# 지오코딩 실패는 모두 400
GEOCODE_STATUS = {
    ErrorKind.PLACE_NOT_FOUND: 400,
    ErrorKind.GEOCODING_SERVICE_UNAVAILABLE: 400,
}


@router.get("/geocode", response_model=GeocodeResult)
async def get_geocode(
    q: str | None = Query(None, description="장소명"),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    query = (q or "").strip()
    if not query:
        return error_response(Failure(kind=ErrorKind.MISSING_PARAMETER, message="q required"))

    try:
        result = await geocode(client, settings, query)
    except Exception:
        logger.exception(f"Unexpected geocoding failure for '{query}'")
        return error_response(Failure(kind=ErrorKind.UNEXPECTED_ERROR, message="Server error"))

    if isinstance(result, Failure):
        return error_response(result, GEOCODE_STATUS)
    return result
