import logging

import httpx
from fastapi import APIRouter, Depends, Query, Request
from pydantic import ValidationError

from app.api.dependencies import get_http_client, get_route_store, get_settings
from app.api.function.common import error_response
from app.core.config import Settings
from app.core.errors import ErrorKind, Failure
from app.schemas.route_schema import RouteResponse
from app.schemas.saved_route_schema import SaveRouteRequest, SaveRouteResult, SavedRouteResponse
from app.services.route_service import plan_route
from app.services.saved_route_service import RouteStore

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/route", response_model=RouteResponse)
async def get_route(
    start: str | None = Query(None, description="출발지: lat,lon 또는 장소명"),
    end: str | None = Query(None, description="도착지: lat,lon 또는 장소명"),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    try:
        result = await plan_route(client, settings, start, end)
    except Exception:
        logger.exception(f"Unexpected routing failure for start={start!r} end={end!r}")
        return error_response(Failure(kind=ErrorKind.UNEXPECTED_ERROR, message="Server error"))

    if isinstance(result, Failure):
        return error_response(result)
    return result


@router.post("/save-route", response_model=SaveRouteResult)
async def save_route(request: Request, store: RouteStore = Depends(get_route_store)):
    # 저장소 설정 여부를 body 검증보다 먼저 확인
    if not store.enabled:
        return error_response(Failure(kind=ErrorKind.PERSISTENCE_UNAVAILABLE, message="MongoDB not configured"))

    raw = await request.body()
    try:
        req = SaveRouteRequest.model_validate_json(raw) if raw.strip() else SaveRouteRequest()
    except ValidationError:
        return error_response(Failure(kind=ErrorKind.MISSING_PARAMETER, message="Invalid request body"))
    if req.geo is None:
        return error_response(Failure(kind=ErrorKind.MISSING_PARAMETER, message="geo required"))

    result = await store.save_route(req.name, req.geo)
    if isinstance(result, Failure):
        return error_response(result)
    return SaveRouteResult(id=result)


@router.get("/routes", response_model=list[SavedRouteResponse])
async def get_routes(store: RouteStore = Depends(get_route_store)):
    try:
        return await store.list_routes()
    except Exception:
        logger.exception("Failed to list saved routes")
        return error_response(Failure(kind=ErrorKind.UNEXPECTED_ERROR, message="Server error"))
