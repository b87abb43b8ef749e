import httpx
from fastapi import Request

from app.core.config import Settings, settings
from app.services.saved_route_service import RouteStore


def get_settings() -> Settings:
    return settings

def get_http_client(request: Request) -> httpx.AsyncClient:
    # startup 에서 만든 공용 클라이언트
    return request.app.state.http_client

def get_route_store(request: Request) -> RouteStore:
    return request.app.state.route_store
