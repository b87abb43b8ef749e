from fastapi import APIRouter

from app.api.endpoint import geocode, route


api_router = APIRouter()

api_router.include_router(
  geocode.router,
  tags=["geocode"]
)

api_router.include_router(
  route.router,
  tags=["route"]
)
