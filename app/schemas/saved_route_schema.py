from pydantic import BaseModel, Field
from datetime import datetime, timezone
from typing import Any, Optional, Dict

DEFAULT_ROUTE_NAME = "Unnamed"


class SaveRouteRequest(BaseModel):
    name: Optional[str] = None
    geo: Optional[Dict[str, Any]] = None


class SavedRouteSchema(BaseModel):
    name: str = DEFAULT_ROUTE_NAME
    geo: Dict[str, Any]
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class SavedRouteResponse(SavedRouteSchema):
    id: str


class SaveRouteResult(BaseModel):
    ok: bool = True
    id: str
    message: str = "Saved"
