import logging
from typing import Any, Optional, Dict

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from app.core.errors import ErrorKind, Failure
from app.repositories import routedb
from app.schemas.saved_route_schema import DEFAULT_ROUTE_NAME, SavedRouteResponse, SavedRouteSchema

logger = logging.getLogger(__name__)


class RouteStore:
    """
    Saved route gateway over an optional MongoDB collection.

    Built once at startup. With no collection the store is disabled:
    listing returns an empty list and saving returns PersistenceUnavailable.
    """

    def __init__(self, collection: Optional[AsyncIOMotorCollection] = None, list_limit: int = 50):
        self.collection = collection
        self.list_limit = list_limit

    @property
    def enabled(self) -> bool:
        return self.collection is not None

    async def save_route(self, name: Optional[str], geo: Dict[str, Any]) -> str | Failure:
        if not self.enabled:
            return Failure(kind=ErrorKind.PERSISTENCE_UNAVAILABLE, message="MongoDB not configured")

        route = SavedRouteSchema(name=name or DEFAULT_ROUTE_NAME, geo=geo)
        try:
            return await routedb.insert_route(self.collection, route)
        except PyMongoError as exc:
            logger.error(f"Failed to save route '{route.name}': {exc}")
            return Failure(kind=ErrorKind.PERSISTENCE_WRITE_FAILED, message="Save failed")

    async def list_routes(self, limit: Optional[int] = None) -> list[SavedRouteResponse]:
        if not self.enabled:
            return []

        docs = await routedb.get_route_list(self.collection, limit or self.list_limit)
        return [
            SavedRouteResponse(
                id=str(doc["_id"]),
                name=doc.get("name", DEFAULT_ROUTE_NAME),
                geo=doc.get("geo", {}),
                createdAt=doc["createdAt"],
            )
            for doc in docs
        ]
