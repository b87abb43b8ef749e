from motor.motor_asyncio import AsyncIOMotorCollection
from app.schemas.saved_route_schema import SavedRouteSchema


async def insert_route(collection: AsyncIOMotorCollection, route: SavedRouteSchema) -> str:
    result = await collection.insert_one(route.model_dump())
    return str(result.inserted_id)

async def get_route_list(collection: AsyncIOMotorCollection, limit: int = 50) -> list[dict]:
    cursor = collection.find({}).sort("createdAt", -1).limit(limit)
    return await cursor.to_list(length=limit)
