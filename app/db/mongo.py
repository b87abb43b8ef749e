import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from app.core.config import Settings

logger = logging.getLogger(__name__)


async def connect_to_mongo(settings: Settings) -> tuple[Optional[AsyncIOMotorClient], Optional[AsyncIOMotorCollection]]:
    """MONGO_URI 가 없거나 연결에 실패하면 (None, None): 저장 기능만 비활성화"""
    if not settings.MONGO_URI:
        logger.info("MONGO_URI not set, saved routes disabled")
        return None, None

    client = AsyncIOMotorClient(settings.MONGO_URI)
    try:
        await client.admin.command("ping")
        collection = client[settings.MONGO_DB_NAME][settings.MONGO_COLLECTION]
        # 최신순 목록 조회용 인덱스
        await collection.create_index([("createdAt", -1)])
    except PyMongoError as exc:
        logger.error(f"MongoDB connect error: {exc}")
        client.close()
        return None, None

    logger.info("✅ MongoDB connected")
    return client, collection


async def close_mongo_connection(client: Optional[AsyncIOMotorClient]):
    if client:
        client.close()
        logger.info("✅ MongoDB connection closed")
