# catalog/db/mongo.py
import logging

import certifi
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from catalog.core.config import Settings

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> AsyncIOMotorClient:
    """
    Build a Motor client from settings. Motor connects lazily, so this
    never blocks; the first command opens the connection pool.
    SRV (Atlas) URIs get the certifi CA bundle, plain URIs are left alone.
    """
    options = {
        "uuidRepresentation": "standard",
        "serverSelectionTimeoutMS": settings.mongo_timeout_ms,
        "connectTimeoutMS": settings.mongo_timeout_ms,
    }
    if settings.MONGO_URI.startswith("mongodb+srv://"):
        options["tlsCAFile"] = certifi.where()
    return AsyncIOMotorClient(settings.MONGO_URI, **options)


def resolve_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    if settings.MONGO_DB:
        return client[settings.MONGO_DB]
    return client.get_default_database(default=settings.mongo_default_db)


async def ping(db: AsyncIOMotorDatabase) -> bool:
    """Soft check: log and return False instead of raising."""
    try:
        await db.command("ping")
        return True
    except Exception as e:
        logger.warning("Mongo ping failed: %s", e)
        return False
