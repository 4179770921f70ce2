# catalog/core/lifespan.py
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from catalog.db import mongo
from catalog.domain.services.image_store import CloudinaryImageStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings

    # --- Startup ---
    client = mongo.create_client(settings)
    app.state.mongo_client = client
    app.state.db = mongo.resolve_database(client, settings)
    if await mongo.ping(app.state.db):
        logger.info("Mongo connected (db=%s)", app.state.db.name)
    else:
        # keep the lazy client; the first real query reconnects
        logger.warning("Mongo unreachable at startup, will retry on first query")

    app.state.image_store = CloudinaryImageStore(settings)
    if not settings.image_store_configured:
        logger.warning("Cloudinary credentials are incomplete, uploads will fail")

    yield

    # --- Shutdown ---
    client.close()
    logger.info("Mongo disconnected")
