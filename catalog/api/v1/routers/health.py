# catalog/api/v1/routers/health.py
import time
import subprocess
from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from catalog.api.deps import mongo_db, settings_dep
from catalog.core.config import Settings
from catalog.db import mongo

router = APIRouter(tags=["health"])
START_TIME = time.time()


def _git_sha(short: bool = True) -> str:
    try:
        cmd = ["git", "rev-parse", "--short" if short else "HEAD"]
        return subprocess.check_output(cmd, stderr=subprocess.DEVNULL).decode().strip()
    except (OSError, subprocess.CalledProcessError):
        return "unknown"


# resolved once at import; /health never shells out
GIT_SHA_FALLBACK = _git_sha()


@router.get("/health")
async def health(
    settings: Settings = Depends(settings_dep),
    db: AsyncIOMotorDatabase = Depends(mongo_db),
):
    """
    Tolerant health check:
    - ping Mongo
    - report whether Cloudinary credentials are set (no network call)
    """
    checks: dict[str, object] = {
        "app_name": settings.APP_NAME,
        "env": settings.APP_ENV,
        "debug": settings.DEBUG,
        "version": settings.GIT_SHA if settings.GIT_SHA != "unknown" else GIT_SHA_FALLBACK,
        "uptime_seconds": int(time.time() - START_TIME),
        "mongodb": "ok" if await mongo.ping(db) else "error",
        "cloudinary_configured": settings.image_store_configured,
    }
    status = "ok" if checks["mongodb"] == "ok" and checks["cloudinary_configured"] else "error"
    return {"status": status, "checks": checks, "timestamp": int(time.time())}
