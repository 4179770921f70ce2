# catalog/domain/services/image_store.py
from __future__ import annotations
from typing import BinaryIO, List
import logging

import cloudinary.uploader
from fastapi.concurrency import run_in_threadpool

from catalog.core.config import Settings

logger = logging.getLogger(__name__)


class CloudinaryImageStore:
    """
    Image store client for Cloudinary.
    Credentials travel with each call (no global cloudinary.config), so
    several stores with different accounts can coexist.
    """

    def __init__(self, settings: Settings):
        self.folder = settings.upload_folder
        self.allowed_formats: List[str] = list(settings.allowed_image_formats)
        self._credentials = {
            "cloud_name": settings.CLOUDINARY_CLOUD_NAME,
            "api_key": settings.CLOUDINARY_API_KEY,
            "api_secret": settings.CLOUDINARY_API_SECRET,
        }

    async def upload(self, file: BinaryIO, filename: str) -> str:
        """Upload one file into the products folder and return its https URL."""
        # the SDK is blocking (requests/urllib3), keep it off the event loop
        result = await run_in_threadpool(
            cloudinary.uploader.upload,
            file,
            folder=self.folder,
            allowed_formats=self.allowed_formats,
            resource_type="image",
            **self._credentials,
        )
        url = result["secure_url"]
        logger.debug("Uploaded %s -> %s", filename, url)
        return url
