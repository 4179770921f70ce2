# catalog/api/uploads.py
"""
Upload step of POST /products.

Runs as a dependency, before the handler body: checks the multipart
"images" field (count cap and jpg/png/jpeg allow-list), then streams each
file to the image store and hands the handler the hosted URLs in request
order. A bad file fails the whole request before anything is uploaded;
an image-store failure mid-way leaves earlier files on the host.
"""
from pathlib import Path
from typing import List
import logging

from fastapi import Depends, File, UploadFile

from catalog.api.deps import image_store_dep, settings_dep
from catalog.core.config import Settings
from catalog.domain.errors import InfrastructureError, ValidationError
from catalog.domain.services.image_store import CloudinaryImageStore

logger = logging.getLogger(__name__)


def _extension(filename: str) -> str:
    return Path(filename).suffix.lower().lstrip(".")


def validate_uploads(files: List[UploadFile], settings: Settings) -> List[UploadFile]:
    # browsers send an empty part when no file is picked
    files = [f for f in files if f.filename]
    if len(files) > settings.max_upload_files:
        raise ValidationError(
            f"Too many files: {len(files)} uploaded, at most {settings.max_upload_files} allowed."
        )
    allowed = {fmt.lower() for fmt in settings.allowed_image_formats}
    for f in files:
        if _extension(f.filename) not in allowed:
            raise ValidationError(
                f"File '{f.filename}' is not an allowed image format. "
                f"Allowed: {', '.join(settings.allowed_image_formats)}"
            )
    return files


async def uploaded_image_urls(
    images: List[UploadFile] = File(default=[]),
    settings: Settings = Depends(settings_dep),
    store: CloudinaryImageStore = Depends(image_store_dep),
) -> List[str]:
    files = validate_uploads(images, settings)
    urls: List[str] = []
    for f in files:
        try:
            urls.append(await store.upload(f.file, f.filename))
        except Exception as e:
            logger.exception("Image upload failed file=%s uploaded_so_far=%d", f.filename, len(urls))
            raise InfrastructureError.wrap(e) from e
    return urls
