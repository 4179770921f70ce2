"""CloudinaryImageStore call shape (SDK patched, no network)."""
import io
from unittest.mock import patch

import pytest

from catalog.core.config import Settings
from catalog.domain.services.image_store import CloudinaryImageStore


@pytest.fixture
def settings():
    return Settings(
        MONGO_URI="mongodb://localhost:27017",
        CLOUDINARY_CLOUD_NAME="demo",
        CLOUDINARY_API_KEY="k",
        CLOUDINARY_API_SECRET="s",
    )


@pytest.mark.asyncio
async def test_upload_returns_secure_url(settings):
    store = CloudinaryImageStore(settings)
    buf = io.BytesIO(b"\xff\xd8\xff\xd9")
    with patch("catalog.domain.services.image_store.cloudinary.uploader.upload") as upload:
        upload.return_value = {"secure_url": "https://res.cloudinary.com/demo/image/upload/products/a.jpg"}
        url = await store.upload(buf, "a.jpg")

    assert url == "https://res.cloudinary.com/demo/image/upload/products/a.jpg"
    upload.assert_called_once_with(
        buf,
        folder="products",
        allowed_formats=["jpg", "png", "jpeg"],
        resource_type="image",
        cloud_name="demo",
        api_key="k",
        api_secret="s",
    )


@pytest.mark.asyncio
async def test_sdk_error_propagates(settings):
    store = CloudinaryImageStore(settings)
    with patch("catalog.domain.services.image_store.cloudinary.uploader.upload", side_effect=RuntimeError("Invalid image file")):
        with pytest.raises(RuntimeError, match="Invalid image file"):
            await store.upload(io.BytesIO(b"x"), "a.jpg")
