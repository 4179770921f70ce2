"""
Shared fixtures: environment for Settings, in-memory stand-ins for the
Mongo repository and the Cloudinary client, and an HTTPX client wired to
the app through dependency overrides.
"""
import os

# Settings are read when catalog.main is imported; never point tests at real services
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017/catalog_test")
os.environ.setdefault("CLOUDINARY_CLOUD_NAME", "test-cloud")
os.environ.setdefault("CLOUDINARY_API_KEY", "test-key")
os.environ.setdefault("CLOUDINARY_API_SECRET", "test-secret")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tests.fakes import FakeImageStore, InMemoryProductRepo


@pytest.fixture
def repo():
    return InMemoryProductRepo()


@pytest.fixture
def image_store():
    return FakeImageStore()


@pytest.fixture
def app(repo, image_store):
    from catalog.api.deps import image_store_dep, product_repo
    from catalog.main import app as catalog_app

    catalog_app.dependency_overrides[product_repo] = lambda: repo
    catalog_app.dependency_overrides[image_store_dep] = lambda: image_store
    yield catalog_app
    catalog_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    """HTTPX client talking to the ASGI app directly (no lifespan, no sockets)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def jpeg_bytes():
    # SOI + JFIF header + EOI; enough for an upload body
    return (
        b'\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00'
        b'\xff\xd9'
    )
