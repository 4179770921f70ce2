"""In-memory stand-ins for ProductRepo and CloudinaryImageStore."""
import asyncio
from typing import List

from bson import ObjectId

from catalog.domain.models.product import Product


class InMemoryProductRepo:
    """Same surface as ProductRepo, backed by a dict keyed by ObjectId."""

    def __init__(self):
        self.docs = {}

    async def list_all(self) -> List[Product]:
        return [Product.from_document(d) for d in self.docs.values()]

    async def find_by_name(self, name: str):
        for d in self.docs.values():
            if d["name"] == name:
                return Product.from_document(d)
        return None

    async def insert(self, doc: dict) -> Product:
        stored = {**doc, "_id": ObjectId()}
        self.docs[stored["_id"]] = stored
        return Product.from_document(stored)

    async def delete_by_id(self, product_id: str) -> int:
        return 1 if self.docs.pop(ObjectId(product_id), None) else 0


class BrokenProductRepo(InMemoryProductRepo):
    async def list_all(self):
        raise ConnectionError("connection refused")

    async def insert(self, doc):
        raise ConnectionError("write failed")


class FakeImageStore:
    """Records every upload and hands back a predictable URL."""

    def __init__(self, fail_after: int = -1):
        self.uploaded: List[str] = []
        self.fail_after = fail_after

    async def upload(self, file, filename: str) -> str:
        if len(self.uploaded) == self.fail_after:
            raise RuntimeError("Upload rejected by image host")
        file.read()
        self.uploaded.append(filename)
        return f"https://res.cloudinary.com/test-cloud/image/upload/products/{filename}"



class InterleavedLookupRepo(InMemoryProductRepo):
    """
    Holds every name lookup until `parties` lookups are in flight, so
    concurrent creates all check before any of them inserts.
    """

    def __init__(self, parties: int = 2):
        super().__init__()
        self.parties = parties
        self.waiting = 0
        self.all_checked = asyncio.Event()

    async def find_by_name(self, name: str):
        found = await super().find_by_name(name)
        self.waiting += 1
        if self.waiting >= self.parties:
            self.all_checked.set()
        await asyncio.wait_for(self.all_checked.wait(), timeout=2)
        return found
