# catalog/domain/repositories/product_repo.py

from __future__ import annotations
from typing import List, Optional
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from catalog.domain.models.product import Product

class ProductRepo:
    """
    Product repository backed by the 'products' collection.
    Documents keep the camelCase layout: {_id, name, price, description,
    imageUrls, category, brand, availability}.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "products"):
        self.col = db[collection_name]

    async def list_all(self) -> List[Product]:
        # natural (scan) order, no sort
        return [Product.from_document(doc) async for doc in self.col.find({})]

    async def find_by_name(self, name: str) -> Optional[Product]:
        doc = await self.col.find_one({"name": name})
        return Product.from_document(doc) if doc else None

    async def insert(self, doc: dict) -> Product:
        doc = dict(doc)
        res = await self.col.insert_one(doc)
        doc["_id"] = res.inserted_id
        return Product.from_document(doc)

    async def delete_by_id(self, product_id: str) -> int:
        """
        Delete by ObjectId string. Returns the deleted count (0 or 1).
        Raises bson.errors.InvalidId for a malformed id.
        """
        res = await self.col.delete_one({"_id": ObjectId(product_id)})
        return res.deleted_count
