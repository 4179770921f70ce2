# catalog/api/deps.py
from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from catalog.core.config import Settings
from catalog.domain.repositories.product_repo import ProductRepo
from catalog.domain.services.image_store import CloudinaryImageStore
from catalog.domain.services.product_svc import ProductService

# Clients live on app.state (set up in lifespan); tests swap these
# providers through app.dependency_overrides.

def settings_dep(request: Request) -> Settings:
    return request.app.state.settings

def mongo_db(request: Request) -> AsyncIOMotorDatabase:
    return request.app.state.db

def image_store_dep(request: Request) -> CloudinaryImageStore:
    return request.app.state.image_store

def product_repo(db: AsyncIOMotorDatabase = Depends(mongo_db)) -> ProductRepo:
    return ProductRepo(db)

def product_service(repo: ProductRepo = Depends(product_repo)) -> ProductService:
    return ProductService(repo)
