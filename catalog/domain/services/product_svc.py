# catalog/domain/services/product_svc.py
from __future__ import annotations
from typing import List
import logging

from catalog.domain.errors import CatalogError, ConflictError, InfrastructureError
from catalog.domain.models.product import Product, ProductCreate
from catalog.domain.repositories.product_repo import ProductRepo

logger = logging.getLogger(__name__)


class ProductService:
    """
    List / create / delete on top of ProductRepo.
    Any failure that is not already a CatalogError comes out as
    InfrastructureError so the route answers 500 with the driver's message.

    Known gaps:
      - the duplicate-name lookup and the insert are not atomic; two
        concurrent creates with the same name can both succeed.
      - images uploaded before a failed create, and images of deleted
        products, stay on the image host.
    """

    def __init__(self, repo: ProductRepo):
        self.repo = repo

    async def list_products(self) -> List[Product]:
        try:
            return await self.repo.list_all()
        except Exception as e:
            logger.exception("list_products failed")
            raise InfrastructureError.wrap(e) from e

    async def create_product(self, data: ProductCreate, image_urls: List[str]) -> Product:
        try:
            if await self.repo.find_by_name(data.name):
                raise ConflictError("A product with this name already exists.")
            product = await self.repo.insert(data.to_document(image_urls))
        except CatalogError:
            raise
        except Exception as e:
            logger.exception("create_product failed name=%s", data.name)
            raise InfrastructureError.wrap(e) from e
        logger.info("Created product id=%s name=%s images=%d", product.id, product.name, len(image_urls))
        return product

    async def delete_product(self, product_id: str) -> None:
        try:
            deleted = await self.repo.delete_by_id(product_id)
        except Exception as e:
            logger.exception("delete_product failed id=%s", product_id)
            raise InfrastructureError.wrap(e) from e
        # deleted == 0 is not an error: the answer is the same either way
        logger.info("Delete product id=%s deleted=%s", product_id, deleted)
