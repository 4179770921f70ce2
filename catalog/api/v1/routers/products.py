# catalog/api/v1/routers/products.py
from fastapi import APIRouter, Depends, Form, Request
from typing import List, Optional
import time
import logging

from catalog.api.deps import product_service
from catalog.api.uploads import uploaded_image_urls
from catalog.api.v1.schemas.product import ErrorOut, MessageOut
from catalog.domain.models.product import Product, ProductCreate
from catalog.domain.errors import ValidationError
from catalog.domain.services.product_svc import ProductService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])

ERROR_RESPONSES = {500: {"model": ErrorOut}}


async def _json_body(request: Request) -> dict:
    try:
        payload = await request.json()
    except ValueError:
        raise ValidationError("Request body is not valid JSON.") from None
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object.")
    return payload


@router.get("/products", response_model=List[Product], responses=ERROR_RESPONSES)
async def list_products(svc: ProductService = Depends(product_service)):
    """All products, in the store's natural order (no sort, no paging)."""
    start_time = time.perf_counter()
    products = await svc.list_products()
    logger.info("Response: list_products count=%d elapsed_time=%.4fs", len(products), time.perf_counter() - start_time)
    return products


@router.post(
    "/products",
    status_code=201,
    response_model=Product,
    responses={400: {"model": ErrorOut}, 409: {"model": ErrorOut}, **ERROR_RESPONSES},
    summary="Create a product: multipart form with up to 10 images, or a JSON object without images",
)
async def create_product(
    request: Request,
    # declared first: files are uploaded before the form is validated
    image_urls: List[str] = Depends(uploaded_image_urls),
    name: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    brand: Optional[str] = Form(None),
    availability: Optional[str] = Form(None),
    svc: ProductService = Depends(product_service),
):
    if request.headers.get("content-type", "").startswith("application/json"):
        # JSON creates carry no files; the form fields above are all empty
        data = ProductCreate.from_json(await _json_body(request))
    else:
        data = ProductCreate.from_form(
            name=name,
            price=price,
            description=description,
            category=category,
            brand=brand,
            availability=availability,
        )
    logger.info("Request: create_product name=%s images=%d", data.name, len(image_urls))
    return await svc.create_product(data, image_urls)


@router.delete("/products/{product_id}", response_model=MessageOut, responses=ERROR_RESPONSES)
async def delete_product(product_id: str, svc: ProductService = Depends(product_service)):
    """Unconditional delete: an unknown id gets the same answer as a real one."""
    logger.info("Request: delete_product product_id=%s", product_id)
    await svc.delete_product(product_id)
    return MessageOut(message="Product deleted")
