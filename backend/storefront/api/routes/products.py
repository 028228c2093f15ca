"""Product Routes — total price, listing, and creation of products.

Invariants:
    - One request-scoped AsyncSession per request (get_db), closed on every exit path
    - Responses are built while the session is open; streams never outlive the request
    - total-price exposes ProductService.get_total_price() unchanged
    - Read routes record their price threshold on request.state for error logging

Design Decisions:
    - Repository built per request from the session: no shared state across calls
"""

import logging

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain_types import PRICE_THRESHOLD, Price
from storefront.infrastructure.database import get_db
from storefront.infrastructure.product_repository import SqlProductRepository
from storefront.schemas.product import (
    ProductCreate, ProductCreated, ProductResponse, TotalPriceResponse,
)
from storefront.services.product_service import ProductService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/products", tags=["products"])


def get_product_service(db: AsyncSession = Depends(get_db)) -> ProductService:
    return ProductService(SqlProductRepository(db))


@router.get("/total-price", response_model=TotalPriceResponse)
async def get_total_price(
    request: Request,
    service: ProductService = Depends(get_product_service),
):
    """Sum of prices of all products priced above zero."""
    request.state.threshold = PRICE_THRESHOLD
    total = await service.get_total_price()
    return TotalPriceResponse(total_price=total)


@router.get("", response_model=list[ProductResponse])
async def list_products(
    request: Request,
    price_gt: int = Query(PRICE_THRESHOLD),
    service: ProductService = Depends(get_product_service),
):
    """List products priced strictly above price_gt (unordered)."""
    request.state.threshold = price_gt
    products = await service.find_priced_above(Price(price_gt))
    listed = [ProductResponse.model_validate(p) async for p in products]
    logger.info(
        "Products listed",
        extra={"threshold": price_gt, "product_count": len(listed)},
    )
    return listed


@router.post(
    "", response_model=ProductCreated,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductCreate,
    service: ProductService = Depends(get_product_service),
):
    """Create a product."""
    product_id = await service.create_product(body.name, Price(body.price))
    logger.info("Product created", extra={"product_id": product_id})
    return ProductCreated(id=product_id)
