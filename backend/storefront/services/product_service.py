"""Product Service — totals and creation of catalogue products.

Invariants:
    - get_total_price() only counts products priced strictly above PRICE_THRESHOLD (0)
    - Either the full total is returned or the error propagates; never a partial sum
    - Exactly one repository query per call

Design Decisions:
    - Threshold fixed internally: callers cannot widen the total
"""

import logging

from storefront.core.domain_types import PRICE_THRESHOLD, Price, ProductId
from storefront.core.products import Products
from storefront.core.repository_protocols import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """Orchestrates product queries and the total-price aggregate."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def get_total_price(self) -> int:
        products = await self._repository.find_by_price_greater_than(
            PRICE_THRESHOLD,
        )
        total = await products.total_price()
        logger.info(
            "Total price computed",
            extra={"threshold": PRICE_THRESHOLD, "total_price": total},
        )
        return total

    async def find_priced_above(self, price: Price) -> Products:
        return await self._repository.find_by_price_greater_than(price)

    async def create_product(self, name: str, price: Price) -> ProductId:
        return await self._repository.save(name, price)
