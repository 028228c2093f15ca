"""Product Query — SQLAlchemy-specific filtered query and its streaming result.

Invariants:
    - find_by_price_greater_than issues exactly one SELECT ... WHERE price > :price
    - Rows are streamed from a server-side cursor, never buffered into a list
    - The cursor is closed when iteration finishes, fails, or is closed early
    - No ordering is applied; rows arrive in whatever order the engine returns

Design Decisions:
    - ProductResultStream is the only place that knows about AsyncScalarResult;
      to_products() is the translation point into the domain wrapper
"""

from typing import AsyncIterator

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncScalarResult, AsyncSession

from storefront.core.domain_types import Price
from storefront.core.products import Products
from storefront.models.product import Product


class ProductResultStream:
    """Engine-native product stream, convertible to the Products wrapper."""

    def __init__(self, result: AsyncScalarResult[Product]):
        self._result = result

    def __aiter__(self) -> AsyncIterator[Product]:
        return self._rows()

    def to_products(self) -> Products:
        return Products(self._rows())

    async def _rows(self) -> AsyncIterator[Product]:
        try:
            async for product in self._result:
                yield product
        finally:
            await self._result.close()


class ProductQuery:
    """Filtered product queries against the ORM session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_by_price_greater_than(
        self, price: Price,
    ) -> ProductResultStream:
        result = await self._db.stream_scalars(
            select(Product).where(Product.price > price),
        )
        return ProductResultStream(result)
