"""SQL Product Repository — ProductRepository backed by SQLAlchemy.

Invariants:
    - Returns Products, never engine-native result types
    - No business logic: pure translation between ProductQuery and the domain
    - Errors from the engine are not caught here (session manager categorizes them)

Design Decisions:
    - Wraps the stream lazily: the reduction drives the cursor
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain_types import Price, ProductId
from storefront.core.products import Products
from storefront.infrastructure.product_query import ProductQuery
from storefront.models.product import Product


class SqlProductRepository:
    """Implements core.repository_protocols.ProductRepository."""

    def __init__(self, db: AsyncSession):
        self._db = db
        self._query = ProductQuery(db)

    async def find_by_price_greater_than(self, price: Price) -> Products:
        stream = await self._query.find_by_price_greater_than(price)
        return stream.to_products()

    async def save(self, name: str, price: Price) -> ProductId:
        product = Product(name=name, price=price)
        self._db.add(product)
        await self._db.commit()
        await self._db.refresh(product)
        return ProductId(product.id)
