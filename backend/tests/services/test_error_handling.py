"""Error Handling — verifies failures reach clients through the real session chain.

Invariants:
    - A SQLAlchemy error inside a route is mapped by get_db/DatabaseSessionManager
      during dependency teardown and returned as 503 DATABASE_ERROR
    - The error log carries the failed operation and the request's threshold
    - Reusing a consumed Products wrapper returns 500 COLLECTION_CONSUMED
    - Validation errors use the validation category
"""

import logging

import pytest
from httpx import ASGITransport, AsyncClient

from storefront.api.routes.products import get_product_service
from storefront.core.products import Products
from storefront.db.base import Base
from storefront.main import app
from storefront.services.product_service import ProductService
import storefront.infrastructure.database as db_module

HANDLER_LOGGER = "storefront.api.error_handlers"


@pytest.fixture
async def session_client(fake_db_manager):
    """Client using the real get_db dependency backed by the test engine."""
    original_manager = db_module.db_manager
    db_module.db_manager = fake_db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def dropped_products_table(test_engine):
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


def _handler_records(caplog) -> list[logging.LogRecord]:
    return [r for r in caplog.records if r.name == HANDLER_LOGGER]


async def test_query_failure_through_get_db_returns_503(
    session_client, dropped_products_table, caplog,
):
    caplog.set_level(logging.ERROR, logger=HANDLER_LOGGER)
    res = await session_client.get("/api/v1/products/total-price")

    assert res.status_code == 503
    error = res.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["category"] == "database"
    assert error["details"] == {"operation": "execute"}
    assert "context" not in error

    [record] = _handler_records(caplog)
    assert record.operation == "execute"
    assert record.threshold == 0
    assert record.path == "/api/v1/products/total-price"


async def test_list_failure_logs_requested_threshold(
    session_client, dropped_products_table, caplog,
):
    caplog.set_level(logging.ERROR, logger=HANDLER_LOGGER)
    res = await session_client.get("/api/v1/products", params={"price_gt": 5})

    assert res.status_code == 503
    [record] = _handler_records(caplog)
    assert record.threshold == 5


async def test_session_client_serves_total_with_real_get_db(
    session_client, seed_products,
):
    await seed_products([10, 20, -5, 0, 7])
    res = await session_client.get("/api/v1/products/total-price")
    assert res.json() == {"total_price": 37}


class _ReusedProductsRepository:
    """Hands out a Products wrapper that has already been summed."""

    def __init__(self, products: Products):
        self._products = products

    async def find_by_price_greater_than(self, price):
        return self._products

    async def save(self, name, price):
        raise NotImplementedError


async def test_consumed_collection_returns_500(session_client, caplog):
    async def rows():
        return
        yield  # pragma: no cover

    products = Products(rows())
    await products.total_price()
    app.dependency_overrides[get_product_service] = (
        lambda: ProductService(_ReusedProductsRepository(products))
    )
    caplog.set_level(logging.ERROR, logger=HANDLER_LOGGER)

    res = await session_client.get("/api/v1/products/total-price")

    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "COLLECTION_CONSUMED"
    assert error["category"] == "internal"
    [record] = _handler_records(caplog)
    assert record.exc_info is not None
    assert record.threshold == 0


async def test_validation_error_uses_validation_category(session_client):
    res = await session_client.post("/api/v1/products", json={"price": 3})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["category"] == "validation"
    assert error["details"][0]["field"] == "body.name"
