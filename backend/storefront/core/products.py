"""Products — domain collection wrapper over a single-pass product stream.

Invariants:
    - Wraps exactly one query result; owns no persistence concerns
    - Consumed at most once: the first traversal (iteration or total_price)
      claims the source, any later traversal raises CollectionConsumedError
    - total_price() starts at 0 and adds every element's price (empty -> 0)
    - Errors raised by the source propagate unchanged; no partial sum is returned
    - The source is closed (aclose) when total_price() returns or fails, and when
      the iterator returned by __aiter__ is exhausted, fails, or is aclose()d
    - Breaking out of `async for` without aclose() leaves the source open until
      the iterator is finalized; wrap it in contextlib.aclosing() to release early

Design Decisions:
    - Lazy over materialized: the source is a server-side cursor, so the wrapper
      never buffers rows
    - Async iteration: the only async type in core, because the stream it wraps
      is async; the wrapper itself performs no IO
    - Python int accumulator: arbitrary precision, sums cannot overflow
"""

from typing import AsyncIterable, AsyncIterator, Protocol

from storefront.core.errors import CollectionConsumedError


class PricedProduct(Protocol):
    """Structural view of a Product — keeps core free of ORM imports."""
    id: int
    price: int


class Products:
    """Once-consumable sequence of products with a total-price aggregate."""

    def __init__(self, source: AsyncIterable[PricedProduct]):
        self._source = source
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    def __aiter__(self) -> AsyncIterator[PricedProduct]:
        return _closing(self._claim())

    async def total_price(self) -> int:
        """Sum the price of every product, consuming the collection."""
        products = self._claim()
        total = 0
        try:
            async for product in products:
                total += product.price
        finally:
            await _close(products)
        return total

    def _claim(self) -> AsyncIterator[PricedProduct]:
        if self._consumed:
            raise CollectionConsumedError()
        self._consumed = True
        return aiter(self._source)


async def _closing(
    products: AsyncIterator[PricedProduct],
) -> AsyncIterator[PricedProduct]:
    try:
        async for product in products:
            yield product
    finally:
        await _close(products)


async def _close(iterator: AsyncIterator[PricedProduct]) -> None:
    aclose = getattr(iterator, "aclose", None)
    if aclose is not None:
        await aclose()
