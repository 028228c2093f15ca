"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Repositories return domain wrappers, never engine-native result types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no base class
    - Async in Protocol: boundary methods are async because implementations do IO
"""

from typing import Protocol

from storefront.core.domain_types import Price, ProductId
from storefront.core.products import Products


class ProductRepository(Protocol):
    """Contract for product persistence — implemented by shell."""
    async def find_by_price_greater_than(self, price: Price) -> Products: ...
    async def save(self, name: str, price: Price) -> ProductId: ...
