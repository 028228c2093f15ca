"""Product ORM — persists a sellable product and its price.

Invariants:
    - id is assigned by the engine (autoincrement)
    - price is a whole number, non-nullable; zero and negative values are stored as-is
    - Rows are never mutated by the price-total flow

Design Decisions:
    - Integer price in the smallest currency unit: exact sums, no float rounding
    - Index on price: every read filters on it
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db.base import Base


class Product(Base):
    """Product entity — a catalogue item with an integer price."""
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"Product(id={self.id!r}, name={self.name!r}, price={self.price!r})"
