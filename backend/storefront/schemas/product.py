"""Product Schemas — Pydantic models for the product endpoints.

Invariants:
    - ProductCreate.name: 1-200 chars after stripping
    - price is any integer (zero and negative allowed; totals filter them out)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductCreate(BaseModel):
    """Product creation — validates name length and whitespace."""
    name: str = Field(min_length=1, max_length=200)
    price: int

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class ProductCreated(BaseModel):
    id: int


class ProductResponse(BaseModel):
    """Product response — public-facing product data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: int


class TotalPriceResponse(BaseModel):
    total_price: int
