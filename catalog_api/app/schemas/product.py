"""
Pydantic models for product data.

Prices are not validated beyond being numbers; a negative price is
stored as sent.
"""

from pydantic import BaseModel, Field


class Product(BaseModel):
    """A product record."""

    id: int = Field(..., gt=0, examples=[1])
    name: str = Field(..., examples=["Laptop"])
    price: float = Field(..., examples=[999.99])
    category: str = Field(..., examples=["Electronics"])
    stock: int = Field(0, examples=[50])
