"""
Pydantic models for catalog entries.
Implements the Book schema used by the catalog and account services.
"""

from decimal import Decimal
from typing import List
from pydantic import BaseModel, Field, validator


class Book(BaseModel):
    """
    A book offered in the catalog.

    Equality compares every field, reviews included, so two books with
    identical fields are the same entry for membership checks.
    """
    title: str = Field(..., description="Title of the book")
    author: str = Field(..., description="Author of the book")
    genre: str = Field(..., description="Book genre")
    price: Decimal = Field(..., description="Sale price")
    reviews: List[str] = Field(default_factory=list, description="Reviews in the order they were written")

    @validator('price')
    def validate_price(cls, v):
        """Ensure price is not negative."""
        if v < 0:
            raise ValueError('Price cannot be negative')
        return v

    class Config:
        """Pydantic configuration."""
        json_encoders = {
            Decimal: lambda v: float(v)
        }
        json_schema_extra = {
            "example": {
                "title": "A Light in the Attic",
                "author": "Shel Silverstein",
                "genre": "Poetry",
                "price": 51.77,
                "reviews": ["Great book!"]
            }
        }
