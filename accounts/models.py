"""
Pydantic models for bookstore accounts.
"""

from decimal import Decimal
from typing import List
from pydantic import BaseModel, Field

from catalog.models import Book


class User(BaseModel):
    """
    A registered customer.

    The password is kept in plain text; there is no hashing in this model.
    """
    username: str = Field(..., description="Unique login name")
    password: str = Field(..., description="Plain text password")
    email: str = Field(..., description="Contact e-mail address")
    balance: Decimal = Field(default=Decimal("0"), description="Funds available for purchases")
    purchased_books: List[Book] = Field(default_factory=list, description="Books bought, in purchase order")

    class Config:
        """Pydantic configuration."""
        validate_assignment = True
        json_encoders = {
            Decimal: lambda v: float(v)
        }
