"""
Product Domain Model

Represents a product listed by exactly one vendor. The owner is set when
the product is created and is never taken from client input.

Author: Marketplace Team
Date: 2026-10-19
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# stock and quantity are stored in 32-bit INTEGER columns
MAX_INT_COLUMN = 2_147_483_647


class Product(BaseModel):
    """
    Product domain model

    Fields:
        id: Store-generated product ID
        name: Product name
        price: Unit price (non-negative)
        stock: Units in stock (non-negative)
        vendor: Owning vendor ID
        created_at: When product was created
        updated_at: When product was last updated
    """

    id: str = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    price: float = Field(..., description="Unit price", ge=0)
    stock: int = Field(..., description="Units in stock", ge=0)
    vendor: str = Field(..., description="Owning vendor ID")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)


class ProductCreate(BaseModel):
    """Schema for creating a new product; unknown fields such as vendor are dropped"""

    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    stock: int = Field(..., ge=0, le=MAX_INT_COLUMN)

    model_config = ConfigDict(extra="ignore")


class ProductUpdate(BaseModel):
    """Schema for a partial product update; vendor is never accepted"""

    name: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0, le=MAX_INT_COLUMN)

    model_config = ConfigDict(extra="ignore")

    def changes(self) -> dict:
        """Only the fields the client actually sent with a value"""
        return self.model_dump(exclude_unset=True, exclude_none=True)
