"""
Order Domain Models

An order references one product. Its vendor is copied from that product
when the order is recorded, so ownership can be filtered without a join.

Author: Marketplace Team
Date: 2026-10-19
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.domain.product import MAX_INT_COLUMN, Product


class OrderStatus(str, Enum):
    PENDING = "pending"
    SHIPPED = "shipped"


class Order(BaseModel):
    """
    Order domain model

    Fields:
        id: Store-generated order ID
        product: The ordered product, embedded (None once that product is deleted)
        quantity: Units ordered
        status: pending until shipped
        vendor: Owning vendor ID (denormalized from the product)
        created_at: When the order was recorded
    """

    id: str = Field(..., description="Order ID")
    product: Optional[Product] = Field(None, description="Ordered product")
    quantity: int = Field(..., description="Units ordered", ge=1)
    status: OrderStatus = Field(OrderStatus.PENDING, description="Order status")
    vendor: str = Field(..., description="Owning vendor ID")
    created_at: datetime = Field(..., description="Creation timestamp")

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)


class OrderCreate(BaseModel):
    """Schema for recording an order against one of the caller's products"""

    product: str = Field(..., description="Product ID")
    quantity: int = Field(..., ge=1, le=MAX_INT_COLUMN)

    model_config = ConfigDict(extra="ignore")
