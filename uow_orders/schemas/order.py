# ==============================================================================
# ORDER SCHEMAS - Orders and Items
# ==============================================================================
# Request/Response schemas for the order endpoints
# ==============================================================================

from __future__ import annotations

from typing import List

from pydantic import Field

from uow_orders.schemas.base import BaseSchema, TimestampSchema


class ItemCreate(BaseSchema):
    """Schema for creating an item within a new order."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Item name",
    )
    quantity: int = Field(
        ...,
        ge=1,
        description="Number of units",
    )


class OrderCreate(BaseSchema):
    """
    Schema for creating an order with its items.

    Example:
        {"date": "2024-05-01", "description": "groceries",
         "items": [{"name": "milk", "quantity": 2}]}
    """

    date: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Order date",
    )
    description: str = Field(
        ...,
        max_length=500,
        description="Order description",
    )
    items: List[ItemCreate] = Field(
        default_factory=list,
        description="Items to create together with the order",
    )


class ItemResponse(TimestampSchema):
    """Schema for item response."""

    id: int = Field(..., description="Item identifier")
    order_id: int = Field(..., description="Owning order identifier")
    name: str = Field(..., description="Item name")
    quantity: int = Field(..., description="Number of units")


class OrderResponse(TimestampSchema):
    """Schema for order response, items included."""

    id: int = Field(..., description="Order identifier")
    date: str = Field(..., description="Order date")
    description: str = Field(..., description="Order description")
    items: List[ItemResponse] = Field(
        default_factory=list,
        description="Items of the order",
    )
