# ==============================================================================
# SCHEMAS PACKAGE INITIALIZATION
# ==============================================================================

"""
API Schemas
===========

Pydantic models for request validation and response serialization.
"""

from uow_orders.schemas.base import BaseSchema, HealthResponse, TimestampSchema
from uow_orders.schemas.order import (
    ItemCreate,
    ItemResponse,
    OrderCreate,
    OrderResponse,
)

__all__ = [
    "BaseSchema",
    "TimestampSchema",
    "HealthResponse",
    "ItemCreate",
    "ItemResponse",
    "OrderCreate",
    "OrderResponse",
]
