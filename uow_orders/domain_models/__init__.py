# ==============================================================================
# DOMAIN MODELS PACKAGE INITIALIZATION
# ==============================================================================

"""
Domain Models
=============

SQLAlchemy ORM models for database entities:
- Order/Item: order aggregate
"""

from uow_orders.domain_models.base import SQLBase, TimestampMixin
from uow_orders.domain_models.order import Item, Order

__all__ = [
    "SQLBase",
    "TimestampMixin",
    "Order",
    "Item",
]
