# ==============================================================================
# REPOSITORIES PACKAGE INITIALIZATION
# ==============================================================================

"""
Repository Layer
================

Data access through the ambient unit of work:
- BaseRepository: generic get/list/save for one model
- OrderRepository: order aggregate with items
"""

from uow_orders.database.repositories.base_repository import BaseRepository
from uow_orders.database.repositories.order_repository import OrderRepository

__all__ = [
    "BaseRepository",
    "OrderRepository",
]
