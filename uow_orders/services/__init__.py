# ==============================================================================
# SERVICES PACKAGE INITIALIZATION
# ==============================================================================

"""
Service Layer
=============

Business logic for the order domain:
- OrderService: order retrieval and creation
- FaultInjector: optional simulated write failures
"""

from uow_orders.services.fault_injection import FaultInjector
from uow_orders.services.order_service import OrderService

__all__ = [
    "FaultInjector",
    "OrderService",
]
