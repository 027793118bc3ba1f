# ==============================================================================
# API V1 ENDPOINTS PACKAGE
# ==============================================================================

"""
API V1 Endpoints
================

Version 1 API endpoint implementations.
"""

from uow_orders.api.v1.orders import router as orders_router
from uow_orders.api.v1.orders import transactional_router as orders_transactional_router

__all__ = [
    "orders_router",
    "orders_transactional_router",
]
