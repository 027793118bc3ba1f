# ==============================================================================
# API PACKAGE INITIALIZATION
# ==============================================================================

"""
API Module
==========

FastAPI routers and endpoint definitions:
- Dependencies: unit of work, repositories, services
- Routers: Order
"""

from uow_orders.api.router import api_router

__all__ = ["api_router"]
