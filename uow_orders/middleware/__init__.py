# ==============================================================================
# MIDDLEWARE PACKAGE INITIALIZATION
# ==============================================================================

"""
Middleware
==========

- RequestLoggerMiddleware: request logging, X-Request-ID / X-Response-Time
"""

from uow_orders.middleware.request_logger import RequestLoggerMiddleware

__all__ = [
    "RequestLoggerMiddleware",
]
