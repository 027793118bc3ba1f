# ==============================================================================
# CORE PACKAGE INITIALIZATION
# ==============================================================================

"""
Core Module
===========

Cross-cutting application infrastructure:
- Settings: environment-driven configuration
- Exceptions: application error hierarchy
- Logging: root logger configuration and request correlation
"""

from uow_orders.core.settings import settings, get_settings, Settings
from uow_orders.core.exceptions import (
    AppException,
    DatabaseError,
    InjectedFaultError,
    NotFoundError,
    TransactionError,
)

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "AppException",
    "DatabaseError",
    "InjectedFaultError",
    "NotFoundError",
    "TransactionError",
]
