# ==============================================================================
# DATABASE PACKAGE INITIALIZATION
# ==============================================================================
# Database Abstraction Layer with ambient transaction support
# ==============================================================================

"""
Database Module
===============

Provides a unified database abstraction layer supporting:
- SQLite (development/testing)
- PostgreSQL (production)

Key Components:
- Adapters: Engine-specific transaction handling
- Handles: What repositories read and write through
- Factory: Dynamic adapter instantiation
- Context: Execution-scoped ambient state
- Unit of Work: Ambient transaction management
"""

from uow_orders.database.factory import DatabaseFactory
from uow_orders.database.adapters.base_adapter import BaseDatabaseAdapter

__all__ = [
    "DatabaseFactory",
    "BaseDatabaseAdapter",
]
