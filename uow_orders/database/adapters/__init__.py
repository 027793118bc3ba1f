# ==============================================================================
# DATABASE ADAPTERS PACKAGE INITIALIZATION
# ==============================================================================

"""
Database Adapters
=================

Uniform transactional interface over persistence engines:
- BaseDatabaseAdapter: abstract contract (begin_transaction, default handle)
- SQLAlchemyAdapter: async SQLAlchemy engine
- SQLiteAdapter: aiosqlite driver
- PostgreSQLAdapter: asyncpg driver
"""

from uow_orders.database.adapters.base_adapter import BaseDatabaseAdapter
from uow_orders.database.adapters.sqlalchemy_adapter import (
    PostgreSQLAdapter,
    SQLAlchemyAdapter,
    SQLiteAdapter,
)

__all__ = [
    "BaseDatabaseAdapter",
    "SQLAlchemyAdapter",
    "SQLiteAdapter",
    "PostgreSQLAdapter",
]
