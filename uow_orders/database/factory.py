# ==============================================================================
# DATABASE FACTORY - Adapter Instantiation & Lifecycle Management
# ==============================================================================
# Factory Pattern for creating and managing database adapters
# Singleton caching for efficient resource utilization
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from uow_orders.core.settings import settings, DatabaseType
from uow_orders.core.exceptions import DatabaseError
from uow_orders.database.adapters.base_adapter import BaseDatabaseAdapter
from uow_orders.database.adapters.sqlalchemy_adapter import (
    PostgreSQLAdapter,
    SQLiteAdapter,
)

logger = logging.getLogger(__name__)


class DatabaseFactory:
    """
    Factory class for creating and managing database adapters.

    Implements the Factory Pattern with singleton caching so the whole
    application shares one engine (and one connection pool) per
    database type.

    Class Attributes:
        _instances: Cache of initialized adapter instances

    Example:
        >>> # Initialize at application startup
        >>> await DatabaseFactory.initialize()
        >>>
        >>> # Get adapter for the unit of work
        >>> adapter = DatabaseFactory.get_adapter()
        >>>
        >>> # Shutdown at application exit
        >>> await DatabaseFactory.shutdown()
    """

    _instances: Dict[DatabaseType, BaseDatabaseAdapter] = {}

    @classmethod
    def create_adapter(
        cls,
        db_type: Optional[DatabaseType] = None,
        **kwargs: Any,
    ) -> BaseDatabaseAdapter:
        """
        Create and return appropriate database adapter.

        Returns cached instance if available, otherwise creates new.

        Args:
            db_type: Database type (defaults to settings.DATABASE_TYPE)
            **kwargs: Additional adapter configuration
                - database_url: Custom connection URL

        Returns:
            Database adapter instance

        Raises:
            ValueError: If database type is not supported
        """
        db_type = db_type or settings.DATABASE_TYPE

        if db_type in cls._instances:
            return cls._instances[db_type]

        adapter: BaseDatabaseAdapter

        if db_type == DatabaseType.SQLITE:
            adapter = SQLiteAdapter(**kwargs)
            logger.info("Created SQLite adapter")

        elif db_type == DatabaseType.POSTGRESQL:
            adapter = PostgreSQLAdapter(**kwargs)
            logger.info("Created PostgreSQL adapter")

        else:
            raise ValueError(f"Unsupported database type: {db_type}")

        cls._instances[db_type] = adapter
        return adapter

    @classmethod
    async def initialize(
        cls,
        db_type: Optional[DatabaseType] = None,
        **kwargs: Any,
    ) -> BaseDatabaseAdapter:
        """
        Initialize database connection.

        Creates adapter and establishes database connection.
        Should be called at application startup.

        Args:
            db_type: Database type (defaults to settings.DATABASE_TYPE)
            **kwargs: Passed through to create_adapter

        Returns:
            Initialized database adapter

        Raises:
            DatabaseError: If connection fails
        """
        db_type = db_type or settings.DATABASE_TYPE
        adapter = cls.create_adapter(db_type, **kwargs)

        if adapter.is_connected:
            return adapter

        try:
            await adapter.connect()
        except Exception as e:
            cls._instances.pop(db_type, None)
            logger.error(f"Database initialization failed: {e}")
            if isinstance(e, DatabaseError):
                raise
            raise DatabaseError(f"Failed to initialize database: {e}")

        logger.info(f"Database initialized: {db_type.value}")
        return adapter

    @classmethod
    async def shutdown(cls) -> None:
        """
        Close all database connections.

        Releases all resources and clears adapter cache.
        Should be called at application shutdown.
        """
        for db_type, adapter in cls._instances.items():
            try:
                await adapter.disconnect()
                logger.info(f"Disconnected: {db_type.value}")
            except Exception as e:
                logger.error(f"Error disconnecting {db_type.value}: {e}")

        cls._instances.clear()
        logger.info("All database connections closed")

    @classmethod
    def get_adapter(
        cls,
        db_type: Optional[DatabaseType] = None,
    ) -> BaseDatabaseAdapter:
        """
        Get existing adapter instance.

        Args:
            db_type: Database type (defaults to settings.DATABASE_TYPE)

        Returns:
            Initialized adapter instance

        Raises:
            DatabaseError: If adapter not initialized
        """
        db_type = db_type or settings.DATABASE_TYPE

        if db_type not in cls._instances:
            raise DatabaseError(
                f"Database adapter for {db_type.value} not initialized. "
                f"Call DatabaseFactory.initialize() first."
            )

        return cls._instances[db_type]

    @classmethod
    def is_initialized(
        cls,
        db_type: Optional[DatabaseType] = None,
    ) -> bool:
        """Check if an adapter for ``db_type`` is cached."""
        db_type = db_type or settings.DATABASE_TYPE
        return db_type in cls._instances

    @classmethod
    async def health_check(
        cls,
        db_type: Optional[DatabaseType] = None,
    ) -> bool:
        """
        Check database health.

        Returns:
            True if database is healthy
        """
        if not cls.is_initialized(db_type):
            return False
        return await cls.get_adapter(db_type).health_check()

    @classmethod
    def reset(cls) -> None:
        """
        Reset factory state.

        Clears adapter cache without disconnecting.
        Primarily for testing purposes.
        """
        cls._instances.clear()
