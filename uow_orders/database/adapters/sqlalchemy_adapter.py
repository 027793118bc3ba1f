# ==============================================================================
# SQLALCHEMY ADAPTERS - Async Engine for SQLite and PostgreSQL
# ==============================================================================
# SQLiteAdapter: aiosqlite driver, development and testing
# PostgreSQLAdapter: asyncpg driver, connection pooling
# ==============================================================================

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from uow_orders.core.settings import settings
from uow_orders.core.exceptions import DatabaseError
from uow_orders.database.adapters.base_adapter import BaseDatabaseAdapter
from uow_orders.database.handles import DefaultHandle, TransactionHandle

logger = logging.getLogger(__name__)


class SQLAlchemyAdapter(BaseDatabaseAdapter):
    """
    Database adapter over a SQLAlchemy async engine.

    One transaction maps to one AsyncSession: the session is created when
    the transaction opens and closed when it ends. Tables are created
    from the ORM metadata on connect.

    Attributes:
        _database_url: SQLAlchemy connection URL (async driver)
        _engine: SQLAlchemy async engine
        _session_factory: Session factory for creating sessions
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        isolation_level: Optional[str] = None,
        **engine_options: Any,
    ) -> None:
        """
        Initialize adapter.

        Args:
            database_url: Async SQLAlchemy URL
            echo: Log emitted SQL
            isolation_level: Engine-wide transaction isolation level
            **engine_options: Extra keyword arguments for create_async_engine
        """
        self._database_url = database_url
        self._echo = echo
        self._engine_options: Dict[str, Any] = dict(engine_options)
        if isolation_level:
            self._engine_options["isolation_level"] = isolation_level

        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def database_url(self) -> str:
        return self._database_url

    @property
    def is_connected(self) -> bool:
        return self._session_factory is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise DatabaseError("Database not connected. Call connect() first.")
        return self._engine

    def _require_session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            raise DatabaseError("Database not connected. Call connect() first.")
        return self._session_factory

    # ==========================================================================
    # LIFECYCLE METHODS
    # ==========================================================================

    async def connect(self) -> None:
        """
        Initialize database engine and create tables.

        Raises:
            DatabaseError: If the engine cannot be created or reached
        """
        try:
            self._engine = create_async_engine(
                self._database_url,
                echo=self._echo,
                **self._engine_options,
            )

            self._session_factory = async_sessionmaker(
                bind=self._engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )

            async with self._engine.begin() as conn:
                from uow_orders.domain_models import SQLBase
                await conn.run_sync(SQLBase.metadata.create_all)

            logger.info(f"{self.__class__.__name__} connected successfully")

        except Exception as e:
            logger.error(f"Failed to connect {self.__class__.__name__}: {e}")
            self._engine = None
            self._session_factory = None
            raise DatabaseError(f"Database connection failed: {e}")

    async def disconnect(self) -> None:
        """Close database connections and dispose engine."""
        if self._engine:
            await self._engine.dispose()
            logger.info(f"{self.__class__.__name__} disconnected")
        self._engine = None
        self._session_factory = None

    async def health_check(self) -> bool:
        """
        Verify database connectivity.

        Returns:
            True if connection is healthy
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning(f"{self.__class__.__name__} health check failed: {e}")
            return False

    # ==========================================================================
    # TRANSACTIONS
    # ==========================================================================

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[TransactionHandle]:
        """
        Provide one transaction on one session.

        Commits on successful exit, rolls back on any exception
        (cancellation included) and re-raises it unchanged.

        Yields:
            OPEN TransactionHandle

        Raises:
            DatabaseError: If database not connected
        """
        session_factory = self._require_session_factory()

        async with session_factory() as session:
            handle = TransactionHandle(session)
            await session.begin()
            handle.mark_open()
            logger.debug(f"Transaction {handle.transaction_id} opened")

            try:
                yield handle
            except BaseException as exc:
                await self._rollback(session, handle, f"{type(exc).__name__}: {exc}")
                raise

            try:
                await session.commit()
            except BaseException:
                await self._rollback(session, handle, "commit failed")
                raise

            handle.mark_committed()
            logger.debug(f"Transaction {handle.transaction_id} committed")

    async def _rollback(
        self,
        session: AsyncSession,
        handle: TransactionHandle,
        reason: str,
    ) -> None:
        """
        Roll back after a failure without masking it.

        A rollback error is logged and dropped so the caller re-raises
        the failure that caused the rollback. The handle ends ROLLED_BACK
        either way.
        """
        try:
            await session.rollback()
        except Exception as e:
            logger.error(
                f"Rollback of transaction {handle.transaction_id} failed: {e}"
            )
        finally:
            handle.mark_rolled_back()
        logger.warning(f"Transaction {handle.transaction_id} rolled back: {reason}")

    def create_default_handle(self) -> DefaultHandle:
        return DefaultHandle(self._require_session_factory())

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(connected={self.is_connected})>"


class SQLiteAdapter(SQLAlchemyAdapter):
    """
    SQLite adapter using the aiosqlite driver.

    Ideal for development, testing, and small-scale deployments. SQLite
    serializes writers; ``busy_timeout`` is how long a writer waits for
    a competing transaction before failing with "database is locked".

    Example:
        >>> adapter = SQLiteAdapter("sqlite+aiosqlite:///./orders.db")
        >>> await adapter.connect()  # Creates tables automatically
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        busy_timeout: Optional[float] = None,
        **engine_options: Any,
    ) -> None:
        # Ensure async driver is used
        url = database_url or settings.sqlite_async_url
        if "sqlite://" in url and "aiosqlite" not in url:
            url = url.replace("sqlite://", "sqlite+aiosqlite://")

        timeout = settings.SQLITE_BUSY_TIMEOUT if busy_timeout is None else busy_timeout
        engine_options.setdefault(
            "connect_args",
            {"check_same_thread": False, "timeout": timeout},
        )
        engine_options.setdefault("echo", settings.DEBUG)
        engine_options.setdefault("isolation_level", settings.DB_ISOLATION_LEVEL)

        super().__init__(url, **engine_options)


class PostgreSQLAdapter(SQLAlchemyAdapter):
    """
    PostgreSQL adapter using the asyncpg driver.

    Production-grade adapter with connection pooling configured from
    settings (pool size, overflow, timeout, recycle).
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        **engine_options: Any,
    ) -> None:
        engine_options.setdefault("echo", settings.DEBUG)
        engine_options.setdefault("isolation_level", settings.DB_ISOLATION_LEVEL)
        engine_options.setdefault("pool_size", settings.DB_POOL_SIZE)
        engine_options.setdefault("max_overflow", settings.DB_MAX_OVERFLOW)
        engine_options.setdefault("pool_timeout", settings.DB_POOL_TIMEOUT)
        engine_options.setdefault("pool_recycle", settings.DB_POOL_RECYCLE)
        engine_options.setdefault("pool_pre_ping", True)

        super().__init__(database_url or settings.postgres_url, **engine_options)
