# ==============================================================================
# BASE DATABASE ADAPTER - Abstract Interface
# ==============================================================================
# Defines the contract between the unit of work and a persistence engine
# ==============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, TypeVar

from uow_orders.database.handles import DatabaseHandle, TransactionHandle

T = TypeVar("T")


class BaseDatabaseAdapter(ABC):
    """
    Abstract Base Class for Database Adapters.

    Provides the two things the unit of work needs from a persistence
    engine: a way to run code inside one transaction, and a handle for
    access outside of any transaction.

    Design Pattern:
        Implements the Adapter Pattern to provide a uniform interface
        over the engine's own session/transaction API.

    Example:
        >>> adapter = SQLiteAdapter()
        >>> await adapter.connect()
        >>> await adapter.begin_transaction(lambda handle: handle.save(order))
        >>> await adapter.disconnect()
    """

    # ==========================================================================
    # LIFECYCLE METHODS
    # ==========================================================================

    @abstractmethod
    async def connect(self) -> None:
        """
        Establish database connection.

        Initializes the database engine and connection pool.
        Must be called before any database operations.

        Raises:
            DatabaseError: If connection cannot be established
        """
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """
        Close database connection.

        Releases all connections in the pool and cleans up resources.
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if database connection is healthy.

        Returns:
            True if connection is healthy, False otherwise
        """
        pass

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Whether ``connect`` has completed and ``disconnect`` has not run."""
        pass

    # ==========================================================================
    # TRANSACTIONS
    # ==========================================================================

    @abstractmethod
    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[TransactionHandle]:
        """
        Provide a transactional scope.

        Yields an OPEN handle. Commits when the block exits normally;
        rolls back and re-raises when it raises. The handle ends in
        COMMITTED or ROLLED_BACK accordingly.

        Raises:
            DatabaseError: If database is not connected
        """
        yield  # pragma: no cover

    async def begin_transaction(
        self,
        unit_of_work: Callable[[TransactionHandle], Awaitable[T]],
    ) -> T:
        """
        Run ``unit_of_work`` inside a new transaction.

        Commits if it returns normally; rolls back and propagates the
        original exception if it raises.

        Args:
            unit_of_work: Coroutine function receiving the transaction handle

        Returns:
            Result of ``unit_of_work``
        """
        async with self.transaction() as handle:
            return await unit_of_work(handle)

    @abstractmethod
    def create_default_handle(self) -> DatabaseHandle:
        """
        Create a handle for access outside of any transaction.

        Raises:
            DatabaseError: If database is not connected
        """
        pass
