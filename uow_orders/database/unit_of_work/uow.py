# ==============================================================================
# UNIT OF WORK - Ambient Transaction Coordination
# ==============================================================================
# Decides per execution whether "the current handle" is a shared
# transaction or an ad-hoc default handle, and scopes it to one call tree
# ==============================================================================

from __future__ import annotations

import inspect
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable, Optional, TypeVar, Union

from uow_orders.database.adapters.base_adapter import BaseDatabaseAdapter
from uow_orders.database.context.scoped_store import ExecutionScopedStore
from uow_orders.database.factory import DatabaseFactory
from uow_orders.database.handles import DatabaseHandle, TransactionHandle

logger = logging.getLogger(__name__)

T = TypeVar("T")

TRANSACTION_HANDLE_KEY = "current_transaction_handle"


async def _resolve(value: Any) -> Any:
    """
    Fully evaluate a handler result.

    Awaitables are awaited until a plain value remains; async iterators
    are drained into a list. Anything else is returned as is.
    """
    while inspect.isawaitable(value):
        value = await value

    if hasattr(value, "__anext__"):
        items = []
        try:
            async for item in value:
                items.append(item)
        finally:
            aclose = getattr(value, "aclose", None)
            if aclose is not None:
                await aclose()
        return items

    return value


class UnitOfWork:
    """
    Ambient Unit of Work.

    Repositories never receive a session as an argument. They ask the
    unit of work for ``current_handle()`` right before each database
    call and get either the transaction opened by the enclosing
    ``run_transactional`` call, or a default handle when no transaction
    is active.

    The transaction handle lives in an ExecutionScopedStore, so it
    follows the logical call tree across awaits and is never seen by
    concurrently running requests.

    Every call to ``run_transactional`` opens a new, independent
    transaction, including calls made while another one is active.

    Attributes:
        store: Scope container holding the ambient transaction handle

    Example:
        >>> uow = UnitOfWork()
        >>> async def place_order():
        ...     await order_repository.save_order(order)
        ...     await order_repository.save_order_item(item)
        >>> await uow.run_transactional(place_order)  # one commit
    """

    def __init__(
        self,
        adapter: Optional[BaseDatabaseAdapter] = None,
        store: Optional[ExecutionScopedStore] = None,
    ) -> None:
        """
        Initialize Unit of Work.

        Args:
            adapter: Database adapter (defaults to the factory's adapter,
                resolved on every use)
            store: Scope container (a private one is created if None)
        """
        self._adapter = adapter
        self.store = store or ExecutionScopedStore("unit_of_work")

    @property
    def adapter(self) -> BaseDatabaseAdapter:
        if self._adapter is not None:
            return self._adapter
        return DatabaseFactory.get_adapter()

    # ==========================================================================
    # AMBIENT HANDLE
    # ==========================================================================

    def current_handle(self) -> DatabaseHandle:
        """
        Return the handle for the current execution.

        Returns:
            The ambient transaction handle if one is active, otherwise a
            new default (non-transactional) handle
        """
        handle = self.store.get(TRANSACTION_HANDLE_KEY)
        if handle is not None:
            return handle
        return self.adapter.create_default_handle()

    def has_active_transaction(self) -> bool:
        """Whether the current execution runs inside a transaction."""
        return self.store.get(TRANSACTION_HANDLE_KEY) is not None

    # ==========================================================================
    # TRANSACTIONAL EXECUTION
    # ==========================================================================

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[TransactionHandle]:
        """
        Open a transaction and make it ambient for the enclosed block.

        Yields:
            The OPEN transaction handle
        """
        async with self.adapter.transaction() as handle:
            async with self.store.scope({TRANSACTION_HANDLE_KEY: handle}):
                yield handle

    async def run_transactional(
        self,
        work: Callable[[], Union[Awaitable[T], T]],
    ) -> T:
        """
        Run ``work`` inside a new transaction.

        Every ``current_handle()`` call made during ``work`` (at any call
        depth, across any number of awaits) returns this transaction's
        handle. Commits if ``work`` completes; rolls back everything and
        re-raises the original exception if it fails.

        Args:
            work: Zero-argument callable, usually a coroutine function

        Returns:
            Result of ``work``
        """
        return await self.adapter.begin_transaction(
            lambda handle: self.store.run_scoped(
                {TRANSACTION_HANDLE_KEY: handle},
                work,
            )
        )

    async def run_transactional_around_handler(
        self,
        next_step: Callable[[], Any],
    ) -> Any:
        """
        Run the rest of request processing inside a new transaction.

        Same guarantees as ``run_transactional``. The result of
        ``next_step`` is fully resolved inside the transaction before it
        commits, so a failure raised while producing it still rolls back.

        Args:
            next_step: Continuation returning a value, an awaitable or an
                async iterator

        Returns:
            Resolved result (async iterators are returned as a list)
        """

        async def resolved() -> Any:
            return await _resolve(next_step())

        return await self.run_transactional(resolved)
