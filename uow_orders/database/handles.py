# ==============================================================================
# DATABASE HANDLES - What Repositories Read and Write Through
# ==============================================================================
# TransactionHandle: one live transaction on one session
# DefaultHandle: ad-hoc, non-transactional access (one session per call)
# ==============================================================================

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Type, TypeVar
from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql import Executable

from uow_orders.core.exceptions import TransactionError

ModelT = TypeVar("ModelT")


class HandleState(str, enum.Enum):
    """Lifecycle of a transaction handle."""
    IDLE = "idle"
    OPEN = "open"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


class DatabaseHandle(ABC):
    """
    Abstract database handle.

    The only surface repositories use. Whether a handle is bound to a
    transaction is not something a repository needs to know.
    """

    @property
    @abstractmethod
    def is_transactional(self) -> bool:
        """Whether writes through this handle are part of one transaction."""
        pass

    @abstractmethod
    async def save(self, instance: ModelT) -> ModelT:
        """
        Persist a new or modified entity.

        Args:
            instance: ORM entity

        Returns:
            The same entity with generated columns populated
        """
        pass

    @abstractmethod
    async def get(
        self,
        model: Type[ModelT],
        ident: Any,
        options: Iterable[Any] = (),
    ) -> Optional[ModelT]:
        """
        Fetch an entity by primary key.

        Args:
            model: ORM model class
            ident: Primary key value
            options: Loader options (e.g. ``selectinload``)

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def scalars(self, statement: Executable) -> List[Any]:
        """Execute a select and return the first column of every row."""
        pass


class TransactionHandle(DatabaseHandle):
    """
    Handle bound to one transaction on one session.

    Follows IDLE -> OPEN -> COMMITTED | ROLLED_BACK. The adapter that
    created the handle drives the transitions; once a terminal state is
    reached every further operation raises TransactionError.

    Attributes:
        transaction_id: Short identifier used in logs
    """

    def __init__(
        self,
        session: AsyncSession,
        transaction_id: Optional[str] = None,
    ) -> None:
        self._session = session
        self.transaction_id = transaction_id or uuid4().hex[:8]
        self._state = HandleState.IDLE

    @property
    def is_transactional(self) -> bool:
        return True

    @property
    def state(self) -> HandleState:
        """Current lifecycle state."""
        return self._state

    @property
    def session(self) -> AsyncSession:
        """Underlying session, only while the transaction is open."""
        if self._state is not HandleState.OPEN:
            raise TransactionError(
                message=f"Transaction {self.transaction_id} is {self._state.value}",
                details={
                    "transaction_id": self.transaction_id,
                    "state": self._state.value,
                },
            )
        return self._session

    # ==========================================================================
    # STATE TRANSITIONS
    # ==========================================================================

    def _transition(self, expected: HandleState, target: HandleState) -> None:
        if self._state is not expected:
            raise TransactionError(
                message=(
                    f"Cannot move transaction {self.transaction_id} "
                    f"from {self._state.value} to {target.value}"
                ),
                details={"transaction_id": self.transaction_id},
            )
        self._state = target

    def mark_open(self) -> None:
        self._transition(HandleState.IDLE, HandleState.OPEN)

    def mark_committed(self) -> None:
        self._transition(HandleState.OPEN, HandleState.COMMITTED)

    def mark_rolled_back(self) -> None:
        self._transition(HandleState.OPEN, HandleState.ROLLED_BACK)

    # ==========================================================================
    # OPERATIONS
    # ==========================================================================

    async def save(self, instance: ModelT) -> ModelT:
        session = self.session
        session.add(instance)
        await session.flush()
        return instance

    async def get(
        self,
        model: Type[ModelT],
        ident: Any,
        options: Iterable[Any] = (),
    ) -> Optional[ModelT]:
        return await self.session.get(model, ident, options=list(options))

    async def scalars(self, statement: Executable) -> List[Any]:
        result = await self.session.scalars(statement)
        return list(result.all())

    def __repr__(self) -> str:
        return f"<TransactionHandle(id={self.transaction_id}, state={self._state.value})>"


class DefaultHandle(DatabaseHandle):
    """
    Non-transactional handle.

    Every operation runs in its own short-lived session: writes are
    committed immediately and returned entities are detached with their
    loaded attributes intact.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    @property
    def is_transactional(self) -> bool:
        return False

    async def save(self, instance: ModelT) -> ModelT:
        async with self._session_factory() as session:
            session.add(instance)
            await session.commit()
            return instance

    async def get(
        self,
        model: Type[ModelT],
        ident: Any,
        options: Iterable[Any] = (),
    ) -> Optional[ModelT]:
        async with self._session_factory() as session:
            return await session.get(model, ident, options=list(options))

    async def scalars(self, statement: Executable) -> List[Any]:
        async with self._session_factory() as session:
            result = await session.scalars(statement)
            return list(result.all())

    def __repr__(self) -> str:
        return "<DefaultHandle()>"
