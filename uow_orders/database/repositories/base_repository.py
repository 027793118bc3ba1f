# ==============================================================================
# BASE REPOSITORY - Generic Data Access Abstraction
# ==============================================================================
# Repository Pattern over the ambient unit of work
# Repositories never own a session: they ask for the current handle
# ==============================================================================

from __future__ import annotations

from typing import Any, Generic, Iterable, List, Optional, Type, TypeVar

from sqlalchemy import select

from uow_orders.core.exceptions import NotFoundError
from uow_orders.database.handles import DatabaseHandle
from uow_orders.database.unit_of_work.uow import UnitOfWork

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing standard data access for one model.

    Every operation fetches ``uow.current_handle()`` immediately before
    touching the database and does not keep it afterwards. Whether the
    call joins a transaction is decided by whoever started the unit of
    work, never by the repository.

    Generic Parameters:
        ModelType: SQLAlchemy model class

    Attributes:
        _uow: Unit of work providing the current handle
        _model: Model class handled by this repository
        _resource_name: Resource type used in NotFoundError

    Example:
        >>> class ItemRepository(BaseRepository[Item]):
        ...     def __init__(self, uow):
        ...         super().__init__(uow, Item, "item")
    """

    def __init__(
        self,
        uow: UnitOfWork,
        model: Type[ModelType],
        resource_name: str,
    ) -> None:
        """
        Initialize repository.

        Args:
            uow: Unit of work instance
            model: SQLAlchemy model class
            resource_name: Name used in error messages
        """
        self._uow = uow
        self._model = model
        self._resource_name = resource_name

    def _handle(self) -> DatabaseHandle:
        return self._uow.current_handle()

    # ==========================================================================
    # READ OPERATIONS
    # ==========================================================================

    async def find_by_id(
        self,
        entity_id: Any,
        options: Iterable[Any] = (),
    ) -> Optional[ModelType]:
        """
        Get entity by primary key.

        Args:
            entity_id: Primary key value
            options: Loader options

        Returns:
            Entity if found, None otherwise
        """
        return await self._handle().get(self._model, entity_id, options=options)

    async def get_by_id(
        self,
        entity_id: Any,
        options: Iterable[Any] = (),
    ) -> ModelType:
        """
        Get entity by primary key or fail.

        Raises:
            NotFoundError: If no entity has this key
        """
        entity = await self.find_by_id(entity_id, options=options)
        if entity is None:
            raise NotFoundError(
                message=f"{self._resource_name.capitalize()} not found",
                resource_type=self._resource_name,
                resource_id=str(entity_id),
            )
        return entity

    async def get_all(self, options: Iterable[Any] = ()) -> List[ModelType]:
        """Get all entities ordered by primary key."""
        statement = (
            select(self._model)
            .options(*options)
            .order_by(self._model.id)
        )
        return await self._handle().scalars(statement)

    # ==========================================================================
    # WRITE OPERATIONS
    # ==========================================================================

    async def save(self, entity: ModelType) -> ModelType:
        """
        Persist a new or modified entity.

        Returns:
            The entity with its generated columns populated
        """
        return await self._handle().save(entity)
