# ==============================================================================
# ORDER REPOSITORY - Order Aggregate Data Access
# ==============================================================================

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import selectinload

from uow_orders.database.repositories.base_repository import BaseRepository
from uow_orders.database.unit_of_work.uow import UnitOfWork
from uow_orders.domain_models.order import Item, Order
from uow_orders.services.fault_injection import FaultInjector


class OrderRepository(BaseRepository[Order]):
    """
    Repository for orders and their items.

    Orders are always returned with their items loaded, so they can be
    serialized after the session that loaded them is gone.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        fault_injector: Optional[FaultInjector] = None,
    ) -> None:
        super().__init__(uow, Order, "order")
        self._fault_injector = fault_injector or FaultInjector()

    async def get_all(self) -> List[Order]:
        return await super().get_all(options=[selectinload(Order.items)])

    async def get_by_id(self, order_id: int) -> Order:
        """
        Get an order with its items.

        Raises:
            NotFoundError: If the order does not exist
        """
        return await super().get_by_id(order_id, options=[selectinload(Order.items)])

    async def save_order(self, order: Order) -> Order:
        return await self.save(order)

    async def save_order_item(self, item: Item) -> Item:
        """
        Persist an item.

        Raises:
            InjectedFaultError: When fault injection selects this write
        """
        self._fault_injector.maybe_fail("save_order_item")
        return await self._handle().save(item)
