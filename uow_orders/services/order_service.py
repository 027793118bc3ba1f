# ==============================================================================
# ORDER SERVICE - Order Business Logic
# ==============================================================================
# Transaction-agnostic: the same code runs atomically when invoked inside
# a unit of work and write-by-write when invoked outside one
# ==============================================================================

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from uow_orders.domain_models.order import Item, Order
from uow_orders.schemas.order import OrderCreate

if TYPE_CHECKING:
    from uow_orders.database.repositories.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class OrderService:
    """
    Service for order operations.

    Attributes:
        _repository: Order repository
    """

    def __init__(self, repository: "OrderRepository") -> None:
        self._repository = repository

    async def get_all(self) -> List[Order]:
        return await self._repository.get_all()

    async def get_by_id(self, order_id: int) -> Order:
        return await self._repository.get_by_id(order_id)

    async def create_order(self, data: OrderCreate) -> Order:
        """
        Create an order, then each of its items.

        The order and every item are separate writes. Whether they commit
        together depends on the caller having started a transaction.

        Args:
            data: Order creation data

        Returns:
            The persisted order with its items
        """
        order = Order(date=data.date, description=data.description, items=[])
        order = await self._repository.save_order(order)

        for item_data in data.items:
            item = Item(name=item_data.name, quantity=item_data.quantity, order=order)
            await self._repository.save_order_item(item)

        logger.info(f"Order {order.id} created with {len(data.items)} item(s)")
        return order
