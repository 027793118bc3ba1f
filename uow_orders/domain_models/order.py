# ==============================================================================
# ORDER MODELS - Orders and Their Items
# ==============================================================================
# Order aggregate: one order owns zero or more items
# ==============================================================================

from __future__ import annotations

from typing import List

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from uow_orders.domain_models.base import SQLBase, TimestampMixin


class Order(SQLBase, TimestampMixin):
    """
    Order model.

    Attributes:
        date: Order date as supplied by the client
        description: Free-text description

    Relationships:
        items: Items belonging to the order
    """

    __tablename__ = "orders"

    date: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False)

    items: Mapped[List["Item"]] = relationship(
        "Item",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="Item.id",
    )

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, date={self.date})>"


class Item(SQLBase, TimestampMixin):
    """
    Item within an order.

    Attributes:
        order_id: Owning order
        name: Item name
        quantity: Number of units
    """

    __tablename__ = "items"

    order_id: Mapped[int] = mapped_column(
        ForeignKey("orders.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    order: Mapped["Order"] = relationship("Order", back_populates="items")

    def __repr__(self) -> str:
        return f"<Item(id={self.id}, name={self.name}, quantity={self.quantity})>"
