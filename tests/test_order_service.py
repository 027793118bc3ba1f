# ==============================================================================
# ORDER SERVICE TESTS
# ==============================================================================
# The same service code with and without an enclosing unit of work
# ==============================================================================

import asyncio

import pytest

from uow_orders.core.exceptions import InjectedFaultError, NotFoundError
from uow_orders.database.repositories import OrderRepository
from uow_orders.database.unit_of_work import UnitOfWork
from uow_orders.schemas.order import OrderCreate
from uow_orders.services import FaultInjector, OrderService


class ScriptedRandom:
    """RNG stand-in returning a fixed sequence of draws."""

    def __init__(self, *draws: float) -> None:
        self._draws = list(draws)

    def random(self) -> float:
        return self._draws.pop(0)


def make_service(adapter, fault_injector=None):
    uow = UnitOfWork(adapter)
    service = OrderService(OrderRepository(uow, fault_injector))
    return uow, service


def order_with_items(*names: str) -> OrderCreate:
    return OrderCreate(
        date="2024-05-01",
        description="test order",
        items=[{"name": name, "quantity": 1} for name in names],
    )


# Second item write fails, first succeeds
def fail_second_item() -> FaultInjector:
    return FaultInjector(enabled=True, probability=0.5, rng=ScriptedRandom(0.9, 0.1))


class TestReads:
    """Tests for order retrieval."""

    @pytest.mark.asyncio
    async def test_get_by_id_returns_items(self, sqlite_adapter):
        uow, service = make_service(sqlite_adapter)
        created = await uow.run_transactional(
            lambda: service.create_order(order_with_items("a", "b"))
        )

        found = await service.get_by_id(created.id)

        assert found.description == "test order"
        assert [item.name for item in found.items] == ["a", "b"]
        assert all(item.order_id == created.id for item in found.items)

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, sqlite_adapter):
        _, service = make_service(sqlite_adapter)

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_by_id(999)

        assert exc_info.value.details == {"resource_type": "order", "resource_id": "999"}

    @pytest.mark.asyncio
    async def test_get_all_ordered_by_id(self, sqlite_adapter):
        _, service = make_service(sqlite_adapter)
        await service.create_order(order_with_items("x"))
        await service.create_order(order_with_items())

        orders = await service.get_all()

        assert [len(order.items) for order in orders] == [1, 0]
        assert orders[0].id < orders[1].id


class TestTransactionalCreation:
    """Order creation inside a unit of work is all-or-nothing."""

    @pytest.mark.asyncio
    async def test_success_commits_everything(self, sqlite_adapter):
        uow, service = make_service(sqlite_adapter)

        order = await uow.run_transactional(
            lambda: service.create_order(order_with_items("a", "b", "c"))
        )

        stored = await service.get_by_id(order.id)
        assert len(stored.items) == 3

    @pytest.mark.asyncio
    async def test_failure_after_partial_writes_persists_nothing(self, sqlite_adapter):
        uow, service = make_service(sqlite_adapter, fail_second_item())

        with pytest.raises(InjectedFaultError):
            await uow.run_transactional(
                lambda: service.create_order(order_with_items("a", "b", "c"))
            )

        assert await service.get_all() == []

    @pytest.mark.asyncio
    async def test_concurrent_failure_does_not_touch_other_transaction(self, sqlite_adapter):
        uow = UnitOfWork(sqlite_adapter)
        good = OrderService(OrderRepository(uow))
        bad = OrderService(
            OrderRepository(uow, FaultInjector(enabled=True, probability=1.0))
        )

        results = await asyncio.gather(
            uow.run_transactional(lambda: good.create_order(order_with_items("ok"))),
            uow.run_transactional(lambda: bad.create_order(order_with_items("boom"))),
            return_exceptions=True,
        )

        assert isinstance(results[1], InjectedFaultError)
        stored = await good.get_all()
        assert [order.id for order in stored] == [results[0].id]
        assert [item.name for item in stored[0].items] == ["ok"]


class TestNonTransactionalCreation:
    """Without a unit of work every write commits on its own."""

    @pytest.mark.asyncio
    async def test_success_persists_everything(self, sqlite_adapter):
        _, service = make_service(sqlite_adapter)

        order = await service.create_order(order_with_items("a", "b"))

        stored = await service.get_by_id(order.id)
        assert [item.name for item in stored.items] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_failure_leaves_earlier_writes(self, sqlite_adapter):
        _, service = make_service(sqlite_adapter, fail_second_item())

        with pytest.raises(InjectedFaultError):
            await service.create_order(order_with_items("a", "b", "c"))

        orders = await service.get_all()
        assert len(orders) == 1
        assert [item.name for item in orders[0].items] == ["a"]

    @pytest.mark.asyncio
    async def test_failure_on_first_item_leaves_bare_order(self, sqlite_adapter):
        _, service = make_service(
            sqlite_adapter, FaultInjector(enabled=True, probability=1.0)
        )

        with pytest.raises(InjectedFaultError):
            await service.create_order(order_with_items("a"))

        orders = await service.get_all()
        assert len(orders) == 1
        assert orders[0].items == []
