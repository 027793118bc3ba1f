# ==============================================================================
# API DEPENDENCIES - Dependency Injection
# ==============================================================================
# FastAPI dependencies for the unit of work, repositories and services
# ==============================================================================

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from uow_orders.core.settings import settings
from uow_orders.database.repositories.order_repository import OrderRepository
from uow_orders.database.unit_of_work.boundary import TransactionBoundary
from uow_orders.database.unit_of_work.uow import UnitOfWork
from uow_orders.services.fault_injection import FaultInjector
from uow_orders.services.order_service import OrderService


# ==============================================================================
# UNIT OF WORK DEPENDENCIES
# ==============================================================================

def get_unit_of_work(request: Request) -> UnitOfWork:
    """Application-wide UnitOfWork created in create_app()."""
    return request.app.state.unit_of_work


UnitOfWorkDep = Annotated[UnitOfWork, Depends(get_unit_of_work)]


def get_transaction_boundary(uow: UnitOfWorkDep) -> TransactionBoundary:
    return TransactionBoundary(uow)


TransactionBoundaryDep = Annotated[TransactionBoundary, Depends(get_transaction_boundary)]


def get_fault_injector() -> FaultInjector:
    """
    Fault injector configured from settings.

    Override in tests via ``app.dependency_overrides``.
    """
    return FaultInjector.from_settings(settings)


FaultInjectorDep = Annotated[FaultInjector, Depends(get_fault_injector)]


# ==============================================================================
# REPOSITORY / SERVICE DEPENDENCIES
# ==============================================================================

def get_order_repository(
    uow: UnitOfWorkDep,
    fault_injector: FaultInjectorDep,
) -> OrderRepository:
    return OrderRepository(uow, fault_injector)


OrderRepositoryDep = Annotated[OrderRepository, Depends(get_order_repository)]


def get_order_service(repository: OrderRepositoryDep) -> OrderService:
    return OrderService(repository)


OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]
