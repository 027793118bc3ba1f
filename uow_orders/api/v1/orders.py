# ==============================================================================
# ORDER ENDPOINTS - Order Routes
# ==============================================================================
# Two ways to make order creation atomic:
#   firstWay  - the endpoint opens the transaction explicitly
#   secondWay - TransactionalRoute wraps the whole endpoint invocation
# ==============================================================================

from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from uow_orders.api.dependencies import OrderServiceDep, TransactionBoundaryDep
from uow_orders.database.unit_of_work.boundary import TransactionalRoute
from uow_orders.domain_models.order import Order
from uow_orders.schemas.order import OrderCreate, OrderResponse

router = APIRouter(prefix="/order", tags=["Orders"])

# Every endpoint on this router runs inside its own transaction
transactional_router = APIRouter(
    prefix="/order",
    tags=["Orders"],
    route_class=TransactionalRoute,
)


@router.get(
    "",
    response_model=List[OrderResponse],
    summary="List orders",
    description="Get all orders with their items.",
)
async def list_orders(service: OrderServiceDep) -> List[Order]:
    """Get all orders."""
    return await service.get_all()


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Get order",
    description="Get one order with its items.",
)
async def get_order(order_id: int, service: OrderServiceDep) -> Order:
    """Get order by ID."""
    return await service.get_by_id(order_id)


@router.post(
    "/firstWay",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create order (explicit transaction)",
    description="Create an order and its items in one explicitly opened transaction.",
)
async def create_order_first_way(
    data: OrderCreate,
    service: OrderServiceDep,
    boundary: TransactionBoundaryDep,
) -> Order:
    """Create an order atomically by wrapping the service call."""
    return await boundary.run(lambda: service.create_order(data))


@transactional_router.post(
    "/secondWay",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create order (transactional route)",
    description="Create an order and its items; the route itself is transactional.",
)
async def create_order_second_way(
    data: OrderCreate,
    service: OrderServiceDep,
) -> Order:
    """Create an order atomically; the route class supplies the transaction."""
    return await service.create_order(data)
