# ==============================================================================
# TRANSACTION BOUNDARY - Entry Points into the Unit of Work
# ==============================================================================
# Explicit: TransactionBoundary.run(work) around a block of business logic
# Cross-cutting: TransactionalRoute wraps a whole endpoint invocation
# ==============================================================================

from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar, Union

from fastapi import Request, Response
from fastapi.routing import APIRoute

from uow_orders.database.unit_of_work.uow import UnitOfWork

T = TypeVar("T")


class TransactionBoundary:
    """
    Thin entry point for callers that start a unit of work.

    Adds no transaction logic of its own; both methods delegate to the
    UnitOfWork.

    Example:
        >>> boundary = TransactionBoundary(uow)
        >>> order = await boundary.run(lambda: order_service.create_order(dto))
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def run(self, work: Callable[[], Union[Awaitable[T], T]]) -> T:
        """Run ``work`` as one transaction."""
        return await self._uow.run_transactional(work)

    async def around(self, next_step: Callable[[], Any]) -> Any:
        """Run the continuation ``next_step`` as one transaction."""
        return await self._uow.run_transactional_around_handler(next_step)


class TransactionalRoute(APIRoute):
    """
    Route class that runs each request to the endpoint in a transaction.

    The wrapped handler covers dependency resolution, the endpoint call
    and response serialization, so the transaction commits only after
    the response body has been produced. Errors propagate to the
    application's exception handlers after the rollback.

    Requires ``app.state.unit_of_work`` to hold the UnitOfWork.

    Example:
        >>> router = APIRouter(route_class=TransactionalRoute)
        >>> @router.post("/secondWay")
        ... async def create(dto: OrderCreate, service: OrderServiceDep):
        ...     return await service.create_order(dto)
    """

    def get_route_handler(self) -> Callable[[Request], Awaitable[Response]]:
        handler = super().get_route_handler()

        async def transactional_handler(request: Request) -> Response:
            boundary = TransactionBoundary(request.app.state.unit_of_work)
            return await boundary.around(lambda: handler(request))

        return transactional_handler
