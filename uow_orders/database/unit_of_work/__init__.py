# ==============================================================================
# UNIT OF WORK PACKAGE INITIALIZATION
# ==============================================================================

"""
Unit of Work Pattern Implementation
===================================

Ambient transactions shared across repository calls:
- UnitOfWork: current_handle / run_transactional / around-handler
- TransactionBoundary: explicit entry point
- TransactionalRoute: FastAPI route class wrapping a whole endpoint
"""

from uow_orders.database.unit_of_work.uow import TRANSACTION_HANDLE_KEY, UnitOfWork
from uow_orders.database.unit_of_work.boundary import (
    TransactionalRoute,
    TransactionBoundary,
)

__all__ = [
    "TRANSACTION_HANDLE_KEY",
    "UnitOfWork",
    "TransactionBoundary",
    "TransactionalRoute",
]
