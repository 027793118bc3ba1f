# ==============================================================================
# EXECUTION CONTEXT PACKAGE INITIALIZATION
# ==============================================================================

"""
Execution Context
=================

Ambient, execution-scoped state shared along one asyncio call tree:
- ExecutionScopedStore: contextvars-backed scope container
"""

from uow_orders.database.context.scoped_store import (
    ExecutionScopedStore,
    ScopeState,
)

__all__ = [
    "ExecutionScopedStore",
    "ScopeState",
]
