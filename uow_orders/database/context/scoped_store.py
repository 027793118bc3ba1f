# ==============================================================================
# EXECUTION-SCOPED STORE - Ambient State per Logical Execution
# ==============================================================================
# Key-value scope bound to one asyncio call tree via contextvars
# Visible to every awaited descendant, invisible to concurrent siblings
# ==============================================================================

from __future__ import annotations

import contextvars
import inspect
from contextlib import asynccontextmanager
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    MutableMapping,
    Optional,
    TypeVar,
    Union,
)

T = TypeVar("T")

ScopeState = MutableMapping[str, Any]


class ExecutionScopedStore:
    """
    Container whose contents follow one logical call tree.

    Each asyncio Task runs in its own copy of the context it was created
    from, so a scope entered here is seen by everything the current task
    awaits and by tasks it spawns, but never by unrelated tasks that
    happen to be interleaved on the same event loop.

    Scopes nest: entering a scope shadows the enclosing one until the
    inner scope exits, after which the enclosing one is visible again.

    Example:
        >>> store = ExecutionScopedStore("request_state")
        >>> async def work():
        ...     store.get_current()["user"] = "alice"
        ...     return await load_profile()  # sees store.get("user")
        >>> await store.run_scoped({}, work)
    """

    def __init__(self, name: str = "execution_scope") -> None:
        """
        Initialize the store.

        Args:
            name: Name of the underlying context variable (for debugging)
        """
        self._name = name
        self._state: contextvars.ContextVar[Optional[ScopeState]] = (
            contextvars.ContextVar(name, default=None)
        )

    @property
    def name(self) -> str:
        """Name of the underlying context variable."""
        return self._name

    # ==========================================================================
    # SCOPE MANAGEMENT
    # ==========================================================================

    @asynccontextmanager
    async def scope(
        self,
        initial_state: Optional[ScopeState] = None,
    ) -> AsyncIterator[ScopeState]:
        """
        Make ``initial_state`` the current scope for the enclosed block.

        Args:
            initial_state: Backing mapping for the scope (new dict if None)

        Yields:
            The scope's backing mapping
        """
        state: ScopeState = {} if initial_state is None else initial_state
        token = self._state.set(state)
        try:
            yield state
        finally:
            self._state.reset(token)

    async def run_scoped(
        self,
        initial_state: Optional[ScopeState],
        work: Callable[[], Union[Awaitable[T], T]],
    ) -> T:
        """
        Run ``work`` with ``initial_state`` as the current scope.

        The scope covers the full dynamic extent of ``work``, including
        every resumption after a suspension point. The caller's own scope
        is untouched once this returns or raises.

        Args:
            initial_state: Backing mapping for the scope (new dict if None)
            work: Zero-argument callable, sync or async

        Returns:
            Result of ``work``

        Raises:
            Whatever ``work`` raises, unchanged
        """
        async with self.scope(initial_state):
            result = work()
            if inspect.isawaitable(result):
                result = await result
            return result

    # ==========================================================================
    # LOOKUP
    # ==========================================================================

    def get_current(self) -> Optional[ScopeState]:
        """Return the nearest enclosing scope, or None outside any scope."""
        return self._state.get()

    def get(self, key: str, default: Any = None) -> Any:
        """Look up ``key`` in the current scope."""
        state = self._state.get()
        if state is None:
            return default
        return state.get(key, default)

