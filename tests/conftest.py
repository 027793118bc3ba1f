# ==============================================================================
# CONFTEST - Pytest Fixtures and Configuration
# ==============================================================================
# Shared fixtures for all tests
# ==============================================================================

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, AsyncIterator, Iterable, List, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment before importing app
os.environ["ENVIRONMENT"] = "development"
os.environ["DEBUG"] = "false"
os.environ["DATABASE_TYPE"] = "sqlite"
os.environ["FAULT_INJECTION_ENABLED"] = "false"
os.environ["SQLITE_BUSY_TIMEOUT"] = "30"

from uow_orders.database.adapters.base_adapter import BaseDatabaseAdapter  # noqa: E402
from uow_orders.database.adapters.sqlalchemy_adapter import SQLiteAdapter  # noqa: E402
from uow_orders.database.handles import DatabaseHandle, TransactionHandle  # noqa: E402


# ==============================================================================
# IN-MEMORY ADAPTER
# ==============================================================================

class StubDefaultHandle(DatabaseHandle):
    """Non-transactional handle that touches nothing."""

    @property
    def is_transactional(self) -> bool:
        return False

    async def save(self, instance: Any) -> Any:
        return instance

    async def get(self, model: Any, ident: Any, options: Iterable[Any] = ()) -> Optional[Any]:
        return None

    async def scalars(self, statement: Any) -> List[Any]:
        return []


class RecordingAdapter(BaseDatabaseAdapter):
    """
    Adapter without a database.

    Hands out real TransactionHandle objects (their state machine is
    driven exactly like the SQLAlchemy adapter drives it) and records
    every open, commit and rollback.
    """

    def __init__(self) -> None:
        self.events: List[tuple] = []
        self.handles: List[TransactionHandle] = []
        self._connected = True

    async def connect(self) -> None:
        self._connected = True

    async def disconnect(self) -> None:
        self._connected = False

    async def health_check(self) -> bool:
        return self._connected

    @property
    def is_connected(self) -> bool:
        return self._connected

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[TransactionHandle]:
        handle = TransactionHandle(session=object())
        handle.mark_open()
        self.handles.append(handle)
        self.events.append(("open", handle.transaction_id))
        try:
            yield handle
        except BaseException:
            handle.mark_rolled_back()
            self.events.append(("rollback", handle.transaction_id))
            raise
        handle.mark_committed()
        self.events.append(("commit", handle.transaction_id))

    def create_default_handle(self) -> DatabaseHandle:
        return StubDefaultHandle()

    def kinds(self) -> List[str]:
        return [kind for kind, _ in self.events]


@pytest.fixture
def recording_adapter() -> RecordingAdapter:
    """Adapter that records transaction lifecycle events."""
    return RecordingAdapter()


# ==============================================================================
# DATABASE FIXTURES
# ==============================================================================

@pytest.fixture
def database_url(tmp_path) -> str:
    """File-backed SQLite database unique to the test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'test_orders.db'}"


@pytest_asyncio.fixture
async def sqlite_adapter(database_url: str) -> AsyncGenerator[SQLiteAdapter, None]:
    """Connected SQLite adapter with tables created."""
    adapter = SQLiteAdapter(database_url=database_url)
    await adapter.connect()
    yield adapter
    await adapter.disconnect()


# ==============================================================================
# HTTP CLIENT FIXTURES
# ==============================================================================

@pytest_asyncio.fixture
async def client(database_url: str) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    from uow_orders.database.factory import DatabaseFactory
    from uow_orders.main import app

    # Reset factory to ensure clean state
    DatabaseFactory.reset()
    await DatabaseFactory.initialize(database_url=database_url)

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        timeout=30.0,
    ) as async_client:
        yield async_client

    app.dependency_overrides.clear()
    await DatabaseFactory.shutdown()
    DatabaseFactory.reset()


@pytest.fixture
def always_fail(client: AsyncClient):
    """Make every order item write fail with an injected fault."""
    from uow_orders.api.dependencies import get_fault_injector
    from uow_orders.main import app
    from uow_orders.services.fault_injection import FaultInjector

    app.dependency_overrides[get_fault_injector] = (
        lambda: FaultInjector(enabled=True, probability=1.0)
    )
    yield
    app.dependency_overrides.pop(get_fault_injector, None)


# ==============================================================================
# HELPER FIXTURES
# ==============================================================================

@pytest.fixture
def sample_order_data() -> dict:
    """Order with two items."""
    return {
        "date": "2024-05-01",
        "description": "Weekly groceries",
        "items": [
            {"name": "milk", "quantity": 2},
            {"name": "bread", "quantity": 1},
        ],
    }


@pytest.fixture
def restore_root_logger():
    """Undo root logger changes made by configure_logging."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
