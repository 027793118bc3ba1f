# ==============================================================================
# HEALTH ENDPOINT TESTS
# ==============================================================================
# Tests for root and health check endpoints
# ==============================================================================

import pytest
from httpx import AsyncClient


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    @pytest.mark.asyncio
    async def test_root_endpoint(self, client: AsyncClient):
        """Test root endpoint returns API info."""
        response = await client.get("/")

        assert response.status_code == 200
        data = response.json()

        assert "name" in data
        assert "version" in data
        assert data["health"] == "/health"

    @pytest.mark.asyncio
    async def test_health_endpoint(self, client: AsyncClient):
        """Test health endpoint reports a connected database."""
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()

        assert data["status"] == "healthy"
        assert data["database"] == "connected"
        assert data["version"] == "1.0.0"


class TestLifespan:
    """Tests for startup behaviour when the database is unavailable."""

    @pytest.fixture
    def failing_database(self, monkeypatch):
        from uow_orders.core.exceptions import DatabaseError
        from uow_orders.database.factory import DatabaseFactory

        async def initialize(*args, **kwargs):
            raise DatabaseError("unreachable")

        DatabaseFactory.reset()
        monkeypatch.setattr(DatabaseFactory, "initialize", initialize)
        yield
        DatabaseFactory.reset()

    @pytest.mark.asyncio
    async def test_production_startup_fails_without_database(
        self, monkeypatch, failing_database, restore_root_logger
    ):
        from uow_orders.core.exceptions import DatabaseError
        from uow_orders.core.settings import Environment, settings
        from uow_orders.main import app, lifespan

        monkeypatch.setattr(settings, "ENVIRONMENT", Environment.PRODUCTION)

        with pytest.raises(DatabaseError, match="unreachable"):
            async with lifespan(app):
                pass

    @pytest.mark.asyncio
    async def test_development_startup_continues_without_database(
        self, failing_database, restore_root_logger
    ):
        from uow_orders.main import app, lifespan

        started = False
        async with lifespan(app):
            started = True

        assert started
