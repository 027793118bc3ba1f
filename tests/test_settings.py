# ==============================================================================
# SETTINGS TESTS
# ==============================================================================

import pytest
from pydantic import ValidationError

from uow_orders.core.settings import DatabaseType, Environment, Settings


class TestSettings:
    """Tests for environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        for name in ("DATABASE_TYPE", "ENVIRONMENT", "DEBUG", "FAULT_INJECTION_ENABLED"):
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)

        assert config.API_V1_PREFIX == "/v1"
        assert config.DATABASE_TYPE is DatabaseType.SQLITE
        assert config.ENVIRONMENT is Environment.DEVELOPMENT
        assert config.FAULT_INJECTION_ENABLED is False
        assert config.FAULT_INJECTION_PROBABILITY == 0.6
        assert config.is_production is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("FAULT_INJECTION_ENABLED", "true")
        monkeypatch.setenv("FAULT_INJECTION_PROBABILITY", "0.9")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("ENVIRONMENT", "production")

        config = Settings(_env_file=None)

        assert config.FAULT_INJECTION_ENABLED is True
        assert config.FAULT_INJECTION_PROBABILITY == 0.9
        assert config.LOG_LEVEL == "DEBUG"
        assert config.is_production is True

    def test_sqlite_url_gets_async_driver(self, monkeypatch):
        monkeypatch.setenv("DATABASE_TYPE", "sqlite")
        monkeypatch.setenv("SQLITE_URL", "sqlite:///./orders.db")

        config = Settings(_env_file=None)

        assert config.sqlite_async_url == "sqlite+aiosqlite:///./orders.db"
        assert config.database_url == config.sqlite_async_url

    def test_postgres_url(self, monkeypatch):
        monkeypatch.setenv("DATABASE_TYPE", "postgresql")
        monkeypatch.setenv("POSTGRES_USER", "orders")
        monkeypatch.setenv("POSTGRES_PASSWORD", "secret")
        monkeypatch.setenv("POSTGRES_HOST", "db")
        monkeypatch.setenv("POSTGRES_PORT", "5433")
        monkeypatch.setenv("POSTGRES_DB", "orders")

        config = Settings(_env_file=None)

        assert config.database_url == "postgresql+asyncpg://orders:secret@db:5433/orders"

    def test_rejects_out_of_range_probability(self, monkeypatch):
        monkeypatch.setenv("FAULT_INJECTION_PROBABILITY", "2")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_rejects_unknown_log_format(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "xml")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
