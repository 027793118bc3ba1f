# ==============================================================================
# FAULT INJECTION TESTS
# ==============================================================================

import random

import pytest

from uow_orders.core.exceptions import InjectedFaultError
from uow_orders.core.settings import Settings
from uow_orders.services.fault_injection import FaultInjector


class TestFaultInjector:
    """Tests for the probabilistic failure hook."""

    def test_disabled_never_fails(self):
        injector = FaultInjector(enabled=False, probability=1.0)

        for _ in range(50):
            injector.maybe_fail("save_order_item")

    def test_zero_probability_never_fails(self):
        injector = FaultInjector(enabled=True, probability=0.0)

        assert not any(injector.should_fail() for _ in range(50))

    def test_certain_failure_raises_injected_fault(self):
        injector = FaultInjector(enabled=True, probability=1.0)

        with pytest.raises(InjectedFaultError) as exc_info:
            injector.maybe_fail("save_order_item")

        error = exc_info.value
        assert error.error_code == "INJECTED_FAULT"
        assert error.status_code == 500
        assert error.details == {"operation": "save_order_item"}

    def test_seeded_rng_is_deterministic(self):
        first = FaultInjector(enabled=True, probability=0.6, rng=random.Random(7))
        second = FaultInjector(enabled=True, probability=0.6, rng=random.Random(7))

        assert [first.should_fail() for _ in range(20)] == [
            second.should_fail() for _ in range(20)
        ]

    def test_probability_is_respected(self):
        injector = FaultInjector(enabled=True, probability=0.6, rng=random.Random(1234))

        failures = sum(injector.should_fail() for _ in range(2000))

        assert 1000 < failures < 1400

    def test_rejects_invalid_probability(self):
        with pytest.raises(ValueError):
            FaultInjector(enabled=True, probability=1.5)

    def test_from_settings(self):
        config = Settings(
            _env_file=None,
            FAULT_INJECTION_ENABLED=True,
            FAULT_INJECTION_PROBABILITY=0.25,
        )

        injector = FaultInjector.from_settings(config)

        assert injector.enabled is True
        assert injector.probability == 0.25

    def test_disabled_by_default_in_settings(self):
        injector = FaultInjector.from_settings(Settings(_env_file=None))

        assert injector.enabled is False
