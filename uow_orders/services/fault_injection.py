# ==============================================================================
# FAULT INJECTION - Simulated Write Failures
# ==============================================================================
# Randomly fails selected operations to exercise rollback paths
# Disabled unless FAULT_INJECTION_ENABLED is set
# ==============================================================================

from __future__ import annotations

import logging
import random
from typing import Optional

from uow_orders.core.exceptions import InjectedFaultError
from uow_orders.core.settings import Settings

logger = logging.getLogger(__name__)


class FaultInjector:
    """
    Probabilistic failure hook.

    Attributes:
        enabled: Whether faults are injected at all
        probability: Chance in [0, 1] that a single check fails

    Example:
        >>> injector = FaultInjector(enabled=True, probability=1.0)
        >>> injector.maybe_fail("save_order_item")
        Traceback (most recent call last):
        InjectedFaultError: Injected failure in save_order_item
    """

    def __init__(
        self,
        enabled: bool = False,
        probability: float = 0.0,
        rng: Optional[random.Random] = None,
    ) -> None:
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability must be within [0, 1], got {probability}")
        self.enabled = enabled
        self.probability = probability
        self._rng = rng or random.Random()

    @classmethod
    def from_settings(cls, settings: Settings) -> "FaultInjector":
        return cls(
            enabled=settings.FAULT_INJECTION_ENABLED,
            probability=settings.FAULT_INJECTION_PROBABILITY,
        )

    def should_fail(self) -> bool:
        if not self.enabled or self.probability <= 0.0:
            return False
        return self._rng.random() < self.probability

    def maybe_fail(self, operation: str) -> None:
        """
        Raise InjectedFaultError if this check is selected to fail.

        Args:
            operation: Name of the guarded operation (for logs and details)

        Raises:
            InjectedFaultError: When a fault is injected
        """
        if self.should_fail():
            logger.warning(f"Injecting fault into {operation}")
            raise InjectedFaultError(
                message=f"Injected failure in {operation}",
                operation=operation,
            )
