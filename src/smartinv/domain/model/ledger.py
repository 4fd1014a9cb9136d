"""Running sales total for the current session (never persisted)."""

from __future__ import annotations

from dataclasses import dataclass, field

from smartinv.domain.model.value_objects import Money


@dataclass
class SalesLedger:
    total: Money = field(default_factory=Money.zero)

    def record_sale(self, amount: Money) -> None:
        # Money cannot be negative, so the total only grows.
        self.total = self.total + amount
