"""Abstract persistence gateway for the inventory.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from smartinv.domain.model.product import ProductRecord


class InventoryGateway(ABC):

    @abstractmethod
    def load(self) -> list[ProductRecord] | None:
        """Return the stored records in order, or None if nothing is stored.

        Raises PersistenceError if stored data exists but cannot be read.
        """

    @abstractmethod
    def save(self, records: Sequence[ProductRecord]) -> None:
        """Persist the full ordered record sequence, replacing what was there."""

    @abstractmethod
    def save_report(self, text: str) -> None:
        """Persist a report, overwriting any previous one."""
