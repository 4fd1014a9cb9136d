"""In-memory fake gateway for testing.

Implements the same abstract interface as the JSON gateway but keeps
everything in lists. No file I/O, no side effects.
"""

from __future__ import annotations

import copy
from collections.abc import Sequence

from smartinv.domain.exceptions import PersistenceError
from smartinv.domain.model.product import ProductRecord
from smartinv.domain.repository.inventory_gateway import InventoryGateway


class FakeInventoryGateway(InventoryGateway):

    def __init__(
        self,
        records: list[ProductRecord] | None = None,
        fail_load: bool = False,
        fail_save: bool = False,
    ) -> None:
        self.stored = records
        self.reports: list[str] = []
        self.fail_load = fail_load
        self.fail_save = fail_save

    def load(self) -> list[ProductRecord] | None:
        if self.fail_load:
            raise PersistenceError("disk on fire")
        if self.stored is None:
            return None
        return [copy.copy(r) for r in self.stored]

    def save(self, records: Sequence[ProductRecord]) -> None:
        if self.fail_save:
            raise PersistenceError("read-only filesystem")
        self.stored = [copy.copy(r) for r in records]

    def save_report(self, text: str) -> None:
        if self.fail_save:
            raise PersistenceError("read-only filesystem")
        self.reports.append(text)
