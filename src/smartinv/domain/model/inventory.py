"""Inventory aggregate — the ordered record store.

Holds product records in insertion order. It is not thread-safe on its
own; the InventoryService owns the only instance and serializes access.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from smartinv.domain.model.product import ProductRecord


@dataclass
class Inventory:
    """Aggregate root for stock tracking.

    Invariants:
    - element order only changes by appending
    - ``find()`` returns the first record with a matching id
    """

    records: list[ProductRecord] = field(default_factory=list)

    def append(self, record: ProductRecord) -> None:
        self.records.append(record)

    def replace_all(self, records: Iterable[ProductRecord]) -> None:
        self.records = list(records)

    def find(self, product_id: int) -> ProductRecord | None:
        for record in self.records:
            if record.id == product_id:
                return record
        return None

    def below(self, threshold: int) -> list[ProductRecord]:
        return [r for r in self.records if r.quantity < threshold]

    def __iter__(self) -> Iterator[ProductRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)
