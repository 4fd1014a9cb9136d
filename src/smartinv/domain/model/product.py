"""Product records held by the inventory.

A record is either perishable (has an expiry date) or non-perishable
(has warranty text). Both share the same stock fields; they differ only
in the trailing detail shown by ``describe()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from smartinv.domain.exceptions import ValidationError
from smartinv.domain.model.value_objects import Money


class ProductKind(Enum):
    PERISHABLE = "perishable"
    NON_PERISHABLE = "non_perishable"


@dataclass
class ProductRecord:
    """Base record.

    Invariants:
    - ``quantity`` is never negative
    - ``unit_price`` is non-negative (enforced by Money)

    Duplicate ids are not rejected here or anywhere else; lookups by id
    resolve to the first record in store order.
    """

    kind: ClassVar[ProductKind]
    type_label: ClassVar[str]

    id: int
    name: str
    unit_price: Money
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValidationError(
                f"Quantity on hand cannot be negative, got {self.quantity}"
            )

    @property
    def detail(self) -> str:
        raise NotImplementedError

    @property
    def stock_value(self) -> Money:
        return self.unit_price * self.quantity

    def describe(self) -> str:
        return (
            f"{self.id:<6} {self.name:<20} {self.unit_price.amount:<11.1f} "
            f"{self.quantity:<10} {self.type_label:<14} {self.detail}"
        )


@dataclass
class PerishableProduct(ProductRecord):
    kind: ClassVar[ProductKind] = ProductKind.PERISHABLE
    type_label: ClassVar[str] = "Perishable"

    expiry_date: str = ""  # "DD-MM-YYYY", free text

    @property
    def detail(self) -> str:
        return f"Expiry: {self.expiry_date}"


@dataclass
class NonPerishableProduct(ProductRecord):
    kind: ClassVar[ProductKind] = ProductKind.NON_PERISHABLE
    type_label: ClassVar[str] = "Non-Perishable"

    warranty: str = "N/A"

    @property
    def detail(self) -> str:
        return f"Warranty: {self.warranty}"
