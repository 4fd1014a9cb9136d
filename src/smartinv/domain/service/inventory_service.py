"""Domain service: Inventory.

The single owner of the record store and the sales ledger. Every
mutation and every full scan runs inside one lock, so a concurrent
reader (the background stock monitor) sees the state either entirely
before or entirely after any sale, restock or add.

Readers only ever receive copies of the stored records.
"""

from __future__ import annotations

import copy
import logging
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime

from smartinv.domain.exceptions import (
    InsufficientStockError,
    ProductNotFoundError,
    ValidationError,
)
from smartinv.domain.model.inventory import Inventory
from smartinv.domain.model.ledger import SalesLedger
from smartinv.domain.model.product import ProductRecord
from smartinv.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)

LOW_STOCK_THRESHOLD = 10


@dataclass(frozen=True)
class SaleReceipt:
    product_id: int
    product_name: str
    quantity: int
    amount: Money
    remaining: int


@dataclass(frozen=True)
class InventorySummary:
    """Point-in-time aggregate figures, read in one critical section."""

    product_count: int
    total_items: int
    total_stock_value: Money
    total_sales: Money
    products: tuple[ProductRecord, ...]
    generated_at: datetime


class InventoryListing:
    """Lazy view over the store.

    Each iteration takes a fresh snapshot, so the same listing can be
    iterated again and will reflect later changes.
    """

    def __init__(self, service: InventoryService) -> None:
        self._service = service

    def __iter__(self) -> Iterator[ProductRecord]:
        return iter(self._service.snapshot())

    def __len__(self) -> int:
        return self._service.product_count


class InventoryService:

    def __init__(
        self,
        inventory: Inventory | None = None,
        ledger: SalesLedger | None = None,
    ) -> None:
        self._inventory = inventory if inventory is not None else Inventory()
        self._ledger = ledger if ledger is not None else SalesLedger()
        self._lock = threading.Lock()

    # --- Mutations ------------------------------------------------------------

    def load(self, records: Iterable[ProductRecord]) -> None:
        """Replace the whole store (startup only)."""
        records = [copy.copy(r) for r in records]
        for record in records:
            self._check_currency(record)
        with self._lock:
            self._inventory.replace_all(records)

    def add_product(self, record: ProductRecord) -> None:
        """Append a record. Duplicate ids are accepted as-is."""
        self._check_currency(record)
        with self._lock:
            self._inventory.append(copy.copy(record))
        logger.debug("Added product #%s %r", record.id, record.name)

    def sell_product(self, product_id: int, quantity: int) -> SaleReceipt:
        """Sell units of the first product matching ``product_id``.

        Raises ProductNotFoundError or InsufficientStockError without
        touching any state.
        """
        qty = Quantity(quantity).value
        with self._lock:
            record = self._inventory.find(product_id)
            if record is None:
                raise ProductNotFoundError(product_id)
            if qty > record.quantity:
                raise InsufficientStockError(
                    product_id, record.name, requested=qty, available=record.quantity
                )
            amount = record.unit_price * qty
            # Ledger first: if it rejects the amount, stock is untouched.
            self._ledger.record_sale(amount)
            record.quantity -= qty
            receipt = SaleReceipt(
                product_id=record.id,
                product_name=record.name,
                quantity=qty,
                amount=amount,
                remaining=record.quantity,
            )
        logger.debug("Sold %d x #%s for %s", qty, product_id, amount)
        return receipt

    def restock_product(self, product_id: int, quantity: int) -> int | None:
        """Add units to the first product matching ``product_id``.

        Returns the new quantity, or None when no product has that id.
        Unlike ``sell_product`` a missing id is only reported, not raised.
        """
        qty = Quantity(quantity).value
        with self._lock:
            record = self._inventory.find(product_id)
            if record is not None:
                record.quantity += qty
                new_quantity = record.quantity
        if record is None:
            logger.warning("Restock skipped: product #%s not found", product_id)
            return None
        logger.debug("Restocked %d x #%s, now %d", qty, product_id, new_quantity)
        return new_quantity

    def _check_currency(self, record: ProductRecord) -> None:
        currency = self._ledger.total.currency
        if record.unit_price.currency != currency:
            raise ValidationError(
                f"Product #{record.id} is priced in {record.unit_price.currency}, "
                f"inventory uses {currency}"
            )

    # --- Queries --------------------------------------------------------------

    def snapshot(self) -> list[ProductRecord]:
        with self._lock:
            return [copy.copy(r) for r in self._inventory]

    def list_all(self) -> InventoryListing:
        return InventoryListing(self)

    def low_stock_scan(self, threshold: int = LOW_STOCK_THRESHOLD) -> list[ProductRecord]:
        """Return copies of records with ``quantity < threshold``, in store order."""
        with self._lock:
            return [copy.copy(r) for r in self._inventory.below(threshold)]

    def aggregate_report(self) -> InventorySummary:
        with self._lock:
            products = tuple(copy.copy(r) for r in self._inventory)
            total_sales = self._ledger.total
        total_value = Money.zero(total_sales.currency)
        for record in products:
            total_value = total_value + record.stock_value
        return InventorySummary(
            product_count=len(products),
            total_items=sum(r.quantity for r in products),
            total_stock_value=total_value,
            total_sales=total_sales,
            products=products,
            generated_at=datetime.now(),
        )

    @property
    def total_sales(self) -> Money:
        with self._lock:
            return self._ledger.total

    @property
    def product_count(self) -> int:
        with self._lock:
            return len(self._inventory)
