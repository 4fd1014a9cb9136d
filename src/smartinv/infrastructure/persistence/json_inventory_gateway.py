"""JSON-file-backed implementation of InventoryGateway."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation
from pathlib import Path

from smartinv.domain.exceptions import DomainException, PersistenceError, ValidationError
from smartinv.domain.model.product import (
    NonPerishableProduct,
    PerishableProduct,
    ProductKind,
    ProductRecord,
)
from smartinv.domain.model.value_objects import DEFAULT_CURRENCY, Money
from smartinv.domain.repository.inventory_gateway import InventoryGateway

logger = logging.getLogger(__name__)


class JsonInventoryGateway(InventoryGateway):

    def __init__(self, data_file: Path, report_file: Path) -> None:
        self._data_file = Path(data_file)
        self._report_file = Path(report_file)

    # --- InventoryGateway interface -------------------------------------------

    def load(self) -> list[ProductRecord] | None:
        if not self._data_file.exists():
            logger.info("No inventory file at %s", self._data_file)
            return None

        try:
            raw = json.loads(self._data_file.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Cannot read {self._data_file}: {exc}") from exc

        if not isinstance(raw, list):
            raise PersistenceError(f"{self._data_file} does not hold a list of products")

        try:
            records = [self._to_domain(item) for item in raw]
        except (KeyError, TypeError, ValueError, InvalidOperation, DomainException) as exc:
            raise PersistenceError(f"Malformed product in {self._data_file}: {exc}") from exc

        logger.info("Loaded %d product(s) from %s", len(records), self._data_file)
        return records

    def save(self, records: Sequence[ProductRecord]) -> None:
        raw = [self._to_raw(r) for r in records]
        self._write(self._data_file, json.dumps(raw, indent=2, ensure_ascii=False) + "\n")
        logger.info("Saved %d product(s) to %s", len(raw), self._data_file)

    def save_report(self, text: str) -> None:
        self._write(self._report_file, text)
        logger.info("Report written to %s", self._report_file)

    @property
    def report_file(self) -> Path:
        return self._report_file

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: ProductRecord) -> dict:
        raw = {
            "kind": record.kind.value,
            "id": record.id,
            "name": record.name,
            "unit_price": str(record.unit_price.amount),
            "currency": record.unit_price.currency,
            "quantity": record.quantity,
        }
        if isinstance(record, PerishableProduct):
            raw["expiry_date"] = record.expiry_date
        elif isinstance(record, NonPerishableProduct):
            raw["warranty"] = record.warranty
        return raw

    @staticmethod
    def _to_domain(raw: dict) -> ProductRecord:
        kind = ProductKind(raw["kind"])
        currency = raw.get("currency", DEFAULT_CURRENCY)
        if currency != DEFAULT_CURRENCY:
            raise ValidationError(f"unsupported currency {currency!r}")
        common = dict(
            id=int(raw["id"]),
            name=raw["name"],
            unit_price=Money(Decimal(raw["unit_price"]), currency),
            quantity=int(raw["quantity"]),
        )
        if kind is ProductKind.PERISHABLE:
            return PerishableProduct(**common, expiry_date=raw["expiry_date"])
        return NonPerishableProduct(**common, warranty=raw.get("warranty", "N/A"))

    # --- File helpers ---------------------------------------------------------

    @staticmethod
    def _write(path: Path, content: str) -> None:
        # Write beside the target then swap, so a failure leaves the old file intact.
        tmp = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(content, encoding="utf-8")
            os.replace(tmp, path)
        except OSError as exc:
            raise PersistenceError(f"Cannot write {path}: {exc}") from exc
