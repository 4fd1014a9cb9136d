"""Application service: Load Inventory use case.

Populates a fresh InventoryService from the gateway. When nothing usable
is stored (no file, an empty file, or an unreadable one) the four sample
products are seeded instead, so a first run always has data to work with.
"""

from __future__ import annotations

import logging

from smartinv.application.dto import LoadResult
from smartinv.domain.exceptions import DomainException, PersistenceError
from smartinv.domain.model.product import (
    NonPerishableProduct,
    PerishableProduct,
    ProductRecord,
)
from smartinv.domain.model.value_objects import Money
from smartinv.domain.repository.inventory_gateway import InventoryGateway
from smartinv.domain.service.inventory_service import InventoryService

logger = logging.getLogger(__name__)


def sample_products() -> list[ProductRecord]:
    return [
        PerishableProduct(101, "Milk", Money.of("45.0"), 15, expiry_date="20-10-2025"),
        NonPerishableProduct(102, "Sugar", Money.of("55.0"), 4, warranty="N/A"),
        NonPerishableProduct(103, "Tea Leaves", Money.of("120.0"), 2, warranty="N/A"),
        PerishableProduct(104, "Yogurt", Money.of("35.0"), 25, expiry_date="30-10-2025"),
    ]


class LoadInventoryHandler:

    def __init__(self, gateway: InventoryGateway) -> None:
        self._gateway = gateway

    def handle(self) -> LoadResult:
        service = InventoryService()
        records: list[ProductRecord] | None = None

        try:
            records = self._gateway.load()
        except PersistenceError as exc:
            logger.warning("Could not load stored inventory: %s", exc)

        if records:
            try:
                service.load(records)
            except DomainException as exc:
                logger.warning("Stored inventory rejected: %s", exc)
            else:
                logger.info("Loaded %d product(s)", len(records))
                return LoadResult(service=service, seeded=False)

        for record in sample_products():
            service.add_product(record)
        logger.info("No stored inventory, seeded sample products")
        return LoadResult(service=service, seeded=True)
