"""Application service: Save Inventory use case."""

from __future__ import annotations

import logging

from smartinv.domain.exceptions import PersistenceError
from smartinv.domain.repository.inventory_gateway import InventoryGateway
from smartinv.domain.service.inventory_service import InventoryService

logger = logging.getLogger(__name__)


class SaveInventoryHandler:

    def __init__(self, service: InventoryService, gateway: InventoryGateway) -> None:
        self._service = service
        self._gateway = gateway

    def handle(self) -> bool:
        """Write every record to the gateway.

        A failed write is logged and reported through the return value;
        it never interrupts the session.
        """
        records = self._service.snapshot()
        try:
            self._gateway.save(records)
        except PersistenceError as exc:
            logger.error("Error saving inventory: %s", exc)
            return False
        logger.info("Saved %d product(s)", len(records))
        return True
