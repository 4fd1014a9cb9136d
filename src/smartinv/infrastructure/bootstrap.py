"""Factories that turn CLI options into a JSON gateway and a stock monitor.

File names inside the data directory are fixed here; nothing else in the
package knows where inventory or reports are written.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from smartinv.application.stock_monitor import (
    DEFAULT_MONITOR_INTERVAL,
    StockMonitor,
    log_alert,
)
from smartinv.domain.service.inventory_service import (
    LOW_STOCK_THRESHOLD,
    InventoryService,
)
from smartinv.infrastructure.persistence.json_inventory_gateway import (
    JsonInventoryGateway,
)

INVENTORY_FILE = "inventory.json"
REPORT_FILE = "report.txt"


def inventory_gateway(data_dir: Path) -> JsonInventoryGateway:
    data_dir = Path(data_dir)
    return JsonInventoryGateway(data_dir / INVENTORY_FILE, data_dir / REPORT_FILE)


def stock_monitor(
    service: InventoryService,
    interval: float = DEFAULT_MONITOR_INTERVAL,
    threshold: int = LOW_STOCK_THRESHOLD,
    on_alert: Callable[[int], None] = log_alert,
) -> StockMonitor:
    return StockMonitor(service, interval=interval, threshold=threshold, on_alert=on_alert)
