"""Application service: Generate Report use case.

Builds the daily inventory report from one consistent summary, writes it
through the gateway (overwriting the previous report) and hands the text
back for display.
"""

from __future__ import annotations

import logging

from smartinv.application.dto import ReportResult
from smartinv.domain.exceptions import PersistenceError
from smartinv.domain.repository.inventory_gateway import InventoryGateway
from smartinv.domain.service.inventory_service import InventoryService, InventorySummary

logger = logging.getLogger(__name__)

_RULE = "=" * 60
_THIN_RULE = "-" * 60


def render_report(summary: InventorySummary) -> str:
    lines = [
        "DAILY INVENTORY REPORT",
        f"Generated on: {summary.generated_at.isoformat(timespec='seconds')}",
        _RULE,
        f"Total Products in Stock: {summary.product_count}",
        f"Total Items Remaining: {summary.total_items}",
        f"Total Stock Value: {summary.total_stock_value}",
        f"Total Sales Today: {summary.total_sales}",
        _RULE,
        "",
        "PRODUCT DETAILS:",
        _THIN_RULE,
    ]
    for p in summary.products:
        lines.append(
            f"ID: {p.id} | {p.name} | "
            f"Price: {p.unit_price.symbol}{p.unit_price.amount:.1f} | Qty: {p.quantity}"
        )
    return "\n".join(lines) + "\n"


class GenerateReportHandler:

    def __init__(self, service: InventoryService, gateway: InventoryGateway) -> None:
        self._service = service
        self._gateway = gateway

    def handle(self) -> ReportResult:
        summary = self._service.aggregate_report()
        text = render_report(summary)

        try:
            self._gateway.save_report(text)
        except PersistenceError as exc:
            logger.error("Error saving report: %s", exc)
            return ReportResult(summary=summary, text=text, saved=False)

        return ReportResult(summary=summary, text=text, saved=True)
