"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry results from the application layer to the CLI without the
CLI having to know how they were produced.
"""

from __future__ import annotations

from dataclasses import dataclass

from smartinv.domain.service.inventory_service import InventoryService, InventorySummary


@dataclass(frozen=True)
class LoadResult:
    """Output: the populated service and where its records came from."""

    service: InventoryService
    seeded: bool  # True when the sample products were used


@dataclass(frozen=True)
class ReportResult:
    """Output: the rendered report and whether it reached disk."""

    summary: InventorySummary
    text: str
    saved: bool
