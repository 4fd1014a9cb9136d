"""CLI commands that read the stored inventory and exit."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import click

from smartinv.application.dto import ReportResult
from smartinv.application.generate_report import GenerateReportHandler
from smartinv.application.load_inventory import LoadInventoryHandler
from smartinv.domain.exceptions import DomainException
from smartinv.domain.model.product import ProductRecord
from smartinv.domain.service.inventory_service import LOW_STOCK_THRESHOLD, InventoryService
from smartinv.infrastructure.bootstrap import inventory_gateway

_RULE = "-" * 61


def display_products(products: Iterable[ProductRecord]) -> None:
    """Shared formatting for the inventory table."""
    products = list(products)
    if not products:
        click.echo("No products in inventory.")
        return

    click.echo("CURRENT INVENTORY")
    click.echo(_RULE)
    click.echo(
        f"{'ID':<6} {'Name':<20} {'Price (₹)':<11} {'Quantity':<10} {'Type':<14} Extra Info"
    )
    click.echo(_RULE)
    for p in products:
        click.echo(p.describe())
    click.echo(_RULE)
    click.echo(f"Total Products: {len(products)}")


def display_low_stock(service: InventoryService, threshold: int = LOW_STOCK_THRESHOLD) -> None:
    click.echo("Low Stock Alert!")
    low = service.low_stock_scan(threshold)
    if not low:
        click.echo("All products are well stocked!")
        return
    for p in low:
        click.echo(f" - {p.name} ({p.quantity} left)")


def display_report(result: ReportResult, report_file: Path) -> None:
    s = result.summary
    click.echo("DAILY INVENTORY REPORT")
    click.echo(_RULE)
    click.echo(f"Total Products in Stock: {s.product_count}")
    click.echo(f"Total Items Remaining: {s.total_items}")
    click.echo(f"Total Stock Value: {s.total_stock_value}")
    click.echo(f"Total Sales Today: {s.total_sales}")
    if result.saved:
        click.echo(f"Report generated and saved to '{report_file}'")
    else:
        click.echo("Error saving report, see the log for details.", err=True)


def _load(data_dir: Path) -> InventoryService:
    return LoadInventoryHandler(inventory_gateway(data_dir)).handle().service


@click.command("list")
@click.pass_obj
def inventory_list(data_dir: Path) -> None:
    """List all products."""
    display_products(_load(data_dir).list_all())


@click.command("low-stock")
@click.option(
    "--threshold", default=LOW_STOCK_THRESHOLD, show_default=True, type=int,
    help="Quantities below this are reported.",
)
@click.pass_obj
def inventory_low_stock(data_dir: Path, threshold: int) -> None:
    """Show products running low on stock."""
    display_low_stock(_load(data_dir), threshold)


@click.command("report")
@click.pass_obj
def inventory_report(data_dir: Path) -> None:
    """Generate the daily report and save it beside the inventory file."""
    gateway = inventory_gateway(data_dir)
    service = LoadInventoryHandler(gateway).handle().service
    try:
        result = GenerateReportHandler(service, gateway).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_report(result, gateway.report_file)
