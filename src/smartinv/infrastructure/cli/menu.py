"""Interactive menu: the foreground command loop.

Runs the seven-choice menu while a StockMonitor scans the same
InventoryService in the background. Every business error is shown and
the loop returns to the menu; only "Save & Exit" (or Ctrl-C / EOF)
leaves it.
"""

from __future__ import annotations

from pathlib import Path

import click

from smartinv.application.generate_report import GenerateReportHandler
from smartinv.application.load_inventory import LoadInventoryHandler
from smartinv.application.save_inventory import SaveInventoryHandler
from smartinv.application.stock_monitor import DEFAULT_MONITOR_INTERVAL
from smartinv.domain.exceptions import DomainException
from smartinv.domain.model.product import (
    NonPerishableProduct,
    PerishableProduct,
    ProductRecord,
)
from smartinv.domain.model.value_objects import Money
from smartinv.domain.service.inventory_service import LOW_STOCK_THRESHOLD, InventoryService
from smartinv.infrastructure.bootstrap import inventory_gateway, stock_monitor
from smartinv.infrastructure.cli.inventory_commands import (
    display_low_stock,
    display_products,
    display_report,
)
from smartinv.infrastructure.persistence.json_inventory_gateway import (
    JsonInventoryGateway,
)

MENU = """\
----------------------------------------
What would you like to do next?
1. Add Product
2. View All Products
3. Sell Product
4. Restock Product
5. View Low Stock Items
6. Generate Report
7. Save & Exit
----------------------------------------"""

SAVE_AND_EXIT = 7


def _background_alert(count: int) -> None:
    click.echo(f"\n[Background Alert] {count} product(s) running low on stock!")


def _prompt_product() -> ProductRecord | None:
    product_id = click.prompt("Enter Product ID", type=int)
    name = click.prompt("Enter Product Name").strip()
    try:
        price = Money.of(click.prompt("Enter Price"))
    except DomainException:
        click.echo("Invalid price format!")
        return None
    quantity = click.prompt("Enter Quantity", type=click.IntRange(min=0))

    if click.confirm("Is it perishable?", default=False):
        expiry = click.prompt("Enter Expiry Date (DD-MM-YYYY)")
        return PerishableProduct(product_id, name, price, quantity, expiry_date=expiry)
    warranty = click.prompt("Enter Warranty", default="N/A")
    return NonPerishableProduct(product_id, name, price, quantity, warranty=warranty)


def _add(service: InventoryService) -> None:
    record = _prompt_product()
    if record is None:
        return
    service.add_product(record)
    click.echo("Product added successfully!")


def _sell(service: InventoryService) -> None:
    product_id = click.prompt("Enter Product ID", type=int)
    quantity = click.prompt("Enter Quantity to sell", type=int)
    receipt = service.sell_product(product_id, quantity)
    click.echo(f"Sale successful! Remaining quantity: {receipt.remaining}")


def _restock(service: InventoryService) -> None:
    product_id = click.prompt("Enter Product ID", type=int)
    quantity = click.prompt("Enter Quantity to restock", type=int)
    new_quantity = service.restock_product(product_id, quantity)
    if new_quantity is None:
        click.echo("Product not found!")
    else:
        click.echo(f"Product restocked! New quantity: {new_quantity}")


def _report(service: InventoryService, gateway: JsonInventoryGateway) -> None:
    result = GenerateReportHandler(service, gateway).handle()
    display_report(result, gateway.report_file)


def _save(service: InventoryService, gateway: JsonInventoryGateway) -> None:
    if SaveInventoryHandler(service, gateway).handle():
        click.echo("Inventory saved successfully!")
    else:
        click.echo("Error saving inventory, see the log for details.", err=True)


def _dispatch(
    choice: int,
    service: InventoryService,
    gateway: JsonInventoryGateway,
    threshold: int,
) -> None:
    if choice == 1:
        _add(service)
    elif choice == 2:
        display_products(service.list_all())
    elif choice == 3:
        _sell(service)
    elif choice == 4:
        _restock(service)
    elif choice == 5:
        display_low_stock(service, threshold)
    elif choice == 6:
        _report(service, gateway)


@click.command("run")
@click.option(
    "--interval", default=DEFAULT_MONITOR_INTERVAL, show_default=True,
    type=click.FloatRange(min=0, min_open=True),
    help="Seconds between background low-stock checks.",
)
@click.option(
    "--threshold", default=LOW_STOCK_THRESHOLD, show_default=True, type=int,
    help="Quantities below this count as low stock.",
)
@click.pass_obj
def run_menu(data_dir: Path, interval: float, threshold: int) -> None:
    """Start the interactive inventory menu."""
    gateway = inventory_gateway(data_dir)
    loaded = LoadInventoryHandler(gateway).handle()
    service = loaded.service
    if loaded.seeded:
        click.echo("No previous data found. Starting with sample data.")
    else:
        click.echo("Inventory loaded successfully!")

    monitor = stock_monitor(
        service, interval=interval, threshold=threshold, on_alert=_background_alert
    )
    monitor.start()
    try:
        while True:
            click.echo(MENU)
            choice = click.prompt(
                "Enter your choice", type=click.IntRange(1, SAVE_AND_EXIT)
            )
            if choice == SAVE_AND_EXIT:
                _save(service, gateway)
                break
            try:
                _dispatch(choice, service, gateway, threshold)
            except DomainException as exc:
                click.echo(str(exc))
    finally:
        monitor.stop()

    click.echo("Thank you for using Smart Inventory!")
