import logging
from pathlib import Path

import click

from smartinv.infrastructure.cli.inventory_commands import (
    inventory_list,
    inventory_low_stock,
    inventory_report,
)
from smartinv.infrastructure.cli.menu import run_menu


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory holding inventory.json and report.txt.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, verbose: bool) -> None:
    """Smart Inventory — stock tracking with background low-stock alerts"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = data_dir


# Register subcommands
cli.add_command(run_menu)
cli.add_command(inventory_list)
cli.add_command(inventory_low_stock)
cli.add_command(inventory_report)
