"""CLI commands for warehouse stock sheets."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click

from wms.application.context import InventoryContext
from wms.application.dto import StockSheet
from wms.application.load_stock_sheet import LoadStockSheetHandler
from wms.application.show_price_changes import ShowPriceChangesHandler
from wms.application.show_stock import ShowStockHandler
from wms.domain.exceptions import DomainException
from wms.infrastructure.bootstrap import stock_sheet_reader

_SHEET = click.argument(
    "sheet", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
_WAREHOUSE = click.option(
    "--warehouse", default=None, help="Warehouse name (overrides the sheet's)."
)


def _load(ctx: click.Context, sheet_path: Path, warehouse: str | None) -> StockSheet:
    inventory: InventoryContext = ctx.obj["inventory"]
    default_warehouse = ctx.obj["settings"].default_warehouse

    try:
        sheet = stock_sheet_reader(sheet_path).read(default_warehouse)
        if warehouse is not None:
            sheet = replace(sheet, warehouse=warehouse)
        LoadStockSheetHandler(inventory).handle(sheet)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    return sheet


@click.command("show")
@_SHEET
@_WAREHOUSE
@click.option("--category", default=None, help="Only show this category.")
@click.pass_context
def stock_show(
    ctx: click.Context, sheet: Path, warehouse: str | None, category: str | None
) -> None:
    """Show a warehouse's products grouped by category."""
    loaded = _load(ctx, sheet, warehouse)
    handler = ShowStockHandler(ctx.obj["inventory"])

    try:
        groups = handler.handle(loaded.warehouse, category_name=category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not any(group.products for group in groups):
        click.echo("No products found.")
        return

    for group in groups:
        click.echo(f"{group.category} ({len(group.products)})")
        for p in group.products:
            click.echo(f"  {p.id:<36} {p.name:<20} {p.price:>10}")


@click.command("changes")
@_SHEET
@_WAREHOUSE
@click.pass_context
def stock_changes(ctx: click.Context, sheet: Path, warehouse: str | None) -> None:
    """Show the price change log of a warehouse."""
    loaded = _load(ctx, sheet, warehouse)
    changes = ShowPriceChangesHandler(ctx.obj["inventory"]).handle(loaded.warehouse)

    if not changes:
        click.echo("No price changes.")
        return

    click.echo(f"{'ID':<36} {'Name':<20} {'Old':>10} {'Current':>10}")
    click.echo("-" * 79)
    for c in changes:
        click.echo(
            f"{c.product_id:<36} {c.product_name:<20} {c.old_price:>10} {c.current_price:>10}"
        )
