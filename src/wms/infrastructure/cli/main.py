import click

from wms.infrastructure.bootstrap import init_app, settings
from wms.infrastructure.cli.stock_commands import stock_changes, stock_show


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """WMS: Warehouse inventory"""
    app_settings = settings()
    ctx.obj = {"settings": app_settings, "inventory": init_app(app_settings)}


@cli.group()
def stock() -> None:
    """Inspect a warehouse stock sheet."""


# Register subcommands
stock.add_command(stock_changes)
stock.add_command(stock_show)
