import asyncio

import click

from stockorders.infrastructure.bootstrap import engine
from stockorders.infrastructure.cli.audit_commands import audit_list
from stockorders.infrastructure.cli.inventory_commands import (
    inventory_add,
    inventory_delete,
    inventory_list,
    inventory_restock,
    inventory_show,
    inventory_update,
)
from stockorders.infrastructure.cli.order_commands import order_create, order_list, order_show
from stockorders.infrastructure.config import get_settings
from stockorders.infrastructure.logging import setup_logging
from stockorders.infrastructure.persistence.schema import ensure_schema


@click.group()
def cli() -> None:
    """stockorders -- orders and inventory"""
    setup_logging(get_settings())


@cli.group()
def db() -> None:
    """Manage the database."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def inventory() -> None:
    """Manage inventory."""


@cli.group()
def audit() -> None:
    """Inspect the audit log."""


@db.command("init")
def db_init() -> None:
    """Create the database tables if they do not exist."""

    async def _init() -> None:
        db_engine = engine()
        try:
            await ensure_schema(db_engine)
        finally:
            await db_engine.dispose()

    asyncio.run(_init())
    click.echo("Database initialised.")


# Register subcommands
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
inventory.add_command(inventory_add)
inventory.add_command(inventory_delete)
inventory.add_command(inventory_list)
inventory.add_command(inventory_restock)
inventory.add_command(inventory_show)
inventory.add_command(inventory_update)
audit.add_command(audit_list)
