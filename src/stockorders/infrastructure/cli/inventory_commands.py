"""CLI commands for inventory management."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from stockorders.application.dto import InventoryDTO, inventory_to_dto
from stockorders.infrastructure.cli.results import raise_failure, run


def _parse_price(ctx: click.Context, param: click.Parameter, value: str) -> Decimal:
    try:
        price = Decimal(value)
    except InvalidOperation:
        raise click.BadParameter(f"Invalid price: {value!r}")
    if not price.is_finite():
        raise click.BadParameter(f"Invalid price: {value!r}")
    return price


def _echo_table(rows: list[InventoryDTO]) -> None:
    click.echo(f"{'ID':<6} {'Product':<20} {'Stock':>8} {'Price':>10}")
    click.echo("-" * 47)
    for row in rows:
        click.echo(
            f"{row.product_id:<6} {row.product_name:<20} {row.stock:>8} {row.unit_price:>10}"
        )


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--stock", required=True, type=int, help="Opening stock level.")
@click.option("--price", required=True, callback=_parse_price, help="Unit price (e.g. 15.00).")
def inventory_add(name: str, stock: int, price: Decimal) -> None:
    """Add a new product with its opening stock."""
    result = run(lambda s: s.inventory.create(name, stock, price))
    product_id = result.match(success=lambda value: value, failure=raise_failure)
    click.echo(f"Product #{product_id} '{name.strip()}' added ({stock} in stock)")


@click.command("list")
def inventory_list() -> None:
    """Show current inventory levels."""
    result = run(lambda s: s.inventory.get_all())
    items = result.match(success=lambda value: value, failure=raise_failure)

    if not items:
        click.echo("No inventory records found.")
        return
    _echo_table([inventory_to_dto(item) for item in items])


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def inventory_show(product_id: int) -> None:
    """Show a single product."""
    result = run(lambda s: s.inventory.get_by_product_id(product_id))
    item = result.match(success=lambda value: value, failure=raise_failure)
    _echo_table([inventory_to_dto(item)])


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--stock", required=True, type=int, help="New stock level.")
@click.option("--price", required=True, callback=_parse_price, help="New unit price.")
def inventory_update(product_id: int, name: str, stock: int, price: Decimal) -> None:
    """Replace name, stock and price of a product."""
    result = run(lambda s: s.inventory.update(product_id, name, stock, price))
    result.match(success=lambda _: None, failure=raise_failure)
    click.echo(f"Product #{product_id} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def inventory_delete(product_id: int) -> None:
    """Delete a product from inventory."""
    result = run(lambda s: s.inventory.delete(product_id))
    result.match(success=lambda _: None, failure=raise_failure)
    click.echo(f"Product #{product_id} deleted")


@click.command("restock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to add.")
def inventory_restock(product_id: int, quantity: int) -> None:
    """Add units to a product's stock."""
    result = run(lambda s: s.inventory.restock(product_id, quantity))
    stock = result.match(success=lambda value: value, failure=raise_failure)
    click.echo(f"Product #{product_id} restocked, {stock} in stock")
