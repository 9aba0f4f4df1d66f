"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from stockorders.application.dto import OrderDTO, OrderItem, order_to_dto
from stockorders.infrastructure.cli.results import raise_failure, run


def _parse_items(raw: str) -> list[OrderItem]:
    """Parse '1:3,2:5' (product id : quantity) into OrderItem list."""
    items: list[OrderItem] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            product_id = int(id_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product id and quantity must be integers."
            )
        items.append(OrderItem(product_id=product_id, quantity=qty))
    return items


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<10} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*38}")
    for detail in dto.details:
        click.echo(
            f"  {detail.product_id:<10} {detail.quantity:>5} {detail.unit_price:>10} {detail.subtotal:>10}"
        )
    click.echo(f"  {'-'*38}")
    click.echo(f"  {'Order Total':<18} {dto.total:>19}")


@click.command("create")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def order_create(customer_id: int, items: str) -> None:
    """Place a new order and take its items out of stock."""
    specs = _parse_items(items)

    result = run(lambda s: s.orders.create_order(customer_id, specs))
    order_id = result.match(success=lambda value: value, failure=raise_failure)

    click.echo(f"Order #{order_id} created for customer {customer_id}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    result = run(lambda s: s.orders.get_order_by_id(order_id))
    order = result.match(success=lambda value: value, failure=raise_failure)
    _display_order(order_to_dto(order))


@click.command("list")
def order_list() -> None:
    """List all orders."""
    result = run(lambda s: s.orders.get_all_orders())
    orders = result.match(success=lambda value: value, failure=raise_failure)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':>10} {'Items':>6} {'Total':>12}  Created")
    click.echo("-" * 60)
    for dto in (order_to_dto(o) for o in orders):
        click.echo(
            f"{dto.id:<6} {dto.customer_id:>10} {len(dto.details):>6} {dto.total:>12}  {dto.created_at}"
        )
