"""CLI commands for the Order aggregate."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import click

from northwind.application.create_order import CreateOrderHandler
from northwind.application.delete_order import DeleteOrderHandler
from northwind.application.dto import (
    CreateOrderDTO,
    OrderDTO,
    OrderLineSpec,
    ShipToDTO,
    UpdateOrderDTO,
)
from northwind.application.show_order import ListOrdersHandler, ShowOrderHandler
from northwind.application.update_order import UpdateOrderHandler
from northwind.domain.exceptions import DomainException
from northwind.infrastructure.bootstrap import order_repository
from northwind.infrastructure.config import Settings

_DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


def _parse_items(raw: str) -> tuple[OrderLineSpec, ...]:
    """Parse '10:1.50:2,11:4.00:1:0.05' (product:price:qty[:discount])."""
    specs: list[OrderLineSpec] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        fields = part.split(":")
        if len(fields) not in (3, 4):
            raise click.BadParameter(
                f"Invalid item format '{part}'. "
                "Expected 'ProductID:UnitPrice:Quantity[:Discount]'."
            )
        try:
            product_id = int(fields[0])
            quantity = int(fields[2])
        except ValueError:
            raise click.BadParameter(f"Invalid product ID or quantity in '{part}'.")
        specs.append(
            OrderLineSpec(
                product_id=product_id,
                unit_price=fields[1],
                quantity=quantity,
                discount=fields[3] if len(fields) == 4 else 0.0,
            )
        )
    return tuple(specs)


def _order_fields(func):
    """Options shared by `create` and `update`."""
    options = [
        click.option("--customer", "customer_id", help="Customer ID."),
        click.option("--employee", "employee_id", type=int, help="Employee ID."),
        click.option("--order-date", type=click.DateTime(_DATE_FORMATS), required=True),
        click.option("--required-date", type=click.DateTime(_DATE_FORMATS)),
        click.option("--shipped-date", type=click.DateTime(_DATE_FORMATS)),
        click.option("--ship-via", type=int, help="Shipper ID."),
        click.option("--freight", default="0", show_default=True),
        click.option("--ship-name"),
        click.option("--ship-address"),
        click.option("--ship-city"),
        click.option("--ship-region"),
        click.option("--ship-postal-code"),
        click.option("--ship-country"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _order_dto(fields: dict, dto_type=UpdateOrderDTO, **extra) -> UpdateOrderDTO:
    return dto_type(
        customer_id=fields["customer_id"],
        employee_id=fields["employee_id"],
        order_date=fields["order_date"],
        required_date=fields["required_date"],
        shipped_date=fields["shipped_date"],
        ship_via=fields["ship_via"],
        freight=fields["freight"],
        ship_to=ShipToDTO(
            name=fields["ship_name"],
            address=fields["ship_address"],
            city=fields["ship_city"],
            region=fields["ship_region"],
            postal_code=fields["ship_postal_code"],
            country=fields["ship_country"],
        ),
        **extra,
    )


def _fmt_date(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d") if value else "-"


def _fmt_money(value: Decimal) -> str:
    return f"${value:.2f}"


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}")
    click.echo(f"Customer:  {dto.customer_id or '-'}")
    click.echo(f"Employee:  {dto.employee_id if dto.employee_id is not None else '-'}")
    click.echo(f"Ordered:   {_fmt_date(dto.order_date)}")
    click.echo(f"Required:  {_fmt_date(dto.required_date)}")
    click.echo(f"Shipped:   {_fmt_date(dto.shipped_date)}")
    click.echo(f"Ship via:  {dto.ship_via if dto.ship_via is not None else '-'}")
    click.echo(f"Freight:   {_fmt_money(dto.freight)}")
    address = ", ".join(
        part
        for part in (
            dto.ship_name,
            dto.ship_address,
            dto.ship_city,
            dto.ship_region,
            dto.ship_postal_code,
            dto.ship_country,
        )
        if part
    )
    click.echo(f"Ship to:   {address or '-'}")


@click.command("list")
@click.pass_obj
def order_list(settings: Settings) -> None:
    """List all orders."""
    handler = ListOrdersHandler(order_repo=order_repository(settings))

    try:
        orders = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':>6} {'Customer':<10} {'Ordered':<10} {'Freight':>10} {'Country':<15}")
    click.echo("-" * 55)
    for dto in orders:
        click.echo(
            f"{dto.id:>6} {dto.customer_id or '-':<10} {_fmt_date(dto.order_date):<10} "
            f"{_fmt_money(dto.freight):>10} {dto.ship_country or '-':<15}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(settings))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is None:
        raise click.ClickException(f"Order #{order_id} not found")
    _display_order(dto)


@click.command("create")
@_order_fields
@click.option("--items", default="", help="Lines as 'ProductID:UnitPrice:Qty[:Discount],...'.")
@click.pass_obj
def order_create(settings: Settings, items: str, **fields) -> None:
    """Create a new order with its lines."""
    specs = _parse_items(items)
    dto = _order_dto(fields, CreateOrderDTO, lines=specs)

    handler = CreateOrderHandler(order_repo=order_repository(settings))

    try:
        order_id = handler.handle(dto)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} created with {len(specs)} line(s)")


@click.command("update")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@_order_fields
@click.pass_obj
def order_update(settings: Settings, order_id: int, **fields) -> None:
    """Replace an order's fields (lines are left unchanged)."""
    handler = UpdateOrderHandler(order_repo=order_repository(settings))

    try:
        updated = handler.handle(order_id, _order_dto(fields))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not updated:
        raise click.ClickException(f"Order #{order_id} not found")
    click.echo(f"Order #{order_id} updated.")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
@click.pass_obj
def order_delete(settings: Settings, order_id: int) -> None:
    """Delete an order and all of its lines."""
    handler = DeleteOrderHandler(order_repo=order_repository(settings))

    try:
        deleted = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not deleted:
        raise click.ClickException(f"Order #{order_id} not found")
    click.echo(f"Order #{order_id} deleted.")
