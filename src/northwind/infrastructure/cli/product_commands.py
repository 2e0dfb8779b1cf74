"""CLI commands for product management."""

from __future__ import annotations

import click

from northwind.application.add_product import AddProductHandler
from northwind.application.delete_product import DeleteProductHandler
from northwind.application.dto import ProductInput
from northwind.application.show_product import ListProductsHandler, ShowProductHandler
from northwind.application.update_product import UpdateProductHandler
from northwind.domain.exceptions import DomainException
from northwind.infrastructure.bootstrap import product_repository
from northwind.infrastructure.config import Settings


def _product_fields(func):
    options = [
        click.option("--name", required=True, help="Unique product name."),
        click.option("--price", "unit_price", help="Unit price, e.g. 18.00."),
        click.option("--supplier", "supplier_id", type=int),
        click.option("--category", "category_id", type=int),
        click.option("--quantity-per-unit"),
        click.option("--in-stock", "units_in_stock", type=int),
        click.option("--on-order", "units_on_order", type=int),
        click.option("--reorder-level", type=int),
        click.option("--discontinued/--active", default=False),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository(settings))

    try:
        products = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':>4}  {'Name':<30} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 54)
    for p in products:
        stock = p.units_in_stock if p.units_in_stock is not None else "-"
        flag = "  (discontinued)" if p.discontinued else ""
        click.echo(f"{p.id:>4}  {p.name:<30} {p.unit_price or '-':>10} {stock:>6}{flag}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int)
@click.pass_obj
def product_show(settings: Settings, product_id: int) -> None:
    """Show one product."""
    handler = ShowProductHandler(product_repo=product_repository(settings))

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is None:
        raise click.ClickException(f"Product #{product_id} not found")
    for label, value in (
        ("Product", f"#{dto.id} {dto.name}"),
        ("Price", dto.unit_price),
        ("Supplier", dto.supplier_id),
        ("Category", dto.category_id),
        ("Per unit", dto.quantity_per_unit),
        ("In stock", dto.units_in_stock),
        ("On order", dto.units_on_order),
        ("Reorder at", dto.reorder_level),
        ("Discontinued", "yes" if dto.discontinued else "no"),
    ):
        click.echo(f"{label + ':':<14}{value if value is not None else '-'}")


@click.command("add")
@_product_fields
@click.pass_obj
def product_add(settings: Settings, **fields) -> None:
    """Add a product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(settings))

    try:
        product_id = handler.handle(ProductInput(**fields))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} added.")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int)
@_product_fields
@click.pass_obj
def product_update(settings: Settings, product_id: int, **fields) -> None:
    """Replace a product's fields."""
    handler = UpdateProductHandler(product_repo=product_repository(settings))

    try:
        updated = handler.handle(product_id, ProductInput(**fields))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not updated:
        raise click.ClickException(f"Product #{product_id} not found")
    click.echo(f"Product #{product_id} updated.")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int)
@click.pass_obj
def product_delete(settings: Settings, product_id: int) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=product_repository(settings))

    try:
        deleted = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not deleted:
        raise click.ClickException(f"Product #{product_id} not found")
    click.echo(f"Product #{product_id} deleted.")
