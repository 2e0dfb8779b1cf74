"""CLI commands for suppliers."""

from __future__ import annotations

import click

from northwind.application.add_supplier import AddSupplierHandler
from northwind.application.delete_supplier import DeleteSupplierHandler
from northwind.application.dto import SupplierInput
from northwind.application.show_supplier import ListSuppliersHandler, ShowSupplierHandler
from northwind.application.update_supplier import UpdateSupplierHandler
from northwind.domain.exceptions import DomainException
from northwind.infrastructure.bootstrap import supplier_repository
from northwind.infrastructure.config import Settings


def _supplier_fields(func):
    options = [
        click.option("--company", "company_name", required=True),
        click.option("--contact", "contact_name"),
        click.option("--contact-title"),
        click.option("--address"),
        click.option("--city"),
        click.option("--region"),
        click.option("--postal-code"),
        click.option("--country"),
        click.option("--phone"),
        click.option("--fax"),
        click.option("--home-page"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.command("list")
@click.pass_obj
def supplier_list(settings: Settings) -> None:
    """List all suppliers."""
    handler = ListSuppliersHandler(supplier_repo=supplier_repository(settings))

    try:
        suppliers = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not suppliers:
        click.echo("No suppliers found.")
        return

    click.echo(f"{'ID':>4}  {'Company':<40} {'Country':<15}")
    click.echo("-" * 61)
    for s in suppliers:
        click.echo(f"{s.id:>4}  {s.company_name:<40} {s.country or '-':<15}")


@click.command("show")
@click.option("--id", "supplier_id", required=True, type=int)
@click.pass_obj
def supplier_show(settings: Settings, supplier_id: int) -> None:
    """Show one supplier."""
    handler = ShowSupplierHandler(supplier_repo=supplier_repository(settings))

    try:
        dto = handler.handle(supplier_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is None:
        raise click.ClickException(f"Supplier #{supplier_id} not found")
    click.echo(f"Supplier #{dto.id}: {dto.company_name}")
    contact = " / ".join(part for part in (dto.contact_name, dto.contact_title) if part)
    click.echo(f"Contact: {contact or '-'}")
    location = ", ".join(
        part
        for part in (dto.address, dto.city, dto.region, dto.postal_code, dto.country)
        if part
    )
    click.echo(f"Address: {location or '-'}")
    click.echo(f"Phone:   {dto.phone or '-'}")


@click.command("add")
@_supplier_fields
@click.pass_obj
def supplier_add(settings: Settings, **fields) -> None:
    """Add a supplier."""
    handler = AddSupplierHandler(supplier_repo=supplier_repository(settings))

    try:
        supplier_id = handler.handle(SupplierInput(**fields))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Supplier #{supplier_id} added.")


@click.command("update")
@click.option("--id", "supplier_id", required=True, type=int)
@_supplier_fields
@click.pass_obj
def supplier_update(settings: Settings, supplier_id: int, **fields) -> None:
    """Replace a supplier's fields."""
    handler = UpdateSupplierHandler(supplier_repo=supplier_repository(settings))

    try:
        updated = handler.handle(supplier_id, SupplierInput(**fields))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not updated:
        raise click.ClickException(f"Supplier #{supplier_id} not found")
    click.echo(f"Supplier #{supplier_id} updated.")


@click.command("delete")
@click.option("--id", "supplier_id", required=True, type=int)
@click.pass_obj
def supplier_delete(settings: Settings, supplier_id: int) -> None:
    """Delete a supplier."""
    handler = DeleteSupplierHandler(supplier_repo=supplier_repository(settings))

    try:
        deleted = handler.handle(supplier_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not deleted:
        raise click.ClickException(f"Supplier #{supplier_id} not found")
    click.echo(f"Supplier #{supplier_id} deleted.")
