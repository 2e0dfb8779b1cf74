"""CLI commands for categories."""

from __future__ import annotations

from pathlib import Path

import click

from northwind.application.add_category import AddCategoryHandler
from northwind.application.delete_category import DeleteCategoryHandler
from northwind.application.dto import CategoryInput
from northwind.application.show_category import ListCategoriesHandler, ShowCategoryHandler
from northwind.application.update_category import UpdateCategoryHandler
from northwind.domain.exceptions import DomainException
from northwind.infrastructure.bootstrap import category_repository
from northwind.infrastructure.config import Settings


def _category_input(name: str, description: str | None, picture: Path | None) -> CategoryInput:
    return CategoryInput(
        name=name,
        description=description,
        picture=picture.read_bytes() if picture is not None else None,
    )


_picture_option = click.option(
    "--picture",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Image file to store with the category.",
)


@click.command("list")
@click.pass_obj
def category_list(settings: Settings) -> None:
    """List all categories."""
    handler = ListCategoriesHandler(category_repo=category_repository(settings))

    try:
        categories = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':>4}  {'Name':<15} Description")
    click.echo("-" * 50)
    for c in categories:
        click.echo(f"{c.id:>4}  {c.name:<15} {c.description or ''}")


@click.command("show")
@click.option("--id", "category_id", required=True, type=int)
@click.pass_obj
def category_show(settings: Settings, category_id: int) -> None:
    """Show one category."""
    handler = ShowCategoryHandler(category_repo=category_repository(settings))

    try:
        dto = handler.handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is None:
        raise click.ClickException(f"Category #{category_id} not found")
    click.echo(f"Category #{dto.id}: {dto.name}")
    click.echo(f"Description: {dto.description or '-'}")
    click.echo(f"Picture:     {len(dto.picture)} bytes" if dto.picture else "Picture:     -")


@click.command("add")
@click.option("--name", required=True, help="Unique category name.")
@click.option("--description")
@_picture_option
@click.pass_obj
def category_add(settings: Settings, name: str, description: str | None, picture: Path | None) -> None:
    """Add a category."""
    handler = AddCategoryHandler(category_repo=category_repository(settings))

    try:
        category_id = handler.handle(_category_input(name, description, picture))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category_id} '{name.strip()}' added.")


@click.command("update")
@click.option("--id", "category_id", required=True, type=int)
@click.option("--name", required=True)
@click.option("--description")
@_picture_option
@click.pass_obj
def category_update(
    settings: Settings,
    category_id: int,
    name: str,
    description: str | None,
    picture: Path | None,
) -> None:
    """Replace a category's fields."""
    handler = UpdateCategoryHandler(category_repo=category_repository(settings))

    try:
        updated = handler.handle(category_id, _category_input(name, description, picture))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not updated:
        raise click.ClickException(f"Category #{category_id} not found")
    click.echo(f"Category #{category_id} updated.")


@click.command("delete")
@click.option("--id", "category_id", required=True, type=int)
@click.pass_obj
def category_delete(settings: Settings, category_id: int) -> None:
    """Delete a category."""
    handler = DeleteCategoryHandler(category_repo=category_repository(settings))

    try:
        deleted = handler.handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not deleted:
        raise click.ClickException(f"Category #{category_id} not found")
    click.echo(f"Category #{category_id} deleted.")
