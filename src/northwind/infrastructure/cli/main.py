from pathlib import Path

import click

from northwind.domain.exceptions import DomainException
from northwind.infrastructure.cli.auth_commands import auth_login
from northwind.infrastructure.cli.category_commands import (
    category_add,
    category_delete,
    category_list,
    category_show,
    category_update,
)
from northwind.infrastructure.cli.db_commands import db_init
from northwind.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_show,
    order_update,
)
from northwind.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from northwind.infrastructure.cli.supplier_commands import (
    supplier_add,
    supplier_delete,
    supplier_list,
    supplier_show,
    supplier_update,
)
from northwind.infrastructure.config import load_settings
from northwind.infrastructure.logging_setup import setup_logging


@click.group()
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (defaults to ./.env).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, env_file: Path | None, verbose: bool) -> None:
    """Northwind catalog and order management"""
    try:
        settings = load_settings(env_file)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    setup_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@cli.group()
def db() -> None:
    """Manage the database."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def supplier() -> None:
    """Manage suppliers."""


@cli.group()
def auth() -> None:
    """Issue access tokens."""


# Register subcommands
db.add_command(db_init)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_create)
order.add_command(order_update)
order.add_command(order_delete)
category.add_command(category_list)
category.add_command(category_show)
category.add_command(category_add)
category.add_command(category_update)
category.add_command(category_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_add)
product.add_command(product_update)
product.add_command(product_delete)
supplier.add_command(supplier_list)
supplier.add_command(supplier_show)
supplier.add_command(supplier_add)
supplier.add_command(supplier_update)
supplier.add_command(supplier_delete)
auth.add_command(auth_login)
