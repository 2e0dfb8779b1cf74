"""CLI commands for database setup."""

from __future__ import annotations

import click
from sqlalchemy.exc import SQLAlchemyError

from northwind.infrastructure.bootstrap import provider
from northwind.infrastructure.config import Settings
from northwind.infrastructure.database.schema import create_schema


@click.command("init")
@click.pass_obj
def db_init(settings: Settings) -> None:
    """Create any missing tables."""
    engine = provider(settings).engine
    try:
        create_schema(engine)
    except SQLAlchemyError as exc:
        raise click.ClickException(f"Schema creation failed: {exc}")

    click.echo(f"Database ready at {engine.url}")
