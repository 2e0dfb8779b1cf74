"""CLI commands for authentication."""

from __future__ import annotations

import click

from northwind.application.login import LoginHandler
from northwind.infrastructure.config import Settings


@click.command("login")
@click.option("--username", required=True, help="User name.")
@click.password_option("--password", confirmation_prompt=False, help="Password.")
@click.pass_obj
def auth_login(settings: Settings, username: str, password: str) -> None:
    """Check credentials and print a signed access token."""
    handler = LoginHandler(settings.auth, settings.jwt)
    token = handler.handle(username, password)
    if token is None:
        raise click.ClickException("Invalid credentials")

    click.echo(token.token)
    click.echo(f"Expires: {token.expiration.strftime('%Y-%m-%d %H:%M UTC')}", err=True)
