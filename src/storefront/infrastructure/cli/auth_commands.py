"""CLI commands for the shopper's session."""

from __future__ import annotations

import click

from storefront.application.login import LoginHandler
from storefront.infrastructure.bootstrap import AppContext
from storefront.infrastructure.cli.errors import HANDLED, to_click


@click.command("login")
@click.option("--email", required=True, help="Account email.")
@click.password_option("--password", confirmation_prompt=False, help="Account password.")
@click.pass_obj
def auth_login(app: AppContext, email: str, password: str) -> None:
    """Sign in and remember the session."""
    handler = LoginHandler(auth_gateway=app.auth_gateway, auth_store=app.auth)

    try:
        user = handler.handle(email=email, password=password)
    except HANDLED as exc:
        raise to_click(exc)

    role = " (admin)" if user.is_admin else ""
    click.echo(f"Signed in as {user.name} <{user.email}>{role}")


@click.command("logout")
@click.pass_obj
def auth_logout(app: AppContext) -> None:
    """Sign out and reset the chat session."""
    if not app.auth.is_authenticated:
        click.echo("Not signed in.")
        return
    app.auth.logout()
    click.echo("Signed out.")


@click.command("whoami")
@click.pass_obj
def auth_whoami(app: AppContext) -> None:
    """Show the signed-in user."""
    user = app.auth.user
    if user is None:
        click.echo("Not signed in.")
        return
    click.echo(f"{user.name} <{user.email}>  role={user.role}")
    if user.phone:
        click.echo(f"Phone: {user.phone}")


@click.command("profile")
@click.option("--name", default=None, help="New display name.")
@click.option("--phone", default=None, help="New phone number.")
@click.pass_obj
def auth_profile(app: AppContext, name: str | None, phone: str | None) -> None:
    """Update the signed-in user's profile."""
    if not app.auth.is_authenticated:
        raise click.ClickException("Not signed in.")
    changes = {k: v for k, v in {"name": name, "phone": phone}.items() if v is not None}
    if not changes:
        raise click.UsageError("Nothing to update; pass --name and/or --phone.")

    try:
        envelope = app.apis.auth.update_profile(changes)
    except HANDLED as exc:
        raise to_click(exc)

    # Prefer the server's canonical record when it sends one back
    app.auth.update_user(**(envelope.data if isinstance(envelope.data, dict) else changes))
    click.echo("Profile updated.")
