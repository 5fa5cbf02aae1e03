"""CLI commands for the Account aggregate."""

from __future__ import annotations

import click

from orderhub.application.get_balance import GetBalanceHandler
from orderhub.application.login import LoginHandler
from orderhub.application.register_account import RegisterAccountHandler
from orderhub.application.update_balance import UpdateBalanceHandler
from orderhub.infrastructure.bootstrap import (
    account_repository,
    password_hasher,
    token_service,
)
from orderhub.infrastructure.cli.errors import handle_domain_errors
from orderhub.infrastructure.cli.options import token_option
from orderhub.infrastructure.config import Settings


@click.command("register")
@click.option("--username", required=True, help="Unique username.")
@click.option("--password", prompt=True, hide_input=True, help="Account password.")
@click.option("--balance", default="0", show_default=True, help="Opening wallet balance.")
@click.pass_obj
@handle_domain_errors
def account_register(settings: Settings, username: str, password: str, balance: str) -> None:
    """Register a new account."""
    handler = RegisterAccountHandler(
        account_repo=account_repository(settings),
        hasher=password_hasher(settings),
    )
    account = handler.handle(username=username, password=password, balance=balance)

    click.echo(f"Account '{account.username}' is added successfully")


@click.command("login")
@click.option("--username", required=True)
@click.option("--password", prompt=True, hide_input=True)
@click.pass_obj
@handle_domain_errors
def account_login(settings: Settings, username: str, password: str) -> None:
    """Print a bearer token for the given credentials."""
    handler = LoginHandler(
        account_repo=account_repository(settings),
        hasher=password_hasher(settings),
        tokens=token_service(settings),
    )
    click.echo(handler.handle(username, password))


@click.command("update-balance")
@click.option("--username", required=True)
@click.option("--amount", required=True, help="Signed change, e.g. 50 or -12.50.")
@click.pass_obj
def account_update_balance(settings: Settings, username: str, amount: str) -> None:
    """Add to (or subtract from) an account's wallet."""
    handler = UpdateBalanceHandler(account_repo=account_repository(settings))
    if not handler.handle(username, amount):
        raise click.ClickException("Failed to update balance")

    click.echo("Account is updated successfully")


@click.command("balance")
@token_option
@click.pass_obj
@handle_domain_errors
def account_balance(settings: Settings, token: str | None) -> None:
    """Show the wallet balance of the token's account."""
    handler = GetBalanceHandler(
        account_repo=account_repository(settings),
        tokens=token_service(settings),
    )
    click.echo(f"Current balance: {handler.handle(token)}")
