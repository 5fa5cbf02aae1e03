"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from orderhub.application.cancel_order import CancelOrderHandler
from orderhub.application.confirm_compound_order import ConfirmCompoundOrderHandler
from orderhub.application.confirm_order import ConfirmOrderHandler
from orderhub.application.dto import OrderDTO
from orderhub.application.identity import authenticate
from orderhub.application.place_order import PlaceSimpleOrderHandler
from orderhub.application.show_order import ShowOrderHandler
from orderhub.infrastructure.bootstrap import (
    account_repository,
    order_repository,
    product_repository,
    token_service,
)
from orderhub.infrastructure.cli.errors import handle_domain_errors
from orderhub.infrastructure.cli.options import token_option
from orderhub.infrastructure.config import Settings


def _parse_product_ids(raw: str) -> list[str]:
    """Parse '1,2,2' into ['1', '2', '2']."""
    ids = [part.strip() for part in raw.split(",") if part.strip()]
    if not ids:
        raise click.BadParameter("Expected a comma-separated list of product IDs.")
    return ids


def _parse_members(pairs: tuple[str, ...]) -> dict[str, int]:
    """Parse ('alice=1', 'bob=2') into {'alice': 1, 'bob': 2}."""
    members: dict[str, int] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid member '{pair}'. Expected 'username=orderId'."
            )
        owner, id_str = pair.split("=", 1)
        owner = owner.strip()
        try:
            order_id = int(id_str)
        except ValueError:
            raise click.BadParameter(f"Invalid order ID '{id_str}' for '{owner}'.")
        if owner in members:
            raise click.BadParameter(f"Owner '{owner}' listed more than once.")
        members[owner] = order_id
    return members


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    label = "Compound order" if dto.is_compound else "Order"
    click.echo(f"{label} #{dto.id}  (status={dto.status})")
    click.echo(f"Owner:   {dto.owner}")
    click.echo(f"Created: {dto.created_at}")
    click.echo()

    if dto.is_compound:
        click.echo(f"  Members: {', '.join(f'#{i}' for i in dto.member_ids)}")
    else:
        click.echo(f"  {'ID':<6} {'Product':<20} {'Price':>10}")
        click.echo(f"  {'-'*38}")
        for line in dto.products:
            click.echo(f"  {line.product_id:<6} {line.name:<20} {line.price:>10}")
        click.echo(f"  {'-'*38}")

    click.echo(f"  {'Order Total':<27} {dto.total:>10}")


@click.command("place")
@token_option
@click.option("--products", required=True, help="Product IDs as '1,2,3'.")
@click.pass_obj
@handle_domain_errors
def order_place(settings: Settings, token: str | None, products: str) -> None:
    """Place a simple order for the token's account."""
    product_ids = _parse_product_ids(products)
    username = authenticate(token_service(settings), token)

    handler = PlaceSimpleOrderHandler(
        order_repo=order_repository(settings),
        product_repo=product_repository(settings),
        account_repo=account_repository(settings),
    )
    dto = handler.handle(username, product_ids)

    click.echo(f"Order #{dto.id} placed  (status={dto.status}, total={dto.total})")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
@handle_domain_errors
def order_show(settings: Settings, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(settings))
    _display_order(handler.handle(order_id))


@click.command("confirm")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to confirm.")
@token_option
@click.pass_obj
@handle_domain_errors
def order_confirm(settings: Settings, order_id: int, token: str | None) -> None:
    """Confirm one of your pending simple orders."""
    username = authenticate(token_service(settings), token)
    handler = ConfirmOrderHandler(order_repo=order_repository(settings))
    handler.handle(order_id, username)

    click.echo("Order is confirmed successfully")


@click.command("confirm-compound")
@click.option(
    "--member",
    "members",
    multiple=True,
    required=True,
    help="Member order as 'username=orderId'; repeat for each member.",
)
@token_option
@click.pass_obj
@handle_domain_errors
def order_confirm_compound(settings: Settings, members: tuple[str, ...], token: str | None) -> None:
    """Aggregate pending simple orders into a confirmed compound order."""
    members_by_owner = _parse_members(members)
    username = authenticate(token_service(settings), token)
    handler = ConfirmCompoundOrderHandler(order_repo=order_repository(settings))
    compound_id = handler.handle(members_by_owner, username)

    click.echo(f"Compound order #{compound_id} confirmed")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@token_option
@click.pass_obj
@handle_domain_errors
def order_cancel(settings: Settings, order_id: int, token: str | None) -> None:
    """Cancel one of your orders (pending or confirmed)."""
    username = authenticate(token_service(settings), token)
    handler = CancelOrderHandler(order_repo=order_repository(settings))
    handler.handle(order_id, username)

    click.echo("Order is cancelled successfully")
