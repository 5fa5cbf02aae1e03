"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from orderhub.application.add_product import AddProductHandler
from orderhub.infrastructure.bootstrap import product_repository
from orderhub.infrastructure.cli.errors import handle_domain_errors
from orderhub.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.pass_obj
@handle_domain_errors
def product_add(settings: Settings, name: str, price: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(settings))
    product = handler.handle(name=name, price=price)

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    products = product_repository(settings).list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>10}")
