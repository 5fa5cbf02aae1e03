import logging
from pathlib import Path

import click

from orderhub.infrastructure.cli.account_commands import (
    account_balance,
    account_login,
    account_register,
    account_update_balance,
)
from orderhub.infrastructure.cli.order_commands import (
    order_cancel,
    order_confirm,
    order_confirm_compound,
    order_place,
    order_show,
)
from orderhub.infrastructure.cli.product_commands import product_add, product_list
from orderhub.infrastructure.config import (
    DEFAULT_DATA_DIR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TOKEN_TTL,
    DEV_SECRET_KEY,
    Settings,
)
from orderhub.infrastructure.logging_setup import setup_logging

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--data-dir",
    envvar="ORDERHUB_DATA_DIR",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    show_default=True,
    help="Directory holding the JSON data files.",
)
@click.option(
    "--secret-key",
    envvar="ORDERHUB_SECRET_KEY",
    default=DEV_SECRET_KEY,
    show_default=False,
    help="Key used to sign bearer tokens.",
)
@click.option(
    "--token-ttl",
    envvar="ORDERHUB_TOKEN_TTL",
    type=click.IntRange(min=1),
    default=DEFAULT_TOKEN_TTL,
    show_default=True,
    help="Token lifetime in seconds.",
)
@click.option(
    "--log-level",
    envvar="ORDERHUB_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, secret_key: str, token_ttl: int, log_level: str) -> None:
    """orderhub: accounts, wallets and simple/compound orders"""
    setup_logging(log_level)
    settings = Settings(
        data_dir=data_dir,
        secret_key=secret_key,
        token_ttl=token_ttl,
        log_level=log_level,
    )
    if settings.uses_dev_secret:
        logger.warning(
            "Using the development secret key; set ORDERHUB_SECRET_KEY"
        )
    ctx.obj = settings


@cli.group()
def account() -> None:
    """Manage accounts and wallets."""


@cli.group()
def order() -> None:
    """Place and manage orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
account.add_command(account_balance)
account.add_command(account_login)
account.add_command(account_register)
account.add_command(account_update_balance)
order.add_command(order_cancel)
order.add_command(order_confirm)
order.add_command(order_confirm_compound)
order.add_command(order_place)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
