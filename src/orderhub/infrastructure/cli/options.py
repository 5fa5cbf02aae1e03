"""Options shared by several commands."""

from __future__ import annotations

import click

token_option = click.option(
    "--token",
    envvar="ORDERHUB_TOKEN",
    default=None,
    help="Bearer token from 'account login' (or ORDERHUB_TOKEN).",
)
