"""Map domain failures to CLI errors.

Each failure kind becomes one message on stderr and its own exit code.
"""

from __future__ import annotations

import functools
import logging
from typing import Callable, TypeVar

import click

from orderhub.domain.exceptions import DomainException

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., object])


class DomainCliError(click.ClickException):

    def __init__(self, exc: DomainException) -> None:
        super().__init__(str(exc))
        self.exit_code = exc.exit_code


def handle_domain_errors(func: F) -> F:
    """Turn a DomainException raised by *func* into a DomainCliError."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DomainException as exc:
            logger.warning("%s: %s", type(exc).__name__, exc)
            raise DomainCliError(exc) from exc

    return wrapper  # type: ignore[return-value]
