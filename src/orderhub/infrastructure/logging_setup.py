"""Logging configuration for the CLI process."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Send records at *level* and above to the current stderr.

    Calling it again replaces the handler installed by the previous call.
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_orderhub", False):
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._orderhub = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
