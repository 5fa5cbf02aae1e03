"""Runtime settings.

Values come from the root CLI group's options, each of which also reads
an ``ORDERHUB_*`` environment variable (see ``cli/main.py``).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATA_DIR = Path("data")
DEV_SECRET_KEY = "orderhub-development-secret-change-me"
DEFAULT_TOKEN_TTL = 3600
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    secret_key: str = DEV_SECRET_KEY
    token_ttl: int = DEFAULT_TOKEN_TTL
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def uses_dev_secret(self) -> bool:
        return self.secret_key == DEV_SECRET_KEY
