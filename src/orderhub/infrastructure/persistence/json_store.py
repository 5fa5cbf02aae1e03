"""Shared JSON file access for the repositories.

Every read-modify-write runs under an OS-level lock next to the data file,
so separate CLI processes pointed at the same data directory serialize
their writes. Writes land in a temporary file first and are moved into
place with ``os.replace``, so readers never see a half-written document.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from filelock import FileLock


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self.path = file_path
        self._lock = FileLock(str(file_path) + ".lock")
        self._ensure_file()

    def locked(self) -> FileLock:
        """Context manager holding the cross-process lock for this file."""
        return self._lock

    def read(self) -> Any:
        return json.loads(self.path.read_text(encoding="utf-8"))

    def write(self, data: Any) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(json.dumps(data, indent=2) + "\n")
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self._lock:
            if not self.path.exists():
                self.write([])
