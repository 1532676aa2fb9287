"""JSON-file-backed implementation of StateStorage.

Each key maps to ``<data_dir>/<key>.json``.
"""

from __future__ import annotations

import re
from pathlib import Path

from storefront.domain.repository.state_storage import StateStorage

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileStateStorage(StateStorage):

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir

    # --- StateStorage interface -----------------------------------------------

    def read(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, payload: str) -> None:
        self._ensure_dir()
        path = self._path_for(key)
        # Write-then-rename: readers only ever see a complete snapshot
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(payload + "\n", encoding="utf-8")
        tmp.replace(path)

    def remove(self, key: str) -> None:
        self._path_for(key).unlink(missing_ok=True)

    # --- File helpers ---------------------------------------------------------

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._data_dir / f"{key}.json"

    def _ensure_dir(self) -> None:
        if not self._data_dir.exists():
            self._data_dir.mkdir(parents=True, exist_ok=True)
