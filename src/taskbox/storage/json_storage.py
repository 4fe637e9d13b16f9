# src/taskbox/storage/json_storage.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """
    KeyValueStorage kept in a single JSON object file: {"<key>": "<value>", ...}.

    - every write rewrites the whole file (tmp file + os.replace)
    - a missing or malformed file reads as empty
    """

    def __init__(self, path: str | Path = "storage.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("JsonFileStorage ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def close(self) -> None:
        """Compatibility hook for shutdown (no open handles)."""
        return

    # ---- low-level helpers ----

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.exception("Failed to read storage file %s; treating as empty.", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s is not a JSON object; treating as empty.", self._path)
            return {}
        return {k: v for k, v in data.items() if isinstance(k, str) and isinstance(v, str)}

    def _dump(self, data: dict[str, str]) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)

    # ---- public API ----

    def write(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)
        logger.debug("Stored key=%s bytes=%d in %s", key, len(value), self._path)

    def read(self, key: str) -> str | None:
        return self._load().get(key)

    def clear(self) -> None:
        self._dump({})
        logger.info("Cleared storage file %s", self._path)
