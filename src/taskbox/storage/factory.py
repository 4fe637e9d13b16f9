# src/taskbox/storage/factory.py

from __future__ import annotations

import logging

from ..core.ports import KeyValueStorage
from .json_storage import JsonFileStorage
from .memory_storage import InMemoryStorage
from .sqlite_storage import SqliteStorage

logger = logging.getLogger(__name__)


def open_storage(settings) -> KeyValueStorage:
    """Build the storage backend named by settings.storage_backend."""
    backend = str(getattr(settings, "storage_backend", "sqlite")).lower()
    path = getattr(settings, "storage_path", None)

    if backend == "memory":
        logger.info("Using in-memory storage (tasks are not kept after exit).")
        return InMemoryStorage()

    if backend in ("sqlite", "json") and not path:
        raise ValueError(f"storage_path is required for the {backend!r} backend")

    if backend == "sqlite":
        return SqliteStorage(path)
    if backend == "json":
        return JsonFileStorage(path)

    raise ValueError(f"Unknown storage backend: {backend!r} (expected sqlite, json or memory)")
