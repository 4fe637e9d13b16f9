# src/taskbox/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- opens the configured storage backend,
- builds the TaskStore, optionally seeded from what storage already holds.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..storage.factory import open_storage
from ..tasks.task_api import load_tasks
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    Path(settings.data_dir).mkdir(parents=True, exist_ok=True)
    storage_path = getattr(settings, "storage_path", None)
    if storage_path:
        Path(storage_path).parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = open_storage(settings)
    key = getattr(settings, "storage_key", "tasks")

    seed = []
    if getattr(settings, "restore_on_start", False):
        seed = load_tasks(storage, key)

    task_store = TaskStore(storage, key=key, tasks=seed)
    logger.info(
        "State ready backend=%s key=%s tasks=%d",
        getattr(settings, "storage_backend", "?"),
        key,
        len(task_store),
    )
    return AppState(settings=settings, storage=storage, task_store=task_store)
