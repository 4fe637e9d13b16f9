# src/taskbox/tasks/task_api.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from ..core.ports import KeyValueStorage
from .task_models import Task

logger = logging.getLogger(__name__)


def load_tasks(storage: KeyValueStorage, key: str) -> list[Task]:
    """
    Best-effort: parse a task list previously written by TaskStore.save().

    Missing key or garbage -> []. Unusable records are skipped.
    """
    raw = storage.read(key)
    if not raw:
        return []

    try:
        data = json.loads(raw)
    except ValueError:
        logger.exception("Stored tasks under key=%s are not valid JSON; ignoring.", key)
        return []

    if not isinstance(data, list):
        logger.warning("Stored tasks under key=%s are not a list; ignoring.", key)
        return []

    out: list[Task] = []
    seen: set[str] = set()
    for item in data:
        if not isinstance(item, dict):
            continue
        task = Task.from_dict(item)
        if task is None or task.id in seen:
            continue
        seen.add(task.id)
        out.append(task)

    skipped = len(data) - len(out)
    logger.info("Loaded %d tasks from key=%s (skipped %d)", len(out), key, skipped)
    return out


def format_task_list(tasks: Iterable[Task]) -> str:
    lines = []
    for i, t in enumerate(tasks, start=1):
        mark = "x" if t.is_done else " "
        lines.append(f"{i}. [{mark}] {t.text}  ({t.id})")
    if not lines:
        return "No tasks."
    return "\n".join(lines)
