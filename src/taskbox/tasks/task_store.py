# src/taskbox/tasks/task_store.py

from __future__ import annotations

import json
import logging
import random
import string
from collections.abc import Callable, Iterable, Iterator
from dataclasses import replace

from ..core.ports import KeyValueStorage
from .task_models import Task, TaskOutcome

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "tasks"

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_LENGTH = 9


def generate_id() -> str:
    """Fresh opaque task id, e.g. 'id-k3x9q0a1z'."""
    return "id-" + "".join(random.choices(_ID_ALPHABET, k=_ID_LENGTH))


class TaskStore:
    """
    Ordered in-memory to-do list.

    Every successful mutation writes the whole list once, as a JSON array of
    {"id", "text", "isDone"} records, under a single fixed key of the storage.
    Rejected mutations change nothing and write nothing.

    The store never reads from storage; seed it with `tasks` if needed
    (see task_api.load_tasks).
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        tasks: Iterable[Task] | None = None,
        id_factory: Callable[[], str] = generate_id,
    ) -> None:
        self._storage = storage
        self._key = key
        self._id_factory = id_factory
        self._items: list[Task] = self._accept_seed(tasks or [])
        logger.debug("TaskStore ready key=%s total=%s", self._key, len(self._items))

    # ---- low-level helpers ----

    @staticmethod
    def _accept_seed(tasks: Iterable[Task]) -> list[Task]:
        """Keep seed tasks with non-blank text and an unseen id; text is trimmed."""
        out: list[Task] = []
        seen: set[str] = set()
        for task in tasks:
            text = task.text.strip() if isinstance(task.text, str) else ""
            if not text or not task.id or task.id in seen:
                logger.debug("Seed task dropped id=%r", task.id)
                continue
            seen.add(task.id)
            out.append(task if text == task.text else replace(task, text=text))
        return out

    def _find_index(self, task_id: str) -> int:
        for i, task in enumerate(self._items):
            if task.id == task_id:
                return i
        return -1

    def save(self) -> None:
        """Serialize the current list and write it under the store key."""
        payload = json.dumps([t.to_dict() for t in self._items], ensure_ascii=False)
        self._storage.write(self._key, payload)

    # ---- read API ----

    @property
    def key(self) -> str:
        return self._key

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._items)

    def get_task(self, task_id: str) -> Task | None:
        i = self._find_index(task_id)
        return self._items[i] if i != -1 else None

    def count_tasks(self) -> int:
        return len(self._items)

    def count_done(self) -> int:
        return sum(1 for t in self._items if t.is_done)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._items))

    # ---- mutations ----

    def add_task(self, text: object) -> TaskOutcome:
        if not isinstance(text, str):
            logger.debug("add_task rejected: not a string (%s)", type(text).__name__)
            return TaskOutcome.REJECTED_NOT_STRING

        trimmed = text.strip()
        if not trimmed:
            logger.debug("add_task rejected: empty text")
            return TaskOutcome.REJECTED_EMPTY

        task = Task(id=self._id_factory(), text=trimmed, is_done=False)
        self._items.append(task)
        self.save()
        logger.debug("Task added id=%s total=%s", task.id, len(self._items))
        return TaskOutcome.ACCEPTED

    def toggle_task_completion(self, task_id: str) -> TaskOutcome:
        i = self._find_index(task_id)
        if i == -1:
            logger.debug("toggle_task_completion: id=%s not found", task_id)
            return TaskOutcome.NOT_FOUND

        task = replace(self._items[i], is_done=not self._items[i].is_done)
        self._items[i] = task
        self.save()
        logger.debug("Task toggled id=%s is_done=%s", task.id, task.is_done)
        return TaskOutcome.ACCEPTED

    def delete_task(self, task_id: str) -> TaskOutcome:
        i = self._find_index(task_id)
        if i == -1:
            logger.debug("delete_task: id=%s not found", task_id)
            return TaskOutcome.NOT_FOUND

        del self._items[i]
        self.save()
        logger.debug("Task deleted id=%s total=%s", task_id, len(self._items))
        return TaskOutcome.ACCEPTED
