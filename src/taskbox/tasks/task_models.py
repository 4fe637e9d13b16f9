# src/taskbox/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TaskOutcome(StrEnum):
    """
    Result of a TaskStore mutation.

    Rejections leave the store untouched and write nothing; callers that
    ignore the return value get the plain "silent no-op" behavior.
    """

    ACCEPTED = "accepted"
    REJECTED_NOT_STRING = "rejected_not_string"
    REJECTED_EMPTY = "rejected_empty"
    NOT_FOUND = "not_found"

    @property
    def ok(self) -> bool:
        return self is TaskOutcome.ACCEPTED


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    text: str
    is_done: bool = False

    def to_dict(self) -> dict[str, Any]:
        # Key names are part of the persisted format.
        return {"id": self.id, "text": self.text, "isDone": self.is_done}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task | None:
        """Build a Task from a persisted record; None if the record is unusable."""
        task_id = raw.get("id")
        text = raw.get("text")
        if not isinstance(task_id, str) or not task_id:
            return None
        if not isinstance(text, str) or not text.strip():
            return None
        return cls(id=task_id, text=text.strip(), is_done=bool(raw.get("isDone", False)))
