# src/taskbox/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore
from .ports import KeyValueStorage


@dataclass
class AppState:
    # Settings live on the state so commands can report them.
    settings: object

    storage: KeyValueStorage
    task_store: TaskStore
