# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskbox.core.state import AppState
from taskbox.tasks.task_store import TaskStore

from .fakes import RecordingStorage, SequentialIds


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskbox-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        storage_backend="sqlite",
        storage_path=tmp_path / "data" / "storage.sqlite3",
        storage_key="tasks",
        restore_on_start=True,
        console_enabled=False,
    )


@pytest.fixture()
def storage() -> RecordingStorage:
    return RecordingStorage()


@pytest.fixture()
def store(storage: RecordingStorage) -> TaskStore:
    return TaskStore(storage, id_factory=SequentialIds())


@pytest.fixture()
def state(settings: SimpleNamespace, storage: RecordingStorage, store: TaskStore) -> AppState:
    """AppState wired with the recording fake instead of a real backend."""
    return AppState(settings=settings, storage=storage, task_store=store)
