# tests/test_bootstrap.py

from __future__ import annotations

import json
from types import SimpleNamespace

from taskbox.cli.bootstrap import create_initial_state
from taskbox.storage.json_storage import JsonFileStorage
from taskbox.storage.memory_storage import InMemoryStorage
from taskbox.storage.sqlite_storage import SqliteStorage


def test_state_uses_sqlite_and_restores(settings: SimpleNamespace) -> None:
    first = create_initial_state(settings=settings)
    assert isinstance(first.storage, SqliteStorage)
    assert settings.data_dir.is_dir()

    first.task_store.add_task("Buy bread")
    first.task_store.add_task("Walk the dog")
    first.task_store.toggle_task_completion(first.task_store.tasks[0].id)

    second = create_initial_state(settings=settings)
    assert [(t.text, t.is_done) for t in second.task_store] == [
        ("Buy bread", True),
        ("Walk the dog", False),
    ]


def test_restore_can_be_disabled(settings: SimpleNamespace) -> None:
    create_initial_state(settings=settings).task_store.add_task("x")

    settings.restore_on_start = False
    state = create_initial_state(settings=settings)

    assert len(state.task_store) == 0
    # the old payload stays until the first mutation
    assert [r["text"] for r in json.loads(state.storage.read("tasks"))] == ["x"]


def test_json_backend_and_custom_key(settings: SimpleNamespace, tmp_path) -> None:
    settings.storage_backend = "json"
    settings.storage_path = tmp_path / "nested" / "storage.json"
    settings.storage_key = "todo"

    state = create_initial_state(settings=settings)
    state.task_store.add_task("hello")

    assert isinstance(state.storage, JsonFileStorage)
    stored = json.loads(settings.storage_path.read_text("utf-8"))
    assert list(stored) == ["todo"]


def test_memory_backend(settings: SimpleNamespace) -> None:
    settings.storage_backend = "memory"
    settings.storage_path = None

    state = create_initial_state(settings=settings)
    assert isinstance(state.storage, InMemoryStorage)
    assert len(state.task_store) == 0


def test_main_runs_console_and_closes_storage(settings: SimpleNamespace, monkeypatch) -> None:
    from taskbox.cli import main as cli_main

    settings.console_enabled = True
    seen = {}

    def fake_loop(state) -> None:
        seen["state"] = state
        state.task_store.add_task("from console")

    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "setup_logging", lambda settings: None)
    monkeypatch.setattr(cli_main, "run_console_loop", fake_loop)

    cli_main.main()

    stored = json.loads(seen["state"].storage.read("tasks"))
    assert [r["text"] for r in stored] == ["from console"]
