# tests/test_commands.py

from __future__ import annotations

from taskbox.cli.commands import CommandRegistry, registry, resolve_task_ref
from taskbox.core.state import AppState

from .fakes import RecordingStorage


def test_command_registry_passes_args_and_raw_text(state) -> None:
    reg = CommandRegistry()
    calls = []

    def handler(state, args, text):
        calls.append((args, text))
        return "ok"

    reg.register("a", handler, "a", aliases=["bb"])

    assert reg.handle(state, "/a  x  y") == "ok"
    assert reg.handle(state, "/BB y z") == "ok"
    assert calls == [(["x", "y"], " x  y"), (["y", "z"], "y z")]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_command_keeps_inner_spacing(state: AppState, storage: RecordingStorage) -> None:
    reply = registry.handle(state, "/add   Buy  bread  ")
    assert reply == "Added #1: Buy  bread"
    assert state.task_store.tasks[0].text == "Buy  bread"
    assert len(storage.writes) == 1


def test_add_command_reports_empty(state: AppState, storage: RecordingStorage) -> None:
    assert "empty" in (registry.handle(state, "/add    ") or "")
    assert storage.writes == []


def test_done_and_rm_by_index_and_id(state: AppState, storage: RecordingStorage) -> None:
    store = state.task_store
    store.add_task("one")
    store.add_task("two")
    storage.reset_calls()

    assert registry.handle(state, "/done #2") == "Marked as done: two"
    assert store.tasks[1].is_done is True
    assert registry.handle(state, "/toggle 2") == "Marked as not done: two"

    first_id = store.tasks[0].id
    assert registry.handle(state, f"/rm {first_id}") == "Deleted: one"
    assert [t.text for t in store] == ["two"]
    assert len(storage.writes) == 3


def test_done_and_rm_unknown_refs_do_not_write(state: AppState, storage: RecordingStorage) -> None:
    state.task_store.add_task("one")
    storage.reset_calls()

    assert registry.handle(state, "/done 5") == "No such task: 5."
    assert registry.handle(state, "/rm missing") == "No such task: missing."
    assert registry.handle(state, "/rm") == "Usage: /rm <id|#n>."
    assert registry.handle(state, "/done") == "Usage: /done <id|#n>."
    assert storage.writes == []


def test_resolve_prefers_literal_id(state: AppState) -> None:
    store = state.task_store
    store.add_task("first")  # id-1
    store.add_task("second")  # id-2
    store.add_task("third")  # id-3

    assert resolve_task_ref(state, "id-3") == "id-3"
    assert resolve_task_ref(state, "#1") == "id-1"
    assert resolve_task_ref(state, "0") is None
    assert resolve_task_ref(state, "") is None


def test_list_status_help(state: AppState) -> None:
    assert registry.handle(state, "/list") == "No tasks."
    state.task_store.add_task("Buy bread")
    state.task_store.toggle_task_completion("id-1")

    assert registry.handle(state, "/ls") == "1. [x] Buy bread  (id-1)"
    status = registry.handle(state, "/status") or ""
    assert "Tasks: 1 (1 done)" in status
    assert "Key: tasks" in status
    assert "/add" in (registry.handle(state, "/help") or "")
