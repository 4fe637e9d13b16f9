# src/taskbox/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_api import format_task_list
from ..tasks.task_models import TaskOutcome

CommandHandler = Callable[[AppState, list[str], str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Handlers get the split args and the raw remainder of the line.
        """
        if not line.startswith("/"):
            return None

        head, _, rest = line[1:].strip().partition(" ")
        if not head:
            return "Empty command. Use /help to list available commands."

        name = head.lower()
        args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args, rest)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def resolve_task_ref(state: AppState, ref: str) -> str | None:
    """
    Map a user reference to a task id.

    A literal id wins; otherwise "3" or "#3" means the 3rd task in the list.
    """
    ref = ref.strip()
    if not ref:
        return None
    store = state.task_store
    if store.get_task(ref) is not None:
        return ref

    num = ref[1:] if ref.startswith("#") else ref
    if num.isdigit():
        idx = int(num)
        tasks = store.tasks
        if 1 <= idx <= len(tasks):
            return tasks[idx - 1].id
    return None


_ADD_REPLIES = {
    TaskOutcome.REJECTED_EMPTY: "Nothing to add: task text is empty.",
    TaskOutcome.REJECTED_NOT_STRING: "Nothing to add: task text must be a string.",
}


def add_from_text(state: AppState, text: str) -> str:
    outcome = state.task_store.add_task(text)
    if not outcome.ok:
        return _ADD_REPLIES.get(outcome, "Task was not added.")
    task = state.task_store.tasks[-1]
    return f"Added #{len(state.task_store)}: {task.text}"


def cmd_help(state: AppState, args: list[str], text: str) -> str:
    return registry.build_help() + "\n  /exit - Quit."


def cmd_add(state: AppState, args: list[str], text: str) -> str:
    """/add <text> -> append a new task"""
    return add_from_text(state, text)


def cmd_list(state: AppState, args: list[str], text: str) -> str:
    return format_task_list(state.task_store)


def cmd_done(state: AppState, args: list[str], text: str) -> str:
    """
    /done <id>   -> toggle completion by id
    /done #<n>   -> toggle completion of the n-th task
    """
    if not args:
        return "Usage: /done <id|#n>."

    task_id = resolve_task_ref(state, args[0])
    if task_id is None:
        return f"No such task: {args[0]}."

    outcome = state.task_store.toggle_task_completion(task_id)
    if not outcome.ok:
        return f"No such task: {args[0]}."

    task = state.task_store.get_task(task_id)
    mark = "done" if task is not None and task.is_done else "not done"
    logger.debug("Toggled via console id=%s", task_id)
    return f"Marked as {mark}: {task.text if task else task_id}"


def cmd_rm(state: AppState, args: list[str], text: str) -> str:
    """
    /rm <id>   -> delete by id
    /rm #<n>   -> delete the n-th task
    """
    if not args:
        return "Usage: /rm <id|#n>."

    task_id = resolve_task_ref(state, args[0])
    task = state.task_store.get_task(task_id) if task_id else None
    if task_id is None or task is None:
        return f"No such task: {args[0]}."

    if state.task_store.delete_task(task_id) is not TaskOutcome.ACCEPTED:
        return f"No such task: {args[0]}."
    return f"Deleted: {task.text}"


def cmd_status(state: AppState, args: list[str], text: str) -> str:
    settings = state.settings
    store = state.task_store
    backend = getattr(settings, "storage_backend", "?")
    location = getattr(settings, "storage_path", None) or "(in memory)"
    return (
        "Status:\n"
        f"  Tasks: {len(store)} ({store.count_done()} done)\n"
        f"  Storage: {backend} at {location}\n"
        f"  Key: {store.key}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <text> (plain text works too).")
registry.register("list", cmd_list, help_text="List tasks.", aliases=["ls"])
registry.register("done", cmd_done, help_text="Toggle completion: /done <id|#n>.", aliases=["toggle"])
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id|#n>.", aliases=["del", "delete"])
registry.register("status", cmd_status, help_text="Show task counts and storage settings.")
