# src/taskbox/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import add_from_text
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str) -> str | None:
    """
    Process one console line.

    Slash commands go to the registry; anything else is added as a task.
    Returns the reply text, or None for blank input.
    """
    line = line.strip()
    if not line:
        return None

    try:
        reply = command_registry.handle(state, line)
        if reply is None:
            reply = add_from_text(state, line)
    except Exception:
        logger.exception("Console line handler crashed.")
        return "Internal error while handling a command."
    return reply


def run_console_loop(state: AppState, read_line: Callable[[str], str] = input) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.task_store))
    _print_ts("[CONSOLE] Type a task to add it. Use /help for commands. Use /exit to quit.\n")

    while True:
        try:
            user_input = read_line(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            _print_ts(reply)

    logger.info("Console connector finished.")
