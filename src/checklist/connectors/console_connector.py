# src/checklist/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..render import render_board

logger = logging.getLogger(__name__)


_READ_ONLY = {"/help", "/h", "/?", "/list", "/ls", "/stats"}


def _may_mutate(line: str) -> bool:
    parts = line.split()
    if not parts:
        return True
    name = parts[0].lower()
    if name in ("/notes", "/n"):
        return len(parts) > 1
    return name not in _READ_ONLY


def _prompt(state: AppState) -> str:
    cursor = state.store.editing
    if cursor is None:
        return ">>> "
    return f"[{cursor.section.value}] edit> "


def _handle_edit_line(state: AppState, line: str) -> str:
    """
    A plain line while editing behaves like pressing Enter in the edit box.

    Any typed text, blank included, replaces the pending text first, so a
    whitespace-only line removes the task. A truly empty line saves whatever
    is pending (so a fresh, still-empty task gets removed).
    """
    store = state.store
    if line:
        store.set_edit_text(line)
    cursor = store.editing
    pending = cursor.text.strip() if cursor is not None else ""
    store.save_edit()
    if not pending:
        return "Empty text: task removed."
    return f"Saved: {pending}"


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "checklist"))
    print(f"[{app_name}] Use /help for commands, /list to show the board, /exit to quit.\n")
    print(render_board(state.store))
    print()

    while True:
        try:
            raw_line = input(_prompt(state))
            user_input = raw_line.strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            if user_input.startswith("/"):
                response = command_registry.handle(state, user_input)
            elif state.store.editing is not None:
                response = _handle_edit_line(state, raw_line)
            elif not user_input:
                continue
            else:
                response = "Not a command. Use /add <section> to add a task, /help for more."
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response:
            print(response)

        # Redraw the board after anything that may have changed it.
        if _may_mutate(user_input):
            print()
            print(render_board(state.store))
            print()

    logger.info("Console connector finished.")
