# src/checklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.models import Section, Task
from ..core.state import AppState
from ..render import render_board, render_section, render_stats_line

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

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
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        # /notes keeps the raw remainder so spacing inside the text survives.
        if name in ("notes", "n"):
            rest = line[1:].strip()[len(parts[0]) :].strip()
            if not rest:
                return handler(state, [])
            sub, _, text = rest.partition(" ")
            return handler(state, [sub, text.strip()] if text.strip() else [sub])

        return handler(state, parts[1:])

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()

_SECTION_USAGE = "Section must be one of: priority (p, top), other (o)."


def _resolve_row(state: AppState, args: list[str], usage: str) -> tuple[Section, Task] | str:
    """Parse "<section> <n>" into a section and its n-th task, or return an error line."""
    if len(args) < 2:
        return usage
    section = Section.parse(args[0])
    if section is None:
        return _SECTION_USAGE
    try:
        position = int(args[1])
    except ValueError:
        return f"Row number must be an integer, got {args[1]!r}."
    task = state.store.task_at(section, position)
    if task is None:
        return f"No task #{position} in {section.label}."
    return section, task


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    if args:
        section = Section.parse(args[0])
        if section is None:
            return _SECTION_USAGE
        return render_section(state.store, section)
    return render_board(state.store)


def cmd_stats(state: AppState, args: list[str]) -> str:
    return render_stats_line(state.store)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <section> -> append an empty task and start editing it
    """
    if not args:
        return "Usage: /add <section>"
    section = Section.parse(args[0])
    if section is None:
        return _SECTION_USAGE
    if state.store.add(section) is None:
        return f"{section.label} is full ({section.capacity}). Delete a task to add another."
    return f"New task in {section.label}. Type its text and press Enter."


def cmd_edit(state: AppState, args: list[str]) -> str:
    resolved = _resolve_row(state, args, "Usage: /edit <section> <n>")
    if isinstance(resolved, str):
        return resolved
    section, task = resolved
    state.store.begin_edit(section, task)
    return f"Editing: {task.text}. Type new text and press Enter, or /cancel."


def cmd_save(state: AppState, args: list[str]) -> str:
    if state.store.editing is None:
        return "Nothing is being edited."
    state.store.save_edit()
    return "Saved."


def cmd_cancel(state: AppState, args: list[str]) -> str:
    if state.store.editing is None:
        return "Nothing is being edited."
    state.store.cancel_edit()
    return "Edit cancelled."


def cmd_toggle(state: AppState, args: list[str]) -> str:
    resolved = _resolve_row(state, args, "Usage: /toggle <section> <n>")
    if isinstance(resolved, str):
        return resolved
    section, task = resolved
    state.store.toggle(section, task.id)
    return f"{'Done' if task.done else 'Not done'}: {task.text}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    """
    /delete              -> delete the task being edited
    /delete <section> <n> -> delete a row
    """
    if not args:
        if state.store.editing is None:
            return "Usage: /delete <section> <n> (or /delete while editing)."
        state.store.delete_editing()
        return "Deleted."

    resolved = _resolve_row(state, args, "Usage: /delete <section> <n>")
    if isinstance(resolved, str):
        return resolved
    section, task = resolved
    state.store.delete(section, task.id)
    return f"Deleted: {task.text or 'Untitled task'}"


def cmd_clear(state: AppState, args: list[str]) -> str:
    removed = state.store.clear_completed()
    if not removed:
        return "No completed tasks."
    return f"Cleared {removed} completed task(s)."


def cmd_notes(state: AppState, args: list[str]) -> str:
    """
    /notes            -> show notes
    /notes set <text> -> replace notes
    /notes add <text> -> append a line
    /notes clear      -> erase notes
    """
    store = state.store
    if not args:
        return store.notes or "(no notes)"

    sub = args[0].lower()
    text = args[1] if len(args) > 1 else ""

    if sub == "set":
        store.set_notes(text)
        return "Notes saved."
    if sub == "add":
        if not text:
            return "Usage: /notes add <text>"
        store.set_notes(f"{store.notes}\n{text}" if store.notes else text)
        return "Notes saved."
    if sub == "clear":
        store.set_notes("")
        return "Notes cleared."

    return "Usage: /notes | /notes set <text> | /notes add <text> | /notes clear"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the board (or one section).", aliases=["ls"])
registry.register("stats", cmd_stats, help_text="Show done/total and section fill.")
registry.register("add", cmd_add, help_text="Add a task: /add priority | /add other.", aliases=["a"])
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <section> <n>.", aliases=["e"])
registry.register("save", cmd_save, help_text="Save the task being edited.")
registry.register("cancel", cmd_cancel, help_text="Stop editing without changes.")
registry.register("toggle", cmd_toggle, help_text="Check/uncheck: /toggle <section> <n>.", aliases=["t", "x"])
registry.register("delete", cmd_delete, help_text="Delete: /delete <section> <n>.", aliases=["del", "rm"])
registry.register("clear", cmd_clear, help_text="Remove completed tasks from both sections.")
registry.register(
    "notes", cmd_notes, help_text="Notes: /notes | /notes set|add <text> | /notes clear.", aliases=["n"]
)
