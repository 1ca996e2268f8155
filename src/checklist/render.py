# src/checklist/render.py

"""Plain-text rendering of the checklist board for the console connector."""

from __future__ import annotations

from .core.models import Section, Task
from .core.store import ChecklistStore

CAPACITY_BANNER = "This section is full. Delete a task to add another."
EMPTY_ROW = "No tasks yet."
UNTITLED = "Untitled task"


def render_stats_line(store: ChecklistStore) -> str:
    stats = store.stats()
    parts = [f"{stats.done}/{stats.total} done"]
    for s in stats.sections:
        parts.append(f"{s.section.label}: {s.count}/{s.capacity}")
    return " • ".join(parts)


def render_task_row(position: int, task: Task) -> str:
    mark = "[x]" if task.done else "[ ]"
    return f"  {position:>2}. {mark} {task.text or UNTITLED}"


def render_section(store: ChecklistStore, section: Section) -> str:
    lines = [f"{section.label} (max {section.capacity})"]
    if store.at_capacity(section):
        lines.append(f"  ! {CAPACITY_BANNER}")

    tasks = store.tasks(section)
    if not tasks:
        lines.append(f"  {EMPTY_ROW}")
    for i, task in enumerate(tasks, start=1):
        lines.append(render_task_row(i, task))
    return "\n".join(lines)


def render_notes(store: ChecklistStore) -> str:
    body = store.notes
    if not body:
        return "Notes\n  (empty)"
    return "Notes\n" + "\n".join(f"  {line}" for line in body.splitlines())


def render_board(store: ChecklistStore) -> str:
    blocks = [
        "Checklist",
        render_stats_line(store),
        "",
        render_section(store, Section.PRIORITY),
        "",
        render_section(store, Section.OTHER),
        "",
        render_notes(store),
    ]

    cursor = store.editing
    if cursor is not None:
        shown = cursor.text or UNTITLED
        blocks += [
            "",
            f"Editing ({cursor.section.label}): {shown}",
            "  Type new text + Enter to save • empty Enter keeps current text • spaces + Enter deletes • /cancel • /delete",
        ]
    return "\n".join(blocks)
