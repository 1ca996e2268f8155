# src/checklist/core/store.py

from __future__ import annotations

import logging

from .models import BoardStats, EditCursor, Section, SectionStats, Task, new_task_id
from .ports import ChecklistRepo

logger = logging.getLogger(__name__)


class ChecklistStore:
    """
    In-memory checklist state: two bounded sections, notes and the edit cursor.

    Every effective mutation is written through to the repo immediately.
    Operations on unknown ids and adds past capacity are silent no-ops.
    """

    def __init__(
        self,
        repo: ChecklistRepo,
        *,
        tasks: dict[Section, list[Task]] | None = None,
        notes: str = "",
    ) -> None:
        self._repo = repo
        self._sections: dict[Section, list[Task]] = {s: [] for s in Section}
        for section, items in (tasks or {}).items():
            self._sections[section] = list(items)[: section.capacity]
        self._notes = notes
        self._editing: EditCursor | None = None

    @classmethod
    def hydrate(cls, repo: ChecklistRepo) -> ChecklistStore:
        """Build a store from persisted state (read once at startup)."""
        tasks = {s: repo.load(s)[: s.capacity] for s in Section}
        store = cls(repo, tasks=tasks, notes=repo.load_notes())
        logger.info(
            "Checklist hydrated priority=%d other=%d notes_len=%d",
            len(tasks[Section.PRIORITY]),
            len(tasks[Section.OTHER]),
            len(store.notes),
        )
        return store

    # ---- read side ----

    @property
    def notes(self) -> str:
        return self._notes

    @property
    def editing(self) -> EditCursor | None:
        return self._editing

    def tasks(self, section: Section) -> list[Task]:
        return list(self._sections[section])

    def get_task(self, section: Section, task_id: str) -> Task | None:
        for t in self._sections[section]:
            if t.id == task_id:
                return t
        return None

    def task_at(self, section: Section, position: int) -> Task | None:
        """Task by 1-based row number, or None when out of range."""
        items = self._sections[section]
        if position < 1 or position > len(items):
            return None
        return items[position - 1]

    def at_capacity(self, section: Section) -> bool:
        return len(self._sections[section]) >= section.capacity

    def stats(self) -> BoardStats:
        everything = [t for s in Section for t in self._sections[s]]
        return BoardStats(
            total=len(everything),
            done=sum(1 for t in everything if t.done),
            sections=tuple(
                SectionStats(section=s, count=len(self._sections[s]), capacity=s.capacity)
                for s in Section
            ),
        )

    # ---- persistence ----

    def _commit(self, section: Section) -> None:
        self._repo.save(section, self._sections[section])

    def _remove(self, section: Section, task_id: str) -> bool:
        items = self._sections[section]
        kept = [t for t in items if t.id != task_id]
        if len(kept) == len(items):
            return False
        self._sections[section] = kept
        self._commit(section)
        return True

    # ---- operations ----

    def add(self, section: Section) -> Task | None:
        """
        Append an empty task and open the edit cursor on it.

        Returns None (and changes nothing) when the section is full.
        """
        if self.at_capacity(section):
            logger.debug("add rejected: %s is at capacity %d", section.value, section.capacity)
            return None

        task = Task(id=new_task_id())
        self._sections[section].append(task)
        self._commit(section)
        self._editing = EditCursor(section=section, id=task.id, text="")
        logger.debug("Task added section=%s id=%s", section.value, task.id)
        return task

    def toggle(self, section: Section, task_id: str) -> None:
        task = self.get_task(section, task_id)
        if task is None:
            return
        task.done = not task.done
        self._commit(section)

    def begin_edit(self, section: Section, task: Task) -> None:
        self._editing = EditCursor(section=section, id=task.id, text=task.text)

    def set_edit_text(self, text: str) -> None:
        if self._editing is None:
            return
        self._editing = EditCursor(
            section=self._editing.section, id=self._editing.id, text=text
        )

    def save_edit(self) -> None:
        """
        Apply the edit cursor.

        Whitespace-only text deletes the task; anything else replaces its text
        (trimmed). The cursor is cleared either way.
        """
        cursor = self._editing
        if cursor is None:
            return

        trimmed = (cursor.text or "").strip()
        self._editing = None

        if not trimmed:
            if self._remove(cursor.section, cursor.id):
                logger.debug("Empty edit removed task id=%s", cursor.id)
            return

        task = self.get_task(cursor.section, cursor.id)
        if task is None:
            return
        if task.text != trimmed:
            task.text = trimmed
            self._commit(cursor.section)

    def cancel_edit(self) -> None:
        self._editing = None

    def delete(self, section: Section, task_id: str) -> None:
        self._remove(section, task_id)
        if self._editing is not None and self._editing.id == task_id:
            self._editing = None

    def delete_editing(self) -> None:
        """Delete the task under the edit cursor and close the cursor."""
        cursor = self._editing
        if cursor is None:
            return
        self._editing = None
        self._remove(cursor.section, cursor.id)

    def clear_completed(self) -> int:
        """Remove every done task from both sections. Returns how many were removed."""
        removed = 0
        for section in Section:
            items = self._sections[section]
            kept = [t for t in items if not t.done]
            if len(kept) == len(items):
                continue
            removed += len(items) - len(kept)
            self._sections[section] = kept
            self._commit(section)
        if removed:
            logger.info("Cleared %d completed task(s)", removed)
        return removed

    def set_notes(self, text: str) -> None:
        if text == self._notes:
            return
        self._notes = text
        self._repo.save_notes(text)
