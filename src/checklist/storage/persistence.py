# src/checklist/storage/persistence.py

from __future__ import annotations

import json
import logging
from typing import Any

from ..core.models import NOTES_KEY, Section, Task, new_task_id
from ..core.ports import KeyValueStore

logger = logging.getLogger(__name__)


def _normalize_task(raw: Any) -> Task | None:
    if not isinstance(raw, dict):
        return None
    task_id = raw.get("id")
    text = raw.get("text")
    done = raw.get("done")
    return Task(
        id=task_id if isinstance(task_id, str) and task_id else new_task_id(),
        text=text if isinstance(text, str) else "",
        done=done if isinstance(done, bool) else False,
    )


class PersistenceAdapter:
    """
    Reads and writes checklist data through a KeyValueStore.

    Layout (three independent entries):
    - "priority-tasks" / "other-tasks": JSON array of {id, text, done}
    - "notes": raw string

    Reads never raise: storage or parse failures degrade to empty defaults.
    Writes are best-effort and propagate storage errors.
    """

    def __init__(self, kv: KeyValueStore) -> None:
        self._kv = kv

    def _read(self, key: str) -> str | None:
        try:
            return self._kv.get(key)
        except Exception:
            logger.warning("Storage read failed key=%s; using defaults.", key, exc_info=True)
            return None

    def load(self, section: Section) -> list[Task]:
        """
        Load a section's tasks.

        Elements are normalized one by one, blank tasks are dropped, duplicate
        ids are reassigned and the result is capped at the section capacity.
        """
        raw = self._read(section.storage_key)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except (ValueError, TypeError, RecursionError):
            logger.warning("Malformed JSON under key=%s; starting empty.", section.storage_key)
            return []

        if not isinstance(data, list):
            logger.warning("Unexpected shape under key=%s; starting empty.", section.storage_key)
            return []

        out: list[Task] = []
        seen: set[str] = set()
        for item in data:
            task = _normalize_task(item)
            if task is None or not task.text.strip():
                continue
            if task.id in seen:
                task.id = new_task_id()
            seen.add(task.id)
            out.append(task)

        if len(out) > section.capacity:
            logger.info(
                "Truncating %s from %d to capacity %d", section.value, len(out), section.capacity
            )
            out = out[: section.capacity]

        logger.debug("Loaded %d task(s) for %s", len(out), section.value)
        return out

    def save(self, section: Section, tasks: list[Task]) -> None:
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)
        self._kv.set(section.storage_key, payload)

    def load_notes(self) -> str:
        raw = self._read(NOTES_KEY)
        return raw if isinstance(raw, str) else ""

    def save_notes(self, text: str) -> None:
        self._kv.set(NOTES_KEY, text)
