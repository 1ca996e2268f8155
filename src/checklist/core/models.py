# src/checklist/core/models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import StrEnum


def new_task_id() -> str:
    return uuid.uuid4().hex


class Section(StrEnum):
    """
    One of the two bounded task lists.

    Each section owns a fixed capacity and a storage key.
    """

    PRIORITY = "priority"
    OTHER = "other"

    @property
    def capacity(self) -> int:
        return _CAPACITY[self]

    @property
    def storage_key(self) -> str:
        return f"{self.value}-tasks"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, raw: str | None) -> Section | None:
        """Resolve user input (name or alias) to a Section, or None."""
        if not raw:
            return None
        return _ALIASES.get(raw.strip().lower())


_CAPACITY: dict[Section, int] = {
    Section.PRIORITY: 3,
    Section.OTHER: 10,
}

_LABELS: dict[Section, str] = {
    Section.PRIORITY: "Top priority",
    Section.OTHER: "Other tasks",
}

_ALIASES: dict[str, Section] = {
    "priority": Section.PRIORITY,
    "p": Section.PRIORITY,
    "top": Section.PRIORITY,
    "other": Section.OTHER,
    "o": Section.OTHER,
}

NOTES_KEY = "notes"


@dataclass(slots=True)
class Task:
    id: str
    text: str = ""
    done: bool = False

    def to_dict(self) -> dict[str, object]:
        return {"id": self.id, "text": self.text, "done": self.done}


@dataclass(frozen=True, slots=True)
class EditCursor:
    """The single task currently being text-edited (shared by both sections)."""

    section: Section
    id: str
    text: str


@dataclass(frozen=True, slots=True)
class SectionStats:
    section: Section
    count: int
    capacity: int

    @property
    def at_capacity(self) -> bool:
        return self.count >= self.capacity


@dataclass(frozen=True, slots=True)
class BoardStats:
    total: int
    done: int
    sections: tuple[SectionStats, ...]

    def for_section(self, section: Section) -> SectionStats:
        for s in self.sections:
            if s.section is section:
                return s
        raise KeyError(section)
