# src/checklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store depends on Protocols instead of concrete implementations.
This keeps the storage backend swappable and makes testing easier.
"""

from typing import Protocol

from .models import Section, Task


class KeyValueStore(Protocol):
    """
    Local string key-value storage (browser localStorage analogue).

    get() returns None for a missing key.
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...
    def close(self) -> None: ...


class ChecklistRepo(Protocol):
    def load(self, section: Section) -> list[Task]: ...
    def save(self, section: Section, tasks: list[Task]) -> None: ...
    def load_notes(self) -> str: ...
    def save_notes(self, text: str) -> None: ...
