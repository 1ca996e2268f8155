# src/checklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import KeyValueStore
from .store import ChecklistStore


@dataclass
class AppState:
    # Settings kept on the state so connectors/commands can read them.
    settings: object

    kv: KeyValueStore
    store: ChecklistStore
