# src/checklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the key-value backend,
- hydrates the checklist store and wires everything into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..core.store import ChecklistStore
from ..storage.kv_store import MemoryKeyValueStore, SqliteKeyValueStore
from ..storage.persistence import PersistenceAdapter

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_kv_store(settings) -> KeyValueStore:
    backend = str(getattr(settings, "storage_backend", "sqlite"))
    if backend == "memory":
        logger.info("Using in-memory storage; nothing will survive this session.")
        return MemoryKeyValueStore()
    return SqliteKeyValueStore(settings.storage_path)


def create_initial_state(*, settings=None, kv: KeyValueStore | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the key-value store) injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if kv is None:
        if getattr(settings, "storage_backend", "sqlite") != "memory":
            _ensure_local_dirs(settings)
        kv = create_kv_store(settings)

    store = ChecklistStore.hydrate(PersistenceAdapter(kv))
    return AppState(settings=settings, kv=kv, store=store)
