# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from checklist.cli.bootstrap import create_initial_state
from checklist.core.state import AppState
from checklist.core.store import ChecklistStore
from checklist.storage.persistence import PersistenceAdapter

from .fakes import RecordingKeyValueStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="checklist-test",
        log_level="WARNING",
        log_to_file=False,
        storage_backend="sqlite",
        data_dir=tmp_path,
        storage_path=tmp_path / "checklist.sqlite3",
    )


@pytest.fixture()
def kv() -> RecordingKeyValueStore:
    return RecordingKeyValueStore()


@pytest.fixture()
def adapter(kv: RecordingKeyValueStore) -> PersistenceAdapter:
    return PersistenceAdapter(kv)


@pytest.fixture()
def store(adapter: PersistenceAdapter) -> ChecklistStore:
    return ChecklistStore.hydrate(adapter)


@pytest.fixture()
def state(settings: SimpleNamespace, kv: RecordingKeyValueStore) -> AppState:
    """AppState wired with the recording in-memory store."""
    return create_initial_state(settings=settings, kv=kv)
