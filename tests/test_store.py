# tests/test_store.py

from __future__ import annotations

import json

from checklist.core.models import EditCursor, Section
from checklist.core.store import ChecklistStore
from checklist.storage.persistence import PersistenceAdapter

from .fakes import RecordingKeyValueStore


def _add_with_text(store: ChecklistStore, section: Section, text: str):
    task = store.add(section)
    assert task is not None
    store.set_edit_text(text)
    store.save_edit()
    return store.get_task(section, task.id)


def test_add_then_save_edit_creates_task(store: ChecklistStore) -> None:
    task = store.add(Section.OTHER)
    assert task is not None
    assert store.editing == EditCursor(section=Section.OTHER, id=task.id, text="")

    store.set_edit_text("Call dentist")
    store.save_edit()

    tasks = store.tasks(Section.OTHER)
    assert len(tasks) == 1
    assert tasks[0].text == "Call dentist"
    assert tasks[0].done is False
    assert store.editing is None


def test_add_rejected_at_capacity(store: ChecklistStore) -> None:
    for i in range(3):
        _add_with_text(store, Section.PRIORITY, f"p{i}")

    before = store.tasks(Section.PRIORITY)
    assert store.at_capacity(Section.PRIORITY)

    assert store.add(Section.PRIORITY) is None
    assert store.tasks(Section.PRIORITY) == before
    assert len(store.tasks(Section.PRIORITY)) == 3
    assert store.editing is None


def test_capacity_holds_for_other_section(store: ChecklistStore) -> None:
    for _ in range(15):
        store.add(Section.OTHER)
        store.set_edit_text("x")
        store.save_edit()
        assert len(store.tasks(Section.OTHER)) <= Section.OTHER.capacity
    assert len(store.tasks(Section.OTHER)) == 10


def test_whitespace_save_removes_task(store: ChecklistStore) -> None:
    task = _add_with_text(store, Section.PRIORITY, "Write report")
    assert task is not None

    store.begin_edit(Section.PRIORITY, task)
    assert store.editing is not None
    assert store.editing.text == "Write report"

    store.set_edit_text("   \t ")
    store.save_edit()

    assert store.tasks(Section.PRIORITY) == []
    assert store.editing is None


def test_save_edit_trims_text(store: ChecklistStore) -> None:
    task = _add_with_text(store, Section.OTHER, "  padded  ")
    assert task is not None
    assert task.text == "padded"


def test_toggle_twice_restores(store: ChecklistStore) -> None:
    task = _add_with_text(store, Section.OTHER, "Laundry")
    assert task is not None

    store.toggle(Section.OTHER, task.id)
    assert store.get_task(Section.OTHER, task.id).done is True
    store.toggle(Section.OTHER, task.id)
    assert store.get_task(Section.OTHER, task.id).done is False


def test_unknown_ids_are_ignored(store: ChecklistStore, kv: RecordingKeyValueStore) -> None:
    _add_with_text(store, Section.OTHER, "Keep me")
    writes_before = len(kv.writes)

    store.toggle(Section.OTHER, "missing")
    store.delete(Section.OTHER, "missing")
    store.toggle(Section.PRIORITY, store.tasks(Section.OTHER)[0].id)

    assert [t.text for t in store.tasks(Section.OTHER)] == ["Keep me"]
    assert store.tasks(Section.OTHER)[0].done is False
    assert len(kv.writes) == writes_before


def test_cancel_edit_keeps_text(store: ChecklistStore) -> None:
    task = _add_with_text(store, Section.OTHER, "Original")
    assert task is not None

    store.begin_edit(Section.OTHER, task)
    store.set_edit_text("Changed")
    store.cancel_edit()

    assert store.editing is None
    assert store.get_task(Section.OTHER, task.id).text == "Original"


def test_cancel_after_add_leaves_transient_task(store: ChecklistStore, kv) -> None:
    store.add(Section.OTHER)
    store.cancel_edit()

    tasks = store.tasks(Section.OTHER)
    assert len(tasks) == 1
    assert tasks[0].text == ""
    # Saved verbatim, but dropped again on the next load.
    assert json.loads(kv.get("other-tasks"))[0]["text"] == ""
    assert PersistenceAdapter(kv).load(Section.OTHER) == []


def test_delete_editing_removes_and_closes_cursor(store: ChecklistStore) -> None:
    task = _add_with_text(store, Section.PRIORITY, "Drop me")
    assert task is not None

    store.begin_edit(Section.PRIORITY, task)
    store.delete_editing()

    assert store.editing is None
    assert store.tasks(Section.PRIORITY) == []


def test_clear_completed_keeps_pending(store: ChecklistStore) -> None:
    a = _add_with_text(store, Section.PRIORITY, "done one")
    b = _add_with_text(store, Section.OTHER, "done two")
    c = _add_with_text(store, Section.OTHER, "pending")
    store.toggle(Section.PRIORITY, a.id)
    store.toggle(Section.OTHER, b.id)

    removed = store.clear_completed()

    assert removed == 2
    assert store.tasks(Section.PRIORITY) == []
    assert [t.id for t in store.tasks(Section.OTHER)] == [c.id]


def test_mutations_write_through(store: ChecklistStore, kv: RecordingKeyValueStore) -> None:
    task = _add_with_text(store, Section.PRIORITY, "Persist me")
    store.toggle(Section.PRIORITY, task.id)
    store.set_notes("remember the milk")

    saved = json.loads(kv.get("priority-tasks"))
    assert saved == [{"id": task.id, "text": "Persist me", "done": True}]
    assert kv.get("notes") == "remember the milk"

    reloaded = ChecklistStore.hydrate(PersistenceAdapter(kv))
    assert reloaded.tasks(Section.PRIORITY) == store.tasks(Section.PRIORITY)
    assert reloaded.notes == "remember the milk"


def test_set_notes_unchanged_does_not_write(store: ChecklistStore, kv) -> None:
    store.set_notes("")
    assert kv.writes == []


def test_stats_counts_both_sections(store: ChecklistStore) -> None:
    a = _add_with_text(store, Section.PRIORITY, "a")
    _add_with_text(store, Section.OTHER, "b")
    store.toggle(Section.PRIORITY, a.id)

    stats = store.stats()
    assert (stats.total, stats.done) == (2, 1)
    assert stats.for_section(Section.PRIORITY).count == 1
    assert stats.for_section(Section.OTHER).capacity == 10
    assert not stats.for_section(Section.PRIORITY).at_capacity


def test_hydrate_caps_sections() -> None:
    rows = [{"id": f"id{i}", "text": f"t{i}", "done": False} for i in range(6)]
    kv = RecordingKeyValueStore({"priority-tasks": json.dumps(rows)})

    store = ChecklistStore.hydrate(PersistenceAdapter(kv))

    assert [t.id for t in store.tasks(Section.PRIORITY)] == ["id0", "id1", "id2"]
    assert kv.writes == []


def test_delete_closes_cursor_on_same_task(store: ChecklistStore) -> None:
    keep = _add_with_text(store, Section.OTHER, "Keep")
    drop = _add_with_text(store, Section.OTHER, "Drop")

    store.begin_edit(Section.OTHER, keep)
    store.delete(Section.OTHER, drop.id)
    assert store.editing is not None
    assert store.editing.id == keep.id

    store.delete(Section.OTHER, keep.id)
    assert store.editing is None
    assert store.tasks(Section.OTHER) == []
