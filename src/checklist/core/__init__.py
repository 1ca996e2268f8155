"""
Checklist core.

Components:
- models.py: data structures (Task, Section, EditCursor, stats)
- ports.py: storage Protocols the store depends on
- store.py: ChecklistStore, the in-memory state with write-through persistence
- state.py: AppState wiring for connectors
"""
