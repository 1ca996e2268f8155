"""
Storage layer.

- kv_store.py: key-value backends (SQLite, in-memory)
- persistence.py: JSON (de)serialization of sections and notes
"""
