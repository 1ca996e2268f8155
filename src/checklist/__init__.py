"""Single-user checklist: two bounded task lists and a notes area, kept in local storage."""

__version__ = "0.1.0"
