"""
Storage subsystem.

Components:
- kv_store.py: SQLite and JSON-file key-value backends
- slot.py: ApplicationSlot, the JSON array stored under one key
"""
