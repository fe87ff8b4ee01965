"""
Job application tracker core.

Components:
- applications/: records (app_models), the owning store (app_store),
  derived views (app_query) and summary counts (app_summary)
- storage/: key-value backends (kv_store) and the single-slot persistence adapter (slot)
- core/: error kinds, ports and the TrackerSession used by a UI
- bootstrap.py: wires everything from settings
"""
