"""
Application subsystem.

Components:
- app_models.py: data structures (ApplicationRecord, ApplicationDraft, enums)
- app_store.py: in-memory owning store with write-through persistence
- app_query.py: filter/search/sort pipeline and board grouping
- app_summary.py: per-status counts
"""
