"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- lifecycle.py: escalation table (status -> next status + deadline delay)
- task_store.py: SQLite-backed storage + load/update/prune helpers
"""
