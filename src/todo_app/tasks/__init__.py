"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority)
- provisioning.py: copies the bundled SQLite template into place, version stamps it
- task_store.py: SQLite-backed CRUD over the todo table
- task_list.py: observable snapshot used by front ends (open / completed views)
- task_form.py: editor form (validation, deadline formatting)
"""
