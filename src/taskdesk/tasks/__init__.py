"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Category)
- task_store.py: in-memory store + flat-file load/save
- errors.py: exceptions raised by parsing and store operations
"""
