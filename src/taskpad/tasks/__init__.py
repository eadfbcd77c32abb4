"""
Task subsystem.

Components:
- task_models.py: data structures (Task) and store errors
- task_store.py: in-memory storage + query/update helpers
"""
