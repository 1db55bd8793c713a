"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskOutcome) and errors
- task_store.py: in-memory store with id allocation
- task_codec.py: the "<id>|<0|1>|<description>" line format
- task_file.py: scoped read / full overwrite of the tasks file
- task_api.py: load/save helpers used by the rest of the app
"""
