"""
Task subsystem.

Components:
- task_models.py: data structure (Task) + document codec
- task_errors.py: error types
- task_registry.py: in-memory registry with pending/completed/urgent views
- task_repo.py: in-memory document repository (demo / local runs)
- task_service.py: store-then-registry operations used by the presentation layer
"""
