from __future__ import annotations


class TaskError(Exception):
    pass


class TaskValidationError(TaskError, ValueError):
    pass


class TaskNotFoundError(TaskError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class StoreError(TaskError):
    """Raised when the database itself fails (connection, schema, driver)."""
