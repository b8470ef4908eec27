# todo_widget/errors.py


class TodoError(Exception):
    """Base class for todo widget errors."""


class ValidationError(TodoError):
    """User input rejected before it reaches the task list."""


class StorageReadError(TodoError):
    """Persisted tasks are missing or cannot be parsed."""


class NotFound(TodoError, KeyError):
    """No task with the requested id."""

    def __init__(self, task_id: int):
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self):
        return f"No task with id {self.task_id}"


class EmptySlot(StorageReadError):
    """Nothing has been persisted yet."""
