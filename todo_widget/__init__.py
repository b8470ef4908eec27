# todo_widget/__init__.py

from .controller import InteractionController, ItemAction
from .data_model import FilterState, Task
from .errors import NotFound, StorageReadError, TodoError, ValidationError
from .persistence import JsonFileBackend, MemoryBackend, TaskStorage
from .task_store import TaskStore
from .view import DisplayRecord, RenderedList, render

__all__ = [
    "DisplayRecord",
    "FilterState",
    "InteractionController",
    "ItemAction",
    "JsonFileBackend",
    "MemoryBackend",
    "NotFound",
    "RenderedList",
    "StorageReadError",
    "Task",
    "TaskStorage",
    "TaskStore",
    "TodoError",
    "ValidationError",
    "render",
]
