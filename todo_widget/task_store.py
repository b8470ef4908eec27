# todo_widget/task_store.py

import itertools
import logging
from typing import Callable, Iterable, Iterator, Optional, Tuple, Union

from .data_model import FilterState, Task
from .errors import NotFound, ValidationError

logger = logging.getLogger(__name__)


class TaskStore:
    """Ordered in-memory task collection; the single source of truth."""

    def __init__(self,
                 tasks: Optional[Iterable[Task]] = None,
                 id_factory: Optional[Callable[[], int]] = None):
        self._tasks = list(tasks or [])
        if id_factory is None:
            start = max((t.id for t in self._tasks), default=0) + 1
            id_factory = itertools.count(start).__next__
        self._next_id = id_factory

    @property
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def get(self, task_id: int) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise NotFound(task_id)

    def add(self, text: str, due_date: str) -> Task:
        """Append a new pending task and return it."""
        text = (text or "").strip()
        if not text:
            raise ValidationError("task required")
        if not due_date:
            raise ValidationError("due date required")

        task = Task(id=self._next_id(), text=text, due_date=due_date)
        self._tasks.append(task)
        logger.debug("Added %r", task)
        return task

    def toggle_completed(self, task_id: int) -> Task:
        task = self.get(task_id)
        task.completed = not task.completed
        logger.debug("Toggled %r", task)
        return task

    def remove(self, task_id: int) -> Task:
        task = self.get(task_id)
        self._tasks.remove(task)
        logger.debug("Removed %r", task)
        return task

    def clear(self) -> None:
        logger.debug("Cleared %d tasks", len(self._tasks))
        self._tasks.clear()

    def filtered(self, filter_state: Union[FilterState, str] = FilterState.ALL) -> Iterator[Task]:
        """Lazily yield tasks matching the filter, in collection order."""
        filter_state = FilterState(filter_state)
        return (task for task in self.tasks if filter_state.matches(task))
