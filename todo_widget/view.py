# todo_widget/view.py

from dataclasses import dataclass
from typing import Iterable, Tuple

from .data_model import Task

EMPTY_MESSAGE = "No task found"


@dataclass(frozen=True)
class DisplayRecord:
    """What one row of the list shows."""
    task_id: int
    text: str
    due_date: str
    status_label: str
    status_class: str
    completed: bool


@dataclass(frozen=True)
class RenderedList:
    items: Tuple[DisplayRecord, ...]

    @property
    def empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)


def render_task(task: Task) -> DisplayRecord:
    return DisplayRecord(
        task_id=task.id,
        text=task.text,
        due_date=task.due_date,
        status_label="Completed" if task.completed else "Pending",
        status_class="completed" if task.completed else "pending",
        completed=task.completed,
    )


def render(tasks: Iterable[Task]) -> RenderedList:
    """Map tasks to display records, keeping their order."""
    return RenderedList(items=tuple(render_task(t) for t in tasks))
