# todo_widget/data_model.py

from dataclasses import dataclass
from enum import Enum


@dataclass
class Task:
    """Represents a single task in the todo list."""
    id: int
    text: str
    due_date: str
    completed: bool = False

    def to_dict(self):
        """Convert Task to a dictionary for JSON serialization."""
        return {
            "id": self.id,
            "text": self.text,
            "dueDate": self.due_date,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: dict):
        """Create Task from a dictionary (JSON deserialization)."""
        completed = data.get("completed", False)
        if not isinstance(completed, bool):
            raise TypeError(f"completed must be a bool, got {completed!r}")
        return cls(
            id=int(data["id"]),
            text=str(data["text"]),
            due_date=str(data["dueDate"]),
            completed=completed,
        )

    def __repr__(self):
        return f"Task(id={self.id}, text={self.text}, completed={self.completed})"


class FilterState(Enum):
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"

    def matches(self, task: Task) -> bool:
        if self is FilterState.COMPLETED:
            return task.completed
        if self is FilterState.PENDING:
            return not task.completed
        return True
