# todo_widget/textual_widgets.py

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Label, ListItem
from textual import events

from .controller import ItemAction
from .view import DisplayRecord


class TaskItem(ListItem):
    """A ListItem representing a single task row in the ListView."""

    DEFAULT_CSS = """
    TaskItem {
        height: 3;
    }

    TaskItem > Horizontal {
        height: 3;
    }

    TaskItem .task-text {
        width: 1fr;
        padding: 1 1;
    }

    TaskItem .due-date-text, TaskItem .status-text {
        width: 14;
        padding: 1 1;
    }

    TaskItem .status-text.pending {
        color: $warning;
    }

    TaskItem .status-text.completed {
        color: $success;
    }

    TaskItem.-completed .task-text {
        color: #666666;
        text-style: strike;
    }

    TaskItem Button {
        min-width: 6;
        width: 6;
    }
    """

    class Action(events.Message):
        """Posted when one of the row's buttons is pressed."""
        def __init__(self, task_id: int, action: ItemAction) -> None:
            super().__init__()
            self.task_id = task_id
            self.action = action

    def __init__(self, record: DisplayRecord):
        self._record = record
        super().__init__()
        if record.completed:
            self.add_class("-completed")

    @property
    def record(self) -> DisplayRecord:
        return self._record

    @property
    def task_id(self) -> int:
        return self._record.task_id

    def compose(self) -> ComposeResult:
        record = self._record
        with Horizontal():
            yield Label(record.text, classes="task-text", markup=False)
            yield Label(record.due_date, classes="due-date-text", markup=False)
            yield Label(record.status_label, classes=f"status-text {record.status_class}")
            yield Button("✔", classes="complete-btn", variant="success")
            yield Button("✖", classes="delete-btn", variant="error")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.has_class("complete-btn"):
            self.post_message(self.Action(self.task_id, ItemAction.TOGGLE))
        elif event.button.has_class("delete-btn"):
            self.post_message(self.Action(self.task_id, ItemAction.DELETE))
