# todo_widget/todo_app.py

import logging
import datetime
from typing import Callable, Optional

from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Input, Label, ListView, Select
from textual import events

from .controller import InteractionController, ItemAction
from .data_model import FilterState
from .persistence import JsonFileBackend, TaskStorage, default_storage_path
from .screens import AlertScreen, ConfirmScreen
from .task_store import TaskStore
from .textual_widgets import TaskItem
from .view import EMPTY_MESSAGE, RenderedList

LOG_FILE = "debug.log"

FILTER_OPTIONS = [
    ("All", FilterState.ALL.value),
    ("Completed", FilterState.COMPLETED.value),
    ("Pending", FilterState.PENDING.value),
]


class TodoApp(App):
    """Main TUI Application."""
    CSS = """
    #header {
        dock: top;
        text-style: bold;
        padding: 0 1;
        width: 100%;
        height: 1;
    }

    #entry, #controls {
        height: 3;
    }

    #todo-input {
        width: 1fr;
    }

    #due-date-input {
        width: 16;
    }

    #filter-todos {
        width: 1fr;
    }

    #todo-list {
        height: 1fr;
    }

    #no-task-msg {
        width: 100%;
        content-align: center middle;
        color: #888888;
        display: none;
    }

    #no-task-msg.show {
        display: block;
    }
    """

    def __init__(self,
                 storage: Optional[TaskStorage] = None,
                 release: bool = False,
                 log_file: Optional[str] = LOG_FILE):
        super().__init__()
        if log_file:
            logging.basicConfig(
                filename=log_file,
                filemode='a' if release else 'w',
                level=logging.DEBUG,
                format='%(asctime)s - %(levelname)s - %(message)s'
            )
        self.logger = logging.getLogger(__name__)

        if storage is None:
            storage = TaskStorage(JsonFileBackend(default_storage_path()))
        self.storage = storage
        self.store = TaskStore(storage.load())
        self.controller = InteractionController(
            self.store,
            self.storage,
            render_target=self.show_tasks,
            notify=self.show_alert,
            confirm=self.ask_confirmation,
        )
        self.logger.debug("TodoApp initialized with %d tasks", len(self.store))

    def compose(self) -> ComposeResult:
        current_date = datetime.datetime.now().strftime("%Y-%m-%d")
        yield Label(f"Todo List ({current_date})", id="header")
        with Horizontal(id="entry"):
            yield Input(placeholder="Add a new task...", id="todo-input")
            yield Input(placeholder="YYYY-MM-DD", id="due-date-input")
            yield Button("Add", variant="primary", id="add-btn")
        with Horizontal(id="controls"):
            yield Select(FILTER_OPTIONS, value=FilterState.ALL.value,
                         allow_blank=False, id="filter-todos")
            yield Button("Delete All", variant="error", id="delete-all-btn")
        yield ListView(id="todo-list")
        yield Label(EMPTY_MESSAGE, id="no-task-msg")

    def on_mount(self) -> None:
        """Called once the app is fully loaded."""
        self.controller.refresh()
        self.query_one("#todo-input", Input).focus()

    # Capabilities handed to the controller

    def show_tasks(self, rendered: RenderedList) -> None:
        """Redraw the list view from a rendered list."""
        list_view = self.query_one("#todo-list", ListView)
        list_view.clear()
        for record in rendered.items:
            list_view.append(TaskItem(record))
        self.query_one("#no-task-msg", Label).set_class(rendered.empty, "show")

    def show_alert(self, message: str) -> None:
        self.push_screen(AlertScreen(message))

    def ask_confirmation(self, message: str, on_result: Callable[[bool], None]) -> None:
        self.push_screen(ConfirmScreen(message), lambda confirmed: on_result(bool(confirmed)))

    # Event handlers

    def submit_entry(self) -> None:
        todo_input = self.query_one("#todo-input", Input)
        due_date_input = self.query_one("#due-date-input", Input)
        if self.controller.submit(todo_input.value, due_date_input.value):
            todo_input.value = ""
            due_date_input.value = ""
            todo_input.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.submit_entry()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-btn":
            self.submit_entry()
        elif event.button.id == "delete-all-btn":
            self.controller.delete_all()

    def on_task_item_action(self, message: TaskItem.Action) -> None:
        self.controller.item_action(message.task_id, message.action)

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.value is Select.BLANK:
            return
        self.controller.change_filter(event.value)

    def highlighted_task_id(self) -> Optional[int]:
        """Return the id of the highlighted row, or None if nothing is highlighted."""
        item = self.query_one("#todo-list", ListView).highlighted_child
        if isinstance(item, TaskItem):
            return item.task_id
        return None

    def on_key(self, event: events.Key) -> None:
        """Handle key events while the task list has focus."""
        if not isinstance(self.focused, ListView):
            return

        if event.key in ("space", "d"):
            task_id = self.highlighted_task_id()
            if task_id is None:
                return
            action = ItemAction.TOGGLE if event.key == "space" else ItemAction.DELETE
            event.stop()
            self.controller.item_action(task_id, action)
        elif event.key == "q":
            event.stop()
            self.exit()
