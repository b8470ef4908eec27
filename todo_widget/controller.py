# todo_widget/controller.py

import logging
from enum import Enum
from typing import Callable, List, Union

from .data_model import FilterState, Task
from .errors import NotFound, ValidationError
from .persistence import TaskStorage
from .task_store import TaskStore
from .view import RenderedList, render

TASK_REQUIRED_MESSAGE = "Please enter a task."
DUE_DATE_REQUIRED_MESSAGE = "Please select a due date."
CONFIRM_DELETE_ALL_MESSAGE = "Are you sure you want to delete all tasks?"

RenderTarget = Callable[[RenderedList], None]
Notifier = Callable[[str], None]
Confirmer = Callable[[str, Callable[[bool], None]], None]


class ItemAction(Enum):
    TOGGLE = "toggle"
    DELETE = "delete"


class InteractionController:
    """Turns user actions into store changes, then saves and redraws.

    The UI is reached only through three callables: ``render_target``
    receives each freshly rendered list, ``notify`` shows a blocking
    message, and ``confirm`` asks a yes/no question and reports the answer
    through the callback it is given.
    """

    def __init__(self,
                 store: TaskStore,
                 storage: TaskStorage,
                 render_target: RenderTarget,
                 notify: Notifier,
                 confirm: Confirmer):
        self.store = store
        self.storage = storage
        self.render_target = render_target
        self.notify = notify
        self.confirm = confirm
        self.current_filter = FilterState.ALL
        self.logger = logging.getLogger(__name__)

    def visible_tasks(self) -> List[Task]:
        return list(self.store.filtered(self.current_filter))

    def refresh(self) -> RenderedList:
        """Redraw from the store without touching storage."""
        rendered = render(self.store.filtered(self.current_filter))
        self.render_target(rendered)
        return rendered

    def _save_and_render(self) -> None:
        self.storage.save(self.store.tasks)
        self.refresh()

    def submit(self, text: str, due_date: str) -> bool:
        """Add a task from the entry fields; True means the fields can be cleared."""
        text = (text or "").strip()
        due_date = due_date or ""

        if not text:
            self._reject(ValidationError("task required"), TASK_REQUIRED_MESSAGE)
            return False
        if not due_date:
            self._reject(ValidationError("due date required"), DUE_DATE_REQUIRED_MESSAGE)
            return False

        self.store.add(text, due_date)
        self._save_and_render()
        return True

    def _reject(self, error: ValidationError, message: str) -> None:
        self.logger.debug("Submission rejected: %s", error)
        self.notify(message)

    def item_action(self, task_id: int, action: Union[ItemAction, str]) -> None:
        action = ItemAction(action)
        try:
            if action is ItemAction.TOGGLE:
                self.store.toggle_completed(task_id)
            else:
                self.store.remove(task_id)
        except NotFound as exc:
            self.logger.warning("Ignoring %s: %s", action.value, exc)
            return
        self._save_and_render()

    def delete_all(self) -> None:
        """Ask for confirmation, then drop every task."""
        def on_result(confirmed: bool) -> None:
            if not confirmed:
                self.logger.debug("Delete all cancelled")
                return
            self.store.clear()
            self._save_and_render()

        self.confirm(CONFIRM_DELETE_ALL_MESSAGE, on_result)

    def change_filter(self, filter_state: Union[FilterState, str]) -> None:
        self.current_filter = FilterState(filter_state)
        self.logger.debug("Filter changed to %s", self.current_filter.value)
        self.refresh()
