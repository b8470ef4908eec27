# todo_widget/screens.py

import logging

from textual.app import ComposeResult
from textual.containers import Grid
from textual.screen import ModalScreen
from textual.widgets import Button, Label

MODAL_CSS = """
{name} {{
    align: center middle;
}}

{name} > Grid {{
    grid-size: 2;
    grid-gutter: 1 2;
    grid-rows: 1fr 3;
    padding: 0 1;
    width: 60;
    height: 11;
    border: thick $background 80%;
    background: $surface;
}}

{name} .message {{
    column-span: 2;
    height: 1fr;
    width: 1fr;
    content-align: center middle;
}}

{name} Button {{
    width: 100%;
}}
"""


class AlertScreen(ModalScreen[None]):
    """Blocking notification; dismissed with OK, enter or escape."""

    DEFAULT_CSS = MODAL_CSS.format(name="AlertScreen")

    BINDINGS = [
        ("enter", "dismiss_alert", "OK"),
        ("escape", "dismiss_alert", "OK"),
    ]

    def __init__(self, message: str):
        super().__init__()
        self.message_text = message
        self.logger = logging.getLogger(__name__)

    def compose(self) -> ComposeResult:
        with Grid():
            yield Label(self.message_text, classes="message", markup=False)
            yield Button("OK", variant="primary", id="ok")

    def on_mount(self) -> None:
        self.query_one("#ok", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.action_dismiss_alert()

    def action_dismiss_alert(self) -> None:
        self.logger.debug("Alert dismissed: %s", self.message_text)
        self.dismiss(None)


class ConfirmScreen(ModalScreen[bool]):
    """Yes/No question; dismisses with the answer."""

    DEFAULT_CSS = MODAL_CSS.format(name="ConfirmScreen")

    BINDINGS = [
        ("y", "answer(True)", "Yes"),
        ("n", "answer(False)", "No"),
        ("escape", "answer(False)", "No"),
    ]

    def __init__(self, message: str):
        super().__init__()
        self.message_text = message
        self.logger = logging.getLogger(__name__)

    def compose(self) -> ComposeResult:
        with Grid():
            yield Label(self.message_text, classes="message", markup=False)
            yield Button("Yes", variant="error", id="yes")
            yield Button("No", variant="primary", id="no")

    def on_mount(self) -> None:
        self.query_one("#no", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.action_answer(event.button.id == "yes")

    def action_answer(self, confirmed: bool) -> None:
        self.logger.debug("Confirmation for %r: %s", self.message_text, confirmed)
        self.dismiss(confirmed)
