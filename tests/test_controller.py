# tests/test_controller.py

from __future__ import annotations

import json

from todo_widget.controller import (
    CONFIRM_DELETE_ALL_MESSAGE,
    DUE_DATE_REQUIRED_MESSAGE,
    TASK_REQUIRED_MESSAGE,
    InteractionController,
    ItemAction,
)
from todo_widget.data_model import FilterState


def test_add_toggle_remove_scenario(controller, store, render_target) -> None:
    assert controller.submit("Buy milk", "2024-01-01") is True
    assert len(store) == 1
    task = store.tasks[0]
    assert task.completed is False
    assert render_target.last.items[0].status_label == "Pending"

    controller.item_action(task.id, ItemAction.TOGGLE)
    assert store.get(task.id).completed is True
    assert render_target.last.items[0].status_label == "Completed"

    controller.item_action(task.id, "delete")
    assert len(store) == 0
    assert render_target.last.empty


def test_empty_text_never_mutates_or_saves(controller, store, backend, notifier, render_target) -> None:
    assert controller.submit("   ", "2024-01-01") is False
    assert len(store) == 0
    assert backend.writes == 0
    assert render_target.calls == []
    assert notifier.messages == [TASK_REQUIRED_MESSAGE]


def test_empty_due_date_rejected(controller, store, notifier) -> None:
    controller.submit("first", "2024-01-01")
    assert controller.submit("second", "") is False
    assert [t.text for t in store] == ["first"]
    assert notifier.messages == [DUE_DATE_REQUIRED_MESSAGE]


def test_every_mutation_saves_full_collection(controller, storage, backend) -> None:
    controller.submit("a", "2024-01-01")
    controller.submit("b", "2024-01-02")
    controller.item_action(1, ItemAction.TOGGLE)
    assert backend.writes == 3
    assert storage.load() == list(controller.store.tasks)


def test_unknown_id_is_a_noop(controller, backend, render_target) -> None:
    controller.submit("a", "2024-01-01")
    writes, renders = backend.writes, len(render_target.calls)
    controller.item_action(99, ItemAction.DELETE)
    controller.item_action(99, ItemAction.TOGGLE)
    assert backend.writes == writes
    assert len(render_target.calls) == renders


def test_delete_all_confirmed(controller, store, backend, confirmer, render_target) -> None:
    for name in ("a", "b", "c"):
        controller.submit(name, "2024-01-01")
    controller.delete_all()
    assert confirmer.prompts == [CONFIRM_DELETE_ALL_MESSAGE]
    assert len(store) == 0
    assert json.loads(backend.items["todos"]) == []
    assert render_target.last.empty


def test_delete_all_declined(controller, store, backend, confirmer) -> None:
    confirmer.answer = False
    controller.submit("a", "2024-01-01")
    writes = backend.writes
    controller.delete_all()
    assert len(store) == 1
    assert backend.writes == writes


def test_change_filter_renders_without_saving(controller, backend, render_target) -> None:
    controller.submit("a", "2024-01-01")
    controller.submit("b", "2024-01-01")
    controller.item_action(2, ItemAction.TOGGLE)
    writes = backend.writes

    controller.change_filter("completed")
    assert controller.current_filter is FilterState.COMPLETED
    assert [r.task_id for r in render_target.last.items] == [2]

    controller.change_filter(FilterState.PENDING)
    assert [r.task_id for r in render_target.last.items] == [1]
    assert [t.id for t in controller.visible_tasks()] == [1]
    assert backend.writes == writes


def test_mutation_renders_with_current_filter(controller, render_target) -> None:
    controller.change_filter(FilterState.COMPLETED)
    controller.submit("a", "2024-01-01")
    assert render_target.last.empty


def test_refresh_uses_loaded_tasks(storage, render_target, notifier, confirmer) -> None:
    from todo_widget.data_model import Task
    from todo_widget.task_store import TaskStore

    storage.save([Task(id=7, text="loaded", due_date="2024-05-05")])
    controller = InteractionController(
        TaskStore(storage.load()),
        storage,
        render_target=render_target,
        notify=notifier,
        confirm=confirmer,
    )
    rendered = controller.refresh()
    assert [r.text for r in rendered.items] == ["loaded"]
    assert render_target.last is rendered


def test_due_date_is_taken_as_entered(controller, store) -> None:
    assert controller.submit("x", "   ") is True
    assert store.tasks[0].due_date == "   "
