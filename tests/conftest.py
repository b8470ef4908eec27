# tests/conftest.py

from __future__ import annotations

import itertools

import pytest

from todo_widget.controller import InteractionController
from todo_widget.persistence import TaskStorage
from todo_widget.task_store import TaskStore

from .fakes import CountingBackend, FakeConfirmer, RecordingNotifier, RecordingRenderTarget


@pytest.fixture()
def backend() -> CountingBackend:
    return CountingBackend()


@pytest.fixture()
def storage(backend: CountingBackend) -> TaskStorage:
    return TaskStorage(backend)


@pytest.fixture()
def store() -> TaskStore:
    """Store with deterministic ids 1, 2, 3, ..."""
    return TaskStore(id_factory=itertools.count(1).__next__)


@pytest.fixture()
def render_target() -> RecordingRenderTarget:
    return RecordingRenderTarget()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def confirmer() -> FakeConfirmer:
    return FakeConfirmer(answer=True)


@pytest.fixture()
def controller(store, storage, render_target, notifier, confirmer) -> InteractionController:
    return InteractionController(
        store,
        storage,
        render_target=render_target,
        notify=notifier,
        confirm=confirmer,
    )
