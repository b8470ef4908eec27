# todo_widget/persistence.py

import os
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol

from .data_model import Task
from .errors import EmptySlot, StorageReadError

TASKS_FILE = "todos.json"
STORAGE_KEY = "todos"
STORAGE_ENV = "TODO_WIDGET_STORAGE"

logger = logging.getLogger(__name__)


def default_storage_path() -> Path:
    """Storage file location, honouring the TODO_WIDGET_STORAGE override."""
    raw = os.getenv(STORAGE_ENV)
    if raw is None or raw.strip() == "":
        return Path(TASKS_FILE)
    return Path(raw).expanduser()


class KeyValueBackend(Protocol):
    """String-valued key-value storage, like a browser's localStorage."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryBackend:
    """Dict-backed storage that lives as long as the process."""

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


class JsonFileBackend:
    """Key-value storage kept in a single JSON object file.

    Values are stored as strings, so the file holds e.g.
    ``{"todos": "[{\\"id\\": 1, ...}]"}``.
    """

    def __init__(self, path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: top level is not an object", self.path)
            return {}
        return data

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is None:
            return None
        return value if isinstance(value, str) else json.dumps(value)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)


class TaskStorage:
    """Reads and writes the whole task collection under one key."""

    def __init__(self, backend: KeyValueBackend, key: str = STORAGE_KEY):
        self.backend = backend
        self.key = key

    def _read(self) -> List[Task]:
        raw = self.backend.get_item(self.key)
        if raw is None:
            raise EmptySlot(f"nothing stored under {self.key!r}")
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise StorageReadError(f"invalid JSON under {self.key!r}: {exc}") from exc
        if not isinstance(data, list):
            raise StorageReadError(f"expected a list under {self.key!r}, got {type(data).__name__}")
        try:
            tasks = [Task.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as exc:
            raise StorageReadError(f"malformed task record: {exc!r}") from exc
        ids = [t.id for t in tasks]
        if len(set(ids)) != len(ids):
            raise StorageReadError(f"duplicate task ids under {self.key!r}")
        return tasks

    def load(self) -> List[Task]:
        """Load tasks; any read problem yields an empty list."""
        try:
            tasks = self._read()
        except EmptySlot as exc:
            logger.debug("Starting with no tasks: %s", exc)
            return []
        except StorageReadError as exc:
            logger.warning("Discarding stored tasks: %s", exc)
            return []
        logger.debug("Loaded %d tasks", len(tasks))
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Persist tasks, replacing whatever was stored before."""
        data = [t.to_dict() for t in tasks]
        self.backend.set_item(self.key, json.dumps(data))
        logger.debug("Saved %d tasks", len(data))
