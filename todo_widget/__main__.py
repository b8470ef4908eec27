# todo_widget/__main__.py

import argparse
from typing import List, Optional

from .persistence import JsonFileBackend, TaskStorage, default_storage_path
from .todo_app import TodoApp


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="todo-widget", description="Terminal todo list")
    parser.add_argument("--storage", default=None,
                        help="path of the JSON storage file (default: $TODO_WIDGET_STORAGE or todos.json)")
    parser.add_argument("--release", action="store_true",
                        help="append to debug.log instead of overwriting it")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    path = args.storage or default_storage_path()
    app = TodoApp(storage=TaskStorage(JsonFileBackend(path)), release=args.release)
    app.run()


if __name__ == "__main__":
    main()
