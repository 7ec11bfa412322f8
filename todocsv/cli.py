"""Command line interface for the todo list kept in ``todo.csv``."""

from __future__ import annotations

import argparse
import sys
from datetime import datetime, timezone
from typing import Sequence

from todocsv.store import TodoStore
from todocsv.timestamps import humanize_age

TODO_FILE = "todo.csv"


def _align(lines: list[list[str]], minwidth: int = 10, padding: int = 2) -> str:
    columns = list(zip(*lines))[:-1]
    widths = [max(minwidth, max(map(len, column)) + padding) for column in columns]
    rendered = [
        "".join(cell.ljust(width) for cell, width in zip(line, widths)) + line[-1]
        for line in lines
    ]
    return "\n".join(rendered) + "\n"


def render_table(records: Sequence[Sequence[str]], now: datetime | None = None) -> str:
    """Render the rows of the todo file, header first, as an aligned table."""
    if not records:
        return "No items found\n"
    if now is None:
        now = datetime.now(timezone.utc)
    lines = [["ID", "TASK", "AGE", "DONE"]]
    lines.extend(
        [row[0], row[1], humanize_age(row[2], now), row[3]] for row in records[1:]
    )
    return _align(lines)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its add, complete, delete and list commands."""
    parser = argparse.ArgumentParser(
        prog="todo-go", description="Keep a todo list in todo.csv."
    )
    parser.add_argument("-t", "--toggle", action="store_true", help="Help message for toggle")
    commands = parser.add_subparsers(dest="command", metavar="command")

    add = commands.add_parser(
        "add",
        help="Add a new task to your todo list.",
        description="Append a new task with a unique ID, the current time "
        "and an incomplete status.",
    )
    add.add_argument("task", help="task description")

    complete = commands.add_parser(
        "complete",
        help="Toggle the completion status of a task by its ID.",
        description="Flip the 'Complete' status of the task with the given ID.",
    )
    complete.add_argument("id", help="task ID")

    delete = commands.add_parser(
        "delete",
        help="Delete a task from your todo list by its ID.",
        description="Remove the task with the given ID from the todo list.",
    )
    delete.add_argument("id", help="task ID")

    commands.add_parser(
        "list",
        help="List all tasks in your todo list.",
        description="Print each task's ID, description, age and completion status.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code in (0, None) else 1
    if args.command is None:
        parser.print_help()
        return 0

    store = TodoStore(TODO_FILE)
    try:
        if args.command == "add":
            store.add(args.task)
        elif args.command == "complete":
            if not store.toggle(args.id):
                print("ID not found")
        elif args.command == "delete":
            if not store.delete(args.id):
                print("ID not found")
        else:
            print(render_table(store.records()), end="")
    except (OSError, ValueError, IndexError) as exc:
        print(f"todo-go: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())