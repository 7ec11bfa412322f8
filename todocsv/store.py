"""The CSV file that holds the todo list."""

from __future__ import annotations

import csv
import os
import uuid
from datetime import datetime
from pathlib import Path
from typing import Iterable, TextIO

from todocsv.timestamps import format_timestamp

HEADER = ("id", "task", "time", "Complete")

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_BOOL_TEXT = {True: "true", False: "false"}


def parse_bool(text: str) -> bool:
    """Read a boolean spelled in one of the accepted forms; raise ValueError otherwise."""
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(f"invalid boolean {text!r}")


def _read_rows(handle: TextIO) -> list[list[str]]:
    try:
        rows = [row for row in csv.reader(handle, strict=True) if row]
    except csv.Error as exc:
        raise ValueError(f"malformed todo file: {exc}") from None
    if rows:
        width = len(rows[0])
        for number, row in enumerate(rows, start=1):
            if len(row) != width:
                raise ValueError(f"record {number}: wrong number of fields")
    return rows


class TodoStore:
    """A todo list kept as rows of a CSV file, the first row being the header."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def records(self) -> list[list[str]]:
        """Return every row of the file, creating an empty file if there is none."""
        self.path.touch(exist_ok=True)
        with self.path.open(newline="", encoding="utf-8") as handle:
            return _read_rows(handle)

    def add(self, task: str, now: datetime | None = None) -> list[str]:
        """Append a new incomplete task and return its row."""
        moment = now if now is not None else datetime.now().astimezone()
        row = [str(uuid.uuid4()), task, format_timestamp(moment), _BOOL_TEXT[False]]
        with self.path.open("a", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            if os.fstat(handle.fileno()).st_size == 0:
                writer.writerow(HEADER)
            writer.writerow(row)
        return row

    def toggle(self, task_id: str) -> bool:
        """Flip the completion flag of every row with ``task_id``; report whether any matched."""
        rows = self.records()
        found = False
        for row in rows:
            if row[0] == task_id:
                row[3] = _BOOL_TEXT[not parse_bool(row[3])]
                found = True
        self._write(rows)
        return found

    def delete(self, task_id: str) -> bool:
        """Remove every row with ``task_id``; the file is untouched when none matched."""
        rows = self.records()
        kept = [row for row in rows if row[0] != task_id]
        if len(kept) == len(rows):
            return False
        self._write(kept)
        return True

    def _write(self, rows: Iterable[Iterable[str]]) -> None:
        with self.path.open("w", newline="", encoding="utf-8") as handle:
            csv.writer(handle, lineterminator="\n").writerows(rows)