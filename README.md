# todocsv

A small command-line todo list. Tasks are kept in a file named `todo.csv`
in the current directory. Its first row is the header `id,task,time,Complete`
and each further row is one task.

## Installation

```
pip install .
```

## Usage

Add a task. It gets a random UUID as its id, the current local time, and
starts out incomplete (`false`). The header row is written when the file is
new or empty:

```
todocsv add "Buy groceries"
```

Show every task in an aligned table with the columns `ID`, `TASK`, `AGE`
and `DONE`:

```
todocsv list
```

The age is given in whole seconds, minutes, hours or days since the task
was added, for example `5 minutes ago` or `3 days ago`. If the file holds
no rows at all, `No items found` is printed instead.

Flip a task between done and not done:

```
todocsv complete <id>
```

Remove a task:

```
todocsv delete <id>
```

If no task has the given id, `complete` and `delete` print `ID not found`;
`delete` then leaves the file as it was.

Run without a command, `todocsv` prints its help. If `todo.csv` is
malformed (rows of differing length, a bad timestamp or a completion value
that is not a boolean), the error is printed to standard error and the exit
status is 1. The help text names the program `todo-go`; the `-t/--toggle`
option is accepted but has no effect.

## Using it from Python

```python
from datetime import datetime, timezone
from todocsv.store import TodoStore
from todocsv.cli import render_table

store = TodoStore("todo.csv")
row = store.add("Buy groceries", datetime.now(timezone.utc))
store.toggle(row[0])          # True if a row with that id was found
print(render_table(store.records()), end="")
store.delete(row[0])          # True if a row was removed
```

`TodoStore.records()` returns every row of the file, header included, as
lists of strings, creating an empty file if none exists. `parse_bool` in
`todocsv.store` reads the completion values (`1`, `t`, `T`, `true`, `TRUE`,
`True` and their false counterparts) and raises `ValueError` for anything
else.

Timestamps are stored in the RFC 822 style with a numeric zone, such as
`02 Jan 25 15:04 +0000`. `todocsv.timestamps` has `format_timestamp`,
`parse_timestamp` and `humanize_age`, which work with that format.

## What it does not do

The command line always works on `todo.csv` in the current directory; there
is no option to choose another file. Tasks cannot be renamed, given due
dates or priorities, or sorted and filtered; they are listed in the order
they were added.