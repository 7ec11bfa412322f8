from datetime import datetime, timedelta, timezone

import pytest

from todocsv.cli import build_parser, main, render_table
from todocsv.store import HEADER, TodoStore
from todocsv.timestamps import format_timestamp

NOW = datetime(2025, 5, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_render_empty():
    assert render_table([], NOW) == "No items found\n"


def test_render_header_only():
    assert render_table([list(HEADER)], NOW) == "ID        TASK      AGE       DONE\n"


def test_render_columns_align():
    task = "a rather long task description"
    rows = [
        list(HEADER),
        ["abc", task, format_timestamp(NOW - timedelta(hours=3)), "false"],
        ["de", "x", format_timestamp(NOW), "true"],
    ]
    lines = render_table(rows, NOW).splitlines()
    assert len(lines) == 3
    assert lines[1].index(task) == lines[0].index("TASK")
    assert lines[2].index("x") == lines[0].index("TASK")
    assert lines[1].index("3 hours ago") == lines[0].index("AGE")
    assert lines[1].endswith("false")
    assert lines[2].endswith("true")


def test_render_rejects_bad_time():
    with pytest.raises(ValueError):
        render_table([list(HEADER), ["a", "b", "not a time", "false"]], NOW)


def test_parser_add_takes_task():
    args = build_parser().parse_args(["add", "Buy groceries"])
    assert (args.command, args.task) == ("add", "Buy groceries")


def test_main_add_and_list(workdir, capsys):
    assert main(["add", "Buy groceries"]) == 0
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    task_id = TodoStore(workdir / "todo.csv").records()[1][0]
    assert task_id in out
    assert "Buy groceries" in out
    assert "seconds ago" in out


def test_main_list_empty(workdir, capsys):
    assert main(["list"]) == 0
    assert capsys.readouterr().out == "No items found\n"


def test_main_complete_toggles(workdir, capsys):
    main(["add", "Buy groceries"])
    store = TodoStore(workdir / "todo.csv")
    task_id = store.records()[1][0]
    assert main(["complete", task_id]) == 0
    assert store.records()[1][3] == "true"
    assert capsys.readouterr().out == ""


def test_main_complete_unknown(workdir, capsys):
    main(["add", "Buy groceries"])
    assert main(["complete", "missing"]) == 0
    assert capsys.readouterr().out == "ID not found\n"


def test_main_delete(workdir, capsys):
    main(["add", "Buy groceries"])
    store = TodoStore(workdir / "todo.csv")
    task_id = store.records()[1][0]
    assert main(["delete", task_id]) == 0
    assert store.records() == [list(HEADER)]
    assert main(["delete", task_id]) == 0
    assert capsys.readouterr().out == "ID not found\n"


def test_main_without_command_prints_help(workdir, capsys):
    assert main([]) == 0
    assert "complete" in capsys.readouterr().out


def test_main_add_missing_argument(workdir):
    assert main(["add"]) == 1


def test_main_reports_bad_file(workdir, capsys):
    (workdir / "todo.csv").write_text("id,task,time,Complete\nabc,x,t,maybe\n")
    assert main(["complete", "abc"]) == 1
    assert "maybe" in capsys.readouterr().err