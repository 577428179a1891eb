# tests/test_cli.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from jot.interfaces.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI callback installs its own handlers on the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


@pytest.fixture()
def jot_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("JOT_HOME", str(tmp_path / "home"))
    monkeypatch.delenv("JOT_DATA_FILE", raising=False)
    return tmp_path


def invoke(*args: str, input: str | None = None):
    return runner.invoke(app, list(args), input=input)


def test_version(jot_env: Path) -> None:
    result = invoke("--version")
    assert result.exit_code == 0
    assert "jot version" in result.output


def test_one_shot_commands_share_the_data_file(jot_env: Path) -> None:
    data_file = str(jot_env / "tasks.json")

    result = invoke("--data-file", data_file, "deadline", "return", "book", "/by", "21/12/2020", "2359")
    assert result.exit_code == 0, result.output
    assert "Now you have 1 tasks in the list." in result.output

    result = invoke("--data-file", data_file, "update", "1", "-m", "return", "novel")
    assert result.exit_code == 0, result.output
    assert "[D][ ] return novel (by: 21/12/2020 2359)" in result.output

    result = invoke("--data-file", data_file, "list")
    assert result.exit_code == 0
    assert "1.[D][ ] return novel (by: 21/12/2020 2359)" in result.output


def test_default_data_file_lives_in_jot_home(jot_env: Path) -> None:
    result = invoke("todo", "read", "book")
    assert result.exit_code == 0, result.output
    assert (jot_env / "home" / "tasks.json").exists()


def test_rejected_command_exits_1(jot_env: Path) -> None:
    result = invoke("--data-file", str(jot_env / "tasks.json"), "done", "3")
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_shell_runs_until_bye(jot_env: Path) -> None:
    result = invoke(
        "--data-file",
        str(jot_env / "tasks.json"),
        "shell",
        input="todo read book\n\nfind book\nbye\nlist\n",
    )
    assert result.exit_code == 0, result.output
    assert "Hello! I'm Jot" in result.output
    assert "Here are the matching tasks in your list:\n1.[T][ ] read book" in result.output
    assert "Bye. Hope to see you again soon!" in result.output
    assert "Here are the tasks in your list:" not in result.output


def test_shell_stops_at_end_of_input(jot_env: Path) -> None:
    result = invoke("--data-file", str(jot_env / "tasks.json"), "shell", input="blah\n")
    assert result.exit_code == 0
    assert "OOPS!!! I'm sorry, but I don't know what 'blah' means :-(" in result.output


def test_config_saves_name_used_by_shell(jot_env: Path) -> None:
    result = invoke("config", "--name", "Friday")
    assert result.exit_code == 0, result.output
    assert "assistant_name: Friday" in result.output
    assert (jot_env / "home" / "config.json").exists()

    result = invoke("--data-file", str(jot_env / "tasks.json"), "shell", input="bye\n")
    assert "Hello! I'm Friday" in result.output


def test_config_data_file_becomes_default(jot_env: Path) -> None:
    target = jot_env / "elsewhere.json"
    invoke("config", "--set-data-file", str(target))

    result = invoke("todo", "read", "book")
    assert result.exit_code == 0, result.output
    assert target.exists()
