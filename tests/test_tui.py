# tests/test_tui.py

from __future__ import annotations

import asyncio

from textual.widgets import Input

from jot.application import Session
from jot.infrastructure.storage import TaskListRepository
from jot.tui.app import JotApp
from jot.tui.widgets import DialogWidget


def test_dialog_shows_greeting_and_replies(repository: TaskListRepository) -> None:
    async def scenario() -> list[tuple[str, str]]:
        app = JotApp(Session.open(repository))
        async with app.run_test() as pilot:
            app.query_one("#dialog-input", Input).value = "todo read book"
            await pilot.press("enter")
            await pilot.pause()
            dialog = app.query_one("#dialog", DialogWidget)
            return [(line.role, line.content) for line in dialog.lines]

    lines = asyncio.run(scenario())

    assert lines[0] == ("jot", "Hello! I'm Jot\nWhat can I do for you?")
    assert lines[1] == ("user", "todo read book")
    assert lines[2][0] == "jot"
    assert lines[2][1].startswith("Got it! I've added this task:\n[T][ ] read book")
    assert repository.exists()


def test_bye_closes_the_app(repository: TaskListRepository) -> None:
    async def scenario() -> bool:
        app = JotApp(Session.open(repository))
        async with app.run_test() as pilot:
            app.submit("bye")
            await pilot.pause()
            return app.session.is_exit

    assert asyncio.run(scenario()) is True
