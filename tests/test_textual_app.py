"""Tests for the Textual front end."""

import asyncio
import os

from textual.widgets import Input

from tokenlog.model import Document, Paragraph, StyledRun
from tokenlog.settings import default_settings
from tokenlog.textual_app import TokenLogApp, document_to_text


def _settings(tmp_path):
    settings = default_settings()
    settings['letters'] = {'a': "A", 'b': "B"}
    settings['log_dir'] = str(tmp_path / "Logs")
    return settings


def test_app_creation(tmp_path):
    app = TokenLogApp(settings=_settings(tmp_path))
    assert app.letter_buttons == {"letter-0": "A", "letter-1": "B"}
    assert app.session.document.is_empty


def test_document_to_text_keeps_colors():
    doc = Document([
        Paragraph([StyledRun("A"), StyledRun("("), StyledRun("n", "gray50"), StyledRun(")")]),
        Paragraph([StyledRun("B")]),
    ])
    text = document_to_text(doc)
    assert text.plain == "A(n)\nB"
    styles = {str(span.style) for span in text.spans}
    assert "gray50" in styles


def test_buttons_drive_the_log(tmp_path):
    async def scenario():
        app = TokenLogApp(settings=_settings(tmp_path))
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.click("#letter-0")
            await pilot.click("#letter-1")
            await pilot.click("#newline")
            await pilot.click("#letter-0")
            await pilot.pause()
            text = app.session.plain_text()

            await pilot.click("#undo")
            await pilot.pause()
            after_undo = app.session.plain_text()

            await pilot.click("#clear")
            await pilot.pause()
            after_clear = app.session.plain_text()
        return text, after_undo, after_clear

    text, after_undo, after_clear = asyncio.run(scenario())
    assert text == "A  B\nA"
    assert after_undo == "A  B\n"
    assert after_clear == ""


def test_remark_button_commits_and_resets_input(tmp_path):
    async def scenario():
        app = TokenLogApp(settings=_settings(tmp_path))
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.click("#letter-0")
            remark = app.query_one("#remark", Input)
            remark.value = "note"
            await pilot.click("#commit-remark")
            await pilot.pause()
            return app.session.plain_text(), remark.value

    text, remaining = asyncio.run(scenario())
    assert text == "A(note)"
    assert remaining == ""


def test_empty_remark_is_ignored(tmp_path):
    async def scenario():
        app = TokenLogApp(settings=_settings(tmp_path))
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.click("#commit-remark")
            await pilot.pause()
            return len(app.session.undo)

    assert asyncio.run(scenario()) == 0


def test_actions_match_buttons(tmp_path):
    app = TokenLogApp(settings=_settings(tmp_path))
    app.refresh_log = lambda: None
    app.controller.append_letter("A")
    app.action_newline()
    app.controller.append_letter("B")
    assert app.session.plain_text() == "A\nB"

    app.action_undo()
    assert app.session.plain_text() == "A\n"
    app.action_clear_log()
    assert app.session.document.is_empty


def test_shutdown_saves_once(tmp_path):
    app = TokenLogApp(settings=_settings(tmp_path))
    app.controller.append_letter("A")
    path = app.shutdown()

    assert path is not None
    assert os.path.dirname(path) == str(tmp_path / "Logs")
    with open(path, 'r', encoding='utf-8') as f:
        assert f.read() == "A"
    assert app.shutdown() == path
    assert len(os.listdir(tmp_path / "Logs")) == 1
