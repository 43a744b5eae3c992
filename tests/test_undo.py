"""Tests for the undo manager."""

from tokenlog.model import StyledRun
from tokenlog.session import LogSession
from tokenlog.snapshot import clone_document
from tokenlog.undo import UndoFrame, UndoManager


def test_undo_on_empty_stack_is_noop():
    session = LogSession()
    session.document.append_run(StyledRun("A"))
    session.line_state.letter_appended()
    before = clone_document(session.document)

    assert session.undo.undo(session) is False
    assert session.document == before
    assert session.is_first_letter_in_line is False


def test_record_checkpoint_captures_pre_mutation_state():
    session = LogSession()
    session.undo.record_checkpoint(session)
    session.document.append_run(StyledRun("A"))
    session.line_state.letter_appended()

    assert len(session.undo) == 1
    assert session.undo.undo(session) is True
    assert session.document.is_empty
    assert session.is_first_letter_in_line is True
    assert not session.undo.can_undo()


def test_checkpoint_is_isolated_from_later_edits():
    session = LogSession()
    session.document.append_run(StyledRun("A"))
    session.undo.record_checkpoint(session)
    session.document.append_run(StyledRun("B"))
    session.document.paragraphs[0].runs[0:1] = []

    session.undo.undo(session)

    assert session.document.to_plain_text() == "A"


def test_frames_pop_in_lifo_order():
    session = LogSession()
    for text in ("A", "B", "C"):
        session.undo.record_checkpoint(session)
        session.document.append_run(StyledRun(text))

    session.undo.undo(session)
    assert session.plain_text() == "AB"
    session.undo.undo(session)
    assert session.plain_text() == "A"
    session.undo.undo(session)
    assert session.plain_text() == ""
    assert session.undo.undo(session) is False


def test_max_entries_drops_oldest_frames():
    manager = UndoManager(max_entries=2)
    session = LogSession()
    for text in ("A", "B", "C"):
        manager.push(UndoFrame(snapshot=clone_document(session.document), first_letter_in_line=True))
        session.document.append_run(StyledRun(text))

    assert len(manager) == 2
    manager.undo(session)
    manager.undo(session)
    # The frame for the empty document was dropped
    assert session.plain_text() == "A"
    assert manager.undo(session) is False


def test_unbounded_by_default():
    manager = UndoManager()
    session = LogSession()
    for _ in range(1000):
        manager.record_checkpoint(session)
    assert len(manager) == 1000


def test_clear():
    session = LogSession()
    session.undo.record_checkpoint(session)
    session.undo.clear()
    assert not session.undo.can_undo()
