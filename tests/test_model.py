"""Tests for the document model."""

import dataclasses

import pytest

from tokenlog.model import Document, Paragraph, StyledRun


def test_empty_document():
    doc = Document()
    assert doc.is_empty
    assert len(doc) == 0
    assert doc.last_paragraph is None
    assert doc.to_plain_text() == ""


def test_append_run_creates_paragraph_when_empty():
    doc = Document()
    doc.append_run(StyledRun("A"))

    assert len(doc) == 1
    assert doc.paragraphs[0].runs == [StyledRun("A")]


def test_append_run_goes_to_last_paragraph():
    doc = Document()
    doc.append_run(StyledRun("A"))
    doc.append_paragraph()
    doc.append_run(StyledRun("B", "red"))

    assert len(doc) == 2
    assert doc.paragraphs[0].text == "A"
    assert doc.paragraphs[1].runs == [StyledRun("B", "red")]


def test_break_line_on_empty_document_leaves_blank_line():
    doc = Document()
    doc.break_line()

    assert len(doc) == 2
    assert doc.to_plain_text() == "\n"


def test_break_line_after_content():
    doc = Document()
    doc.append_run(StyledRun("A"))
    doc.break_line()
    doc.append_run(StyledRun("B"))

    assert len(doc) == 2
    assert doc.to_plain_text() == "A\nB"


def test_clear_removes_all_paragraphs():
    doc = Document()
    doc.append_run(StyledRun("A"))
    doc.break_line()
    doc.clear()

    assert doc.is_empty
    assert doc.to_plain_text() == ""


def test_plain_text_discards_colors():
    doc = Document([
        Paragraph([StyledRun("A"), StyledRun("("), StyledRun("note", "gray50"), StyledRun(")")]),
        Paragraph([StyledRun("B")]),
    ])
    assert doc.to_plain_text() == "A(note)\nB"
    assert doc.to_plain_text(line_break="\r\n") == "A(note)\r\nB"


def test_runs_iterates_in_document_order():
    doc = Document([
        Paragraph([StyledRun("A"), StyledRun("B")]),
        Paragraph([]),
        Paragraph([StyledRun("C")]),
    ])
    assert [run.text for run in doc.runs()] == ["A", "B", "C"]


def test_structural_equality():
    a = Document([Paragraph([StyledRun("A", "red")])])
    b = Document([Paragraph([StyledRun("A", "red")])])
    c = Document([Paragraph([StyledRun("A")])])

    assert a == b
    assert a != c
    assert a != "A"


def test_styled_run_is_immutable():
    run = StyledRun("A")
    with pytest.raises(dataclasses.FrozenInstanceError):
        run.text = "B"
