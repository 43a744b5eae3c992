"""Tests for document cloning."""

from tokenlog.model import Document, Paragraph, StyledRun
from tokenlog.snapshot import clone_document, clone_paragraph, clone_run


def _sample_document():
    return Document([
        Paragraph([StyledRun("A"), StyledRun("  B")]),
        Paragraph([]),
        Paragraph([StyledRun("("), StyledRun("note", "gray50"), StyledRun(")")]),
    ])


def test_clone_is_structurally_equal():
    doc = _sample_document()
    assert clone_document(doc) == doc


def test_clone_shares_no_containers_or_runs():
    doc = _sample_document()
    clone = clone_document(doc)

    assert clone is not doc
    assert clone.paragraphs is not doc.paragraphs
    for original, copied in zip(doc.paragraphs, clone.paragraphs):
        assert copied is not original
        assert copied.runs is not original.runs
        for run, copied_run in zip(original.runs, copied.runs):
            assert copied_run is not run


def test_mutating_source_does_not_change_clone():
    doc = _sample_document()
    clone = clone_document(doc)
    expected = clone_document(doc)

    doc.append_run(StyledRun("X"))
    doc.paragraphs[0].runs.clear()
    doc.break_line()

    assert clone == expected


def test_mutating_clone_does_not_change_source():
    doc = _sample_document()
    expected = clone_document(doc)
    clone = clone_document(doc)

    clone.clear()

    assert doc == expected


def test_clone_empty_document():
    clone = clone_document(Document())
    assert clone == Document()
    assert clone.is_empty


def test_clone_paragraph_with_no_runs():
    paragraph = Paragraph()
    clone = clone_paragraph(paragraph)
    assert clone == paragraph
    assert clone is not paragraph


def test_clone_run_keeps_color():
    run = StyledRun("note", "gray50")
    clone = clone_run(run)
    assert clone == run
    assert clone is not run
