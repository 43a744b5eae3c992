"""Deep copies of documents for undo checkpoints.

Each level is rebuilt explicitly so that a snapshot never shares a list
or run with the live document. Later edits to either side must not leak
into the other.
"""

from .model import Document, Paragraph, StyledRun


def clone_run(run: StyledRun) -> StyledRun:
    return StyledRun(run.text, run.color)


def clone_paragraph(paragraph: Paragraph) -> Paragraph:
    clone = Paragraph()
    for run in paragraph.runs:
        clone.append(clone_run(run))
    return clone


def clone_document(document: Document) -> Document:
    """Return a structurally equal document that aliases nothing in the source."""
    clone = Document()
    for paragraph in document.paragraphs:
        clone.append_paragraph(clone_paragraph(paragraph))
    return clone
