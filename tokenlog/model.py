from dataclasses import dataclass, field
from typing import Iterator, Optional

from .constants import LoggerConstants


@dataclass(frozen=True)
class StyledRun:
    text: str
    color: Optional[str] = None


@dataclass
class Paragraph:
    runs: list[StyledRun] = field(default_factory=list)

    def append(self, run: StyledRun):
        self.runs.append(run)

    @property
    def text(self) -> str:
        return ''.join(run.text for run in self.runs)

    def __iter__(self) -> Iterator[StyledRun]:
        return iter(self.runs)

    def __len__(self) -> int:
        return len(self.runs)


class Document:
    """The full log: an ordered list of paragraphs, one per line.

    A document with no paragraphs is valid and represents a cleared log.
    Mutators are called by AppendController only, after it has recorded
    an undo checkpoint.
    """

    paragraphs: list[Paragraph]

    def __init__(self, paragraphs: Optional[list[Paragraph]] = None):
        self.paragraphs = paragraphs if paragraphs is not None else []

    def __eq__(self, other):
        if not isinstance(other, Document):
            return NotImplemented
        return self.paragraphs == other.paragraphs

    def __repr__(self):
        return f"Document({self.paragraphs!r})"

    def __len__(self) -> int:
        return len(self.paragraphs)

    def __iter__(self) -> Iterator[Paragraph]:
        return iter(self.paragraphs)

    @property
    def is_empty(self) -> bool:
        return not self.paragraphs

    @property
    def last_paragraph(self) -> Optional[Paragraph]:
        return self.paragraphs[-1] if self.paragraphs else None

    def runs(self) -> Iterator[StyledRun]:
        """Iterate over every run in document order."""
        for paragraph in self.paragraphs:
            yield from paragraph.runs

    def append_run(self, run: StyledRun):
        """Append run to the last paragraph, creating one if there is none."""
        if not self.paragraphs:
            self.paragraphs.append(Paragraph())
        self.paragraphs[-1].append(run)

    def append_paragraph(self, paragraph: Optional[Paragraph] = None) -> Paragraph:
        if paragraph is None:
            paragraph = Paragraph()
        self.paragraphs.append(paragraph)
        return paragraph

    def break_line(self) -> Paragraph:
        """End the current line and start a new, empty one.

        On an empty document the current line exists only implicitly, so
        it is materialised first and the break leaves a blank line behind.
        """
        if not self.paragraphs:
            self.paragraphs.append(Paragraph())
        return self.append_paragraph()

    def clear(self):
        self.paragraphs.clear()

    def to_plain_text(self, line_break: str = LoggerConstants.LINE_BREAK) -> str:
        """Flatten to plain text, discarding colors."""
        return line_break.join(p.text for p in self.paragraphs)
