from typing import Optional

from .model import Document, Paragraph

# A piece of a visual line drawn in one color
Segment = tuple[str, Optional[str]]


def render_paragraph(paragraph: Paragraph, num_columns: int) -> list[list[Segment]]:
    """Hard-wrap a paragraph into visual lines of colored segments.

    An empty paragraph renders as one empty line. Runs keep their color
    across a wrap.
    """
    lines: list[list[Segment]] = [[]]
    width = 0
    for run in paragraph.runs:
        text = run.text
        while text:
            if width == num_columns:
                lines.append([])
                width = 0
            chunk = text[:num_columns - width]
            lines[-1].append((chunk, run.color))
            width += len(chunk)
            text = text[len(chunk):]
    return lines


def render_document(document: Document, num_columns: int) -> list[list[Segment]]:
    lines: list[list[Segment]] = []
    for paragraph in document.paragraphs:
        lines.extend(render_paragraph(paragraph, num_columns))
    return lines


def line_text(line: list[Segment]) -> str:
    return ''.join(text for text, _ in line)


class LogView:
    """Visible window onto the log.

    The log only grows at its end, so the view always shows the newest
    lines and keeps the cursor after the last character.
    """

    def __init__(self, num_rows: int = 24, num_columns: int = 65):
        self.num_rows = num_rows
        self.num_columns = num_columns
        self.lines: list[list[Segment]] = [[]]
        self.start_line_index = 0
        self.visual_cursor_x = 0
        self.visual_cursor_y = 0

    def render(self, document: Document):
        """Recompute visible lines and cursor position for document."""
        all_lines = render_document(document, self.num_columns) or [[]]
        rows = max(1, self.num_rows)
        self.start_line_index = max(0, len(all_lines) - rows)
        self.lines = all_lines[self.start_line_index:]
        self.visual_cursor_y = len(self.lines) - 1
        self.visual_cursor_x = len(line_text(self.lines[-1]))
