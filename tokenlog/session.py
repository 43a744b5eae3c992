"""Session state for a single logging session.

A LogSession owns the live document, its undo history and the line
state. Whatever drives UI events creates one session and hands it to an
AppendController; nothing else holds these objects.
"""

from typing import Optional

from .line_state import LineStateMachine
from .model import Document
from .undo import UndoFrame, UndoManager


class LogSession:
    """Owns the mutable state of one logging session."""

    def __init__(self, undo_limit: Optional[int] = None):
        """Create an empty session.

        Args:
            undo_limit: Maximum number of undo frames kept, or None for
                unbounded history.
        """
        self.document = Document()
        self.line_state = LineStateMachine()
        self.undo = UndoManager(max_entries=undo_limit)

    @property
    def is_first_letter_in_line(self) -> bool:
        return self.line_state.is_first_letter_in_line

    def plain_text(self) -> str:
        """Get the flattened text of the live document.

        Returns:
            Paragraph texts joined by line breaks, styling discarded
        """
        return self.document.to_plain_text()

    def _apply_frame(self, frame: UndoFrame) -> None:
        """Replace the live state with an undo frame's contents.

        The frame's snapshot is taken over as the live document.
        """
        self.document = frame.snapshot
        self.line_state.is_first_letter_in_line = frame.first_letter_in_line
