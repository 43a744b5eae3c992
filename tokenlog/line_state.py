"""Line-start tracking for letter spacing."""

from typing import Optional

from .constants import LoggerConstants


class LineStateMachine:
    """Tracks whether the next letter starts a fresh line.

    Letters on the same line are separated by LETTER_SEPARATOR; the first
    letter of a line is written verbatim. Newlines reset the state,
    remarks leave it alone.
    """

    def __init__(self, first_letter_in_line: bool = True):
        self.is_first_letter_in_line = first_letter_in_line

    def __repr__(self):
        return f"LineStateMachine(first_letter_in_line={self.is_first_letter_in_line})"

    def letter_text(self, tag: Optional[str]) -> str:
        """Return the text to insert for a letter with the given tag."""
        text = tag or ""
        if self.is_first_letter_in_line:
            return text
        return LoggerConstants.LETTER_SEPARATOR + text

    def letter_appended(self):
        self.is_first_letter_in_line = False

    def line_started(self):
        self.is_first_letter_in_line = True
