"""Remark input buffer with placeholder text."""

from .constants import LoggerConstants


class RemarkBox:
    """Single-line remark input.

    While unfocused and empty the box shows the placeholder. The raw
    content may therefore equal the placeholder; AppendController treats
    that the same as an empty remark.
    """

    def __init__(self, placeholder: str = LoggerConstants.REMARK_PLACEHOLDER):
        self.placeholder = placeholder
        self.content = placeholder
        self.focused = False

    @property
    def text(self) -> str:
        """Trimmed content, as handed to remark commits."""
        return self.content.strip()

    @property
    def showing_placeholder(self) -> bool:
        return not self.focused and self.content == self.placeholder

    def focus(self):
        """Gain focus; any content, placeholder included, is dropped."""
        self.focused = True
        self.content = ""

    def blur(self):
        self.focused = False
        if not self.text:
            self.content = self.placeholder

    def insert(self, text: str):
        if not self.focused:
            self.focus()
        self.content += text

    def backspace(self):
        self.content = self.content[:-1]

    def reset(self):
        """Drop the content and show the placeholder again."""
        self.content = ""
        if not self.focused:
            self.content = self.placeholder
