"""The single mutation entry point for a log session."""

from typing import Optional

from .constants import LoggerConstants
from .model import StyledRun
from .session import LogSession


class AppendController:
    """Applies user commands to a LogSession.

    Every mutation records an undo checkpoint of the pre-mutation state
    before touching the document. Code outside this class must not edit
    the session's document directly.
    """

    def __init__(
        self,
        session: LogSession,
        line_end_marker: str = LoggerConstants.DEFAULT_LINE_END_MARKER,
        remark_color: Optional[str] = LoggerConstants.REMARK_COLOR,
        placeholder: str = LoggerConstants.REMARK_PLACEHOLDER,
    ):
        self.session = session
        self.line_end_marker = line_end_marker
        self.remark_color = remark_color
        self.placeholder = placeholder

    def _checkpoint(self):
        self.session.undo.record_checkpoint(self.session)

    def append_styled_text(self, text: str, color: Optional[str] = None):
        """Checkpoint, then append one run to the current line."""
        self._checkpoint()
        self.session.document.append_run(StyledRun(text, color))

    def append_letter(self, tag: Optional[str]):
        line_state = self.session.line_state
        self.append_styled_text(line_state.letter_text(tag))
        line_state.letter_appended()

    def append_newline(self):
        """Newline action: optional line-end marker, then a line break."""
        if self.line_end_marker:
            self.append_styled_text(self.line_end_marker)
        self._break_line()

    def append_raw_newline(self):
        """Line break typed directly into the log; never writes the marker."""
        self._break_line()

    def _break_line(self):
        self._checkpoint()
        self.session.document.break_line()
        self.session.line_state.line_started()

    def is_remark(self, text: Optional[str]) -> bool:
        """Return True if text holds a remark worth committing."""
        body = (text or "").strip()
        return bool(body) and body != self.placeholder

    def append_remark(self, text: Optional[str]) -> bool:
        """Append "(text)" to the current line.

        Each of the three runs is its own undo step. The line state is not
        touched, so a letter after a remark still gets its separator.

        Returns:
            True if the remark was appended and the input should be reset
        """
        if not self.is_remark(text):
            return False
        body = text.strip()
        self.append_styled_text(LoggerConstants.REMARK_OPEN)
        self.append_styled_text(body, self.remark_color)
        self.append_styled_text(LoggerConstants.REMARK_CLOSE)
        return True

    def clear(self) -> bool:
        """Empty the log; the line state is reset even if there was nothing to clear.

        Returns:
            True if the document had content and was cleared
        """
        cleared = False
        if not self.session.document.is_empty:
            self._checkpoint()
            self.session.document.clear()
            cleared = True
        self.session.line_state.line_started()
        return cleared

    def undo(self) -> bool:
        return self.session.undo.undo(self.session)
