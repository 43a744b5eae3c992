"""Terminal interface using Blessed for display and Curtsies for input."""

import blessed
from typing import Optional
import sys
import select

from .constants import LoggerConstants


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    # Rows below the log: remark input and status line
    RESERVED_ROWS = 2

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None

    def setup(self):
        """Enter fullscreen mode and prepare terminal."""
        print(self.term.enter_fullscreen)
        print(self.term.clear)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            from curtsies import Input  # type: ignore
            # Enter raw mode immediately so reads work
            self._curtsies_input = Input(keynames='curtsies')  # type: ignore
            self._curtsies_input.__enter__()

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            print(self.term.exit_fullscreen)
            print(self.term.normal_cursor)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)  # type: ignore
            finally:
                self._curtsies_input = None

    def styled(self, text: str, color: Optional[str]) -> str:
        """Wrap text in the terminal sequence for a named color."""
        if not color or not text:
            return text
        # Unknown color names format as empty strings, leaving text plain
        return self.term.formatter(color) + text + self.term.normal

    def _compose_display_line(self, segments: list, view_width: int) -> str:
        """Compose a colored display line, truncated and padded to view_width."""
        out = []
        used = 0
        for text, color in segments:
            text = text[:view_width - used]
            if not text:
                break
            out.append(self.styled(text, color))
            used += len(text)
        out.append(' ' * (view_width - used))
        return ''.join(out)

    def draw_frame(
        self,
        lines: list,
        cursor_y: int,
        cursor_x: int,
        left_margin: int = 0,
        view_width: int = LoggerConstants.DOCUMENT_WIDTH,
        remark_text: str = "",
        remark_focused: bool = False,
        remark_placeholder: bool = False,
        status_override: Optional[str] = None,
    ) -> None:
        """Draw the log, the remark line and the status line.

        Args:
            lines: Visual lines, each a list of (text, color) segments
            cursor_y: Cursor row in the log (0-based)
            cursor_x: Cursor column in the log (0-based)
            left_margin: Number of spaces to indent from left
            view_width: Width of the log area
            remark_text: Content of the remark box
            remark_focused: Place the cursor in the remark box instead of the log
            remark_placeholder: remark_text is the placeholder and is drawn dimmed
            status_override: Message shown instead of the key hints
        """
        print(self.term.home + self.term.clear, end='')

        for y, segments in enumerate(lines):
            print(self.term.move(y, left_margin) + self._compose_display_line(segments, view_width), end='')

        # Remark box sits just above the status line
        remark_row = self.term.height - 2
        prompt = " Remark: "
        if remark_placeholder:
            remark_display = self.styled(remark_text, LoggerConstants.REMARK_COLOR)
        else:
            remark_display = remark_text
        print(self.term.move(remark_row, 0) + prompt + remark_display, end='')

        status = status_override or LoggerConstants.KEY_HINTS
        print(self.term.move(self.term.height - 1, 0) + (" " + status).ljust(self.term.width), end='')

        if remark_focused:
            print(self.term.move(remark_row, len(prompt) + len(remark_text)) + self.term.normal_cursor,
                  end='', flush=True)
        else:
            print(self.term.move(cursor_y, cursor_x + left_margin) + self.term.normal_cursor,
                  end='', flush=True)

    def draw_error_message(self, message1: str, message2: str = ""):
        """Draw an error message in the center of the screen."""
        print(self.term.home + self.term.clear, end='')
        center_y = self.term.height // 2
        for offset, message in enumerate((message1, message2)):
            if message:
                x = max(0, (self.term.width - len(message)) // 2)
                print(self.term.move(center_y + offset, x) + message, end='')
        help_text = "Ctrl-Q to quit | Resize terminal to continue"
        help_pos = max(0, (self.term.width - len(help_text)) // 2)
        print(self.term.move(self.term.height - 1, help_pos) + help_text, end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies token as a string, or None on timeout.
        """
        if self._curtsies_input is None:
            return None
        if timeout is None:
            return str(next(self._curtsies_input))  # blocks
        r, _, _ = select.select([sys.stdin], [], [], float(timeout))
        if not r:
            return None
        return str(next(self._curtsies_input))

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal rows available to the log."""
        return self.term.height - self.RESERVED_ROWS
