"""Constants and configuration defaults for tokenlog."""

import string


class LoggerConstants:
    """Central configuration constants for the logger."""

    # Line state
    LETTER_SEPARATOR = "  "  # Inserted before a letter that is not first in its line
    LINE_BREAK = "\n"  # Paragraph separator in flattened text

    # Remarks
    REMARK_PLACEHOLDER = "请输入注释..."
    REMARK_OPEN = "("
    REMARK_CLOSE = ")"
    REMARK_COLOR = "gray50"

    # Newline action
    DEFAULT_LINE_END_MARKER = ""  # e.g. "  // " to mark where a line was closed

    # Letter keys: key pressed -> tag written to the log
    DEFAULT_LETTERS = {c: c.upper() for c in string.ascii_lowercase}

    # Persistence
    DEFAULT_LOG_DIR = "Logs"
    LOG_FILENAME_FORMAT = "log-%Y%m%d-%H%M%S.txt"
    ATOMIC_SAVE_SUFFIX = ".tmp"

    # Terminal layout
    DOCUMENT_WIDTH = 65
    MIN_TERMINAL_WIDTH = 20
    RESIZE_PIPE_MARKER = b'R'

    # Status messages
    TERMINAL_TOO_NARROW_MESSAGE = "Terminal too narrow! Need at least {} columns."
    CURRENT_WIDTH_MESSAGE = "Current width: {} columns."
    KEY_HINTS = "^N newline  Tab remark  ^L clear  ^Z undo  ^Q quit"
