"""Main controller for the terminal logger."""

import logging
import os
import sys
import select
import signal
import termios
from typing import Any, Dict, Optional

from .terminal import TerminalInterface
from .view import LogView
from .keyboard import KeyboardHandler, KeyEvent, KeyType
from .constants import LoggerConstants
from .commands import CommandRegistry
from .controller import AppendController
from .persistence import save_document
from .remark import RemarkBox
from .session import LogSession
from .settings import get_persistence

logger = logging.getLogger(__name__)


def key_input_settings(old_settings: list) -> list:
    """Return termios attributes with flow control and job control keys disabled.

    Clearing IXON/IXOFF frees Ctrl-Q and Ctrl-S; clearing ISIG (and IEXTEN
    where present) delivers Ctrl-Z and Ctrl-C as input instead of signals.
    """
    new_settings = list(old_settings)
    new_settings[0] &= ~(termios.IXON | termios.IXOFF)
    if hasattr(termios, 'IEXTEN'):
        new_settings[3] &= ~(termios.ISIG | termios.IEXTEN)
    else:
        new_settings[3] &= ~termios.ISIG
    return new_settings


class LogEditor:
    """Full-screen terminal front end for a logging session."""

    def __init__(self, settings: Optional[Dict[str, Any]] = None,
                 terminal: Optional[TerminalInterface] = None):
        """Initialize the editor components.

        Args:
            settings: Settings dict as returned by SettingsPersistence.load_settings.
                Loaded from the user's config when omitted.
            terminal: Terminal interface to draw on.
        """
        if settings is None:
            settings = get_persistence().load_settings()
        self.settings = settings
        self.log_dir = settings['log_dir']
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.view = LogView()
        self.session = LogSession(undo_limit=settings.get('undo_limit'))
        self.controller = AppendController(
            self.session,
            line_end_marker=settings.get('line_end_marker', LoggerConstants.DEFAULT_LINE_END_MARKER),
            remark_color=settings.get('remark_color', LoggerConstants.REMARK_COLOR),
        )
        self.remark_box = RemarkBox()
        self.command_registry = CommandRegistry(settings.get('letters'))
        self.running = False
        self.error_mode = False  # True when terminal is too narrow
        self.status_message = None
        self.saved_path: Optional[str] = None
        self._saved = False
        # Resize and interrupt signaling pipe, open only while run() is active
        self._signal_pipe_r = self._signal_pipe_w = None

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        os.write(self._signal_pipe_w, LoggerConstants.RESIZE_PIPE_MARKER)

    def _handle_sigint(self, signum, frame):
        """Handle SIGINT (Ctrl-C) by ending the session normally."""
        del signum, frame  # Unused
        self.running = False
        os.write(self._signal_pipe_w, b'C')

    def run(self):
        """Run the main loop, then save the log."""
        self._signal_pipe_r, self._signal_pipe_w = os.pipe()
        self.terminal.setup()
        self.running = True

        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)
        original_int_handler = signal.signal(signal.SIGINT, self._handle_sigint)

        old_settings = None
        try:
            # Ctrl-Q, Ctrl-Z and Ctrl-C must arrive as keys
            try:
                old_settings = termios.tcgetattr(sys.stdin)
                termios.tcsetattr(sys.stdin, termios.TCSANOW, key_input_settings(old_settings))
            except (termios.error, AttributeError, OSError):
                old_settings = None

            while self.running:
                self._draw()

                # Wait for input on stdin or the signal pipe
                ready, _, _ = select.select([0, self._signal_pipe_r], [], [])

                if self._signal_pipe_r in ready:
                    os.read(self._signal_pipe_r, 1024)
                    # Resize or interrupt: redraw, and the loop condition handles quitting
                elif 0 in ready:
                    key_event = self.keyboard.get_key_event(timeout=0)
                    if key_event:
                        self._handle_key_event(key_event)

        except KeyboardInterrupt:
            pass
        finally:
            if old_settings is not None:
                try:
                    termios.tcsetattr(sys.stdin, termios.TCSANOW, old_settings)
                except (termios.error, OSError):
                    pass
            signal.signal(signal.SIGWINCH, original_winch_handler)
            signal.signal(signal.SIGINT, original_int_handler)
            os.close(self._signal_pipe_r)
            os.close(self._signal_pipe_w)
            self._signal_pipe_r = self._signal_pipe_w = None
            self.terminal.cleanup()
            self.shutdown()

    def shutdown(self) -> Optional[str]:
        """Save the log once at the end of the session.

        Returns:
            Path of the saved log, or None if saving failed
        """
        if not self._saved:
            self._saved = True
            self.saved_path = save_document(self.session.document, self.log_dir)
        return self.saved_path

    def _draw(self):
        """Draw the current state to the terminal."""
        if self.terminal.width < LoggerConstants.MIN_TERMINAL_WIDTH:
            self.error_mode = True
            self.terminal.draw_error_message(
                LoggerConstants.TERMINAL_TOO_NARROW_MESSAGE.format(LoggerConstants.MIN_TERMINAL_WIDTH),
                LoggerConstants.CURRENT_WIDTH_MESSAGE.format(self.terminal.width)
            )
            return
        self.error_mode = False

        view_width = min(LoggerConstants.DOCUMENT_WIDTH, self.terminal.width)
        self.view.num_rows = self.terminal.height
        self.view.num_columns = view_width
        self.view.render(self.session.document)

        self.terminal.draw_frame(
            self.view.lines,
            self.view.visual_cursor_y,
            self.view.visual_cursor_x,
            left_margin=(self.terminal.width - view_width) // 2,
            view_width=view_width,
            remark_text=self.remark_box.content,
            remark_focused=self.remark_box.focused,
            remark_placeholder=self.remark_box.showing_placeholder,
            status_override=self.status_message,
        )

    def focus_remark(self):
        self.remark_box.focus()

    def _handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        # Clear status message on any keypress
        self.status_message = None

        if key_event.key_type == KeyType.CTRL and key_event.value in ('q', 'c'):
            self.running = False
            return

        # Don't process other keys if in error mode
        if self.error_mode:
            return

        if self.remark_box.focused:
            self._handle_remark_key(key_event)
            return

        self.command_registry.execute(self, key_event)

    def _handle_remark_key(self, key_event: KeyEvent):
        """Edit or commit the remark box while it has focus."""
        if key_event.key_type == KeyType.SPECIAL:
            if key_event.value == 'enter':
                committed = self.controller.append_remark(self.remark_box.text)
                self.remark_box.blur()
                if committed:
                    self.remark_box.reset()
                    self.status_message = "Remark added"
            elif key_event.value in ('escape', 'tab'):
                self.remark_box.blur()
            elif key_event.value == 'backspace':
                self.remark_box.backspace()
        elif key_event.key_type == KeyType.REGULAR:
            self.remark_box.insert(key_event.value)
