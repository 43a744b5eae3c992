"""Command pattern implementation for logger actions."""

from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional, Tuple, TYPE_CHECKING
from .keyboard import KeyType

if TYPE_CHECKING:
    from .editor import LogEditor
    from .keyboard import KeyEvent


class LoggerCommand(ABC):
    """Base class for logger commands."""

    @abstractmethod
    def execute(self, editor: 'LogEditor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: LogEditor instance
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the document
        """
        pass


class EditCommand(LoggerCommand):
    """Base class for commands that append to the log.

    The controller records the undo checkpoint; commands only pick the
    controller operation.
    """

    def execute(self, editor: 'LogEditor', key_event: 'KeyEvent') -> bool:
        self._edit(editor, key_event)
        return True

    @abstractmethod
    def _edit(self, editor: 'LogEditor', key_event: 'KeyEvent'):
        """Perform the edit."""
        pass


class LetterCommand(EditCommand):
    def __init__(self, tag: str):
        self.tag = tag

    def _edit(self, editor, key_event):
        editor.controller.append_letter(self.tag)


class NewlineCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.controller.append_newline()


class RawNewlineCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.controller.append_raw_newline()


class ClearCommand(LoggerCommand):
    def execute(self, editor, key_event):
        if editor.controller.clear():
            editor.status_message = "Log cleared"
            return True
        editor.status_message = "Nothing to clear"
        return False


class SystemCommand(LoggerCommand):
    """Base class for commands that don't modify document content directly."""

    def execute(self, editor: 'LogEditor', key_event: 'KeyEvent') -> bool:
        self._execute_system(editor, key_event)
        return False

    @abstractmethod
    def _execute_system(self, editor: 'LogEditor', key_event: 'KeyEvent'):
        """Perform the system action."""
        pass


class UndoCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        if editor.controller.undo():
            editor.status_message = "Undone"
        else:
            editor.status_message = "Nothing to undo"


class FocusRemarkCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.focus_remark()


class QuitCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.running = False


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self, letters: Optional[Mapping[str, str]] = None):
        """Create the registry.

        Args:
            letters: Mapping of regular keys to the tags they log.
        """
        self._commands: Dict[Tuple[KeyType, str], LoggerCommand] = {}
        self._setup_default_commands()
        for key, tag in (letters or {}).items():
            self.register((KeyType.REGULAR, key), LetterCommand(tag))

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        self.register((KeyType.CTRL, 'n'), NewlineCommand())
        self.register((KeyType.SPECIAL, 'enter'), RawNewlineCommand())
        self.register((KeyType.SPECIAL, 'tab'), FocusRemarkCommand())
        self.register((KeyType.CTRL, 'l'), ClearCommand())
        self.register((KeyType.CTRL, 'z'), UndoCommand())

        # Quitting saves the log
        self.register((KeyType.CTRL, 'q'), QuitCommand())
        self.register((KeyType.CTRL, 'c'), QuitCommand())

    def register(self, key: Tuple[KeyType, str], command: LoggerCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[LoggerCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, editor: 'LogEditor', key_event: 'KeyEvent') -> bool:
        """Execute the command for a key event.

        Returns:
            True if the document was modified, False otherwise
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command:
            return command.execute(editor, key_event)
        return False
