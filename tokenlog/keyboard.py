"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'enter', 'backspace')
    raw: str  # The raw key string
    is_ctrl: bool = False


_SPECIALS = {'enter', 'backspace', 'delete', 'tab', 'escape', 'left', 'right', 'up', 'down'}


class KeyboardHandler:
    """Turns terminal key tokens into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get next key event, or None if no key arrived before timeout."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies token (or a plain character) into a KeyEvent."""
        key_str = str(key)

        # Named tokens like '<Ctrl-j>', '<BACKSPACE>', '<TAB>', '<ESC>'
        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            name = key_str[1:-1].lower().replace('+', '-')
            parts = name.split('-')
            base = parts[-1]
            mods = set(parts[:-1])

            if base in ('space', 'spacebar', 'spc') and not mods:
                return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')
            if base == 'esc':
                base = 'escape'
            if 'ctrl' in mods and len(base) == 1:
                return self._ctrl_event(base, key_str)
            if base in _SPECIALS:
                return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)
            # Fallback: treat unknown token as special
            return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if key_str == '\t':
                return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str)
            if key_str == '\x1b':
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)
            if o in (0x08, 0x7f):
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z
                return self._ctrl_event(chr(ord('a') + o - 1), key_str)

        # Regular character
        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)

    @staticmethod
    def _ctrl_event(letter: str, raw: str) -> KeyEvent:
        # Terminals deliver Enter as Ctrl-J or Ctrl-M
        if letter in ('j', 'm'):
            return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=raw)
        if letter == 'i':
            return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=raw)
        if letter == 'h':
            return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=raw)
        return KeyEvent(key_type=KeyType.CTRL, value=letter, raw=raw, is_ctrl=True)
