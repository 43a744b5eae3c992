"""Test keyboard input handling."""

import pytest
from tokenlog.keyboard import KeyboardHandler, KeyEvent, KeyType


class MockTerminal:
    """Mock terminal interface for testing."""

    def __init__(self):
        self._key_queue = []

    def get_key(self, timeout=None):
        """Mock get_key that returns from queue."""
        if self._key_queue:
            return self._key_queue.pop(0)
        return None

    def add_key(self, key_str):
        self._key_queue.append(key_str)


@pytest.fixture
def handler():
    return KeyboardHandler(MockTerminal())


def test_no_key_returns_none(handler):
    assert handler.get_key_event(timeout=0) is None


def test_queued_key_is_parsed():
    terminal = MockTerminal()
    handler = KeyboardHandler(terminal)
    terminal.add_key('a')
    event = handler.get_key_event()
    assert event == KeyEvent(key_type=KeyType.REGULAR, value='a', raw='a')


@pytest.mark.parametrize("token", ['<Ctrl-j>', '<Ctrl-m>', '\r', '\n'])
def test_enter_variants(handler, token):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == 'enter'


@pytest.mark.parametrize("token", ['<TAB>', '\t', '<Ctrl-i>'])
def test_tab_variants(handler, token):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == 'tab'


@pytest.mark.parametrize("token", ['<BACKSPACE>', '\x7f', '\x08'])
def test_backspace_variants(handler, token):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == 'backspace'


@pytest.mark.parametrize("token", ['<ESC>', '\x1b'])
def test_escape_variants(handler, token):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == 'escape'


@pytest.mark.parametrize("token,letter", [('<Ctrl-z>', 'z'), ('\x1a', 'z'), ('<Ctrl-n>', 'n'),
                                          ('\x0e', 'n'), ('<Ctrl-q>', 'q'), ('\x0c', 'l')])
def test_ctrl_letters(handler, token, letter):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.CTRL
    assert event.value == letter
    assert event.is_ctrl


def test_space_token(handler):
    event = handler.parse_key('<SPACE>')
    assert event.key_type == KeyType.REGULAR
    assert event.value == ' '


def test_unicode_character(handler):
    event = handler.parse_key('注')
    assert event.key_type == KeyType.REGULAR
    assert event.value == '注'


def test_angle_bracket_is_regular(handler):
    assert handler.parse_key('<').key_type == KeyType.REGULAR


def test_unknown_token_is_special(handler):
    event = handler.parse_key('<F5>')
    assert event.key_type == KeyType.SPECIAL
    assert event.value == 'f5'
