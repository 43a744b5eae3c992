"""tokenlog - an append-only structured-text logger with undo."""

from .model import Document, Paragraph, StyledRun
from .snapshot import clone_document
from .undo import UndoFrame, UndoManager
from .line_state import LineStateMachine
from .session import LogSession
from .controller import AppendController

__all__ = [
    'Document',
    'Paragraph',
    'StyledRun',
    'clone_document',
    'UndoFrame',
    'UndoManager',
    'LineStateMachine',
    'LogSession',
    'AppendController',
]
