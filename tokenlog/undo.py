from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from .model import Document
from .snapshot import clone_document

if TYPE_CHECKING:
    from .session import LogSession


@dataclass
class UndoFrame:
    snapshot: Document
    first_letter_in_line: bool


class UndoManager:
    def __init__(self, max_entries: Optional[int] = None):
        self._undo_stack: list[UndoFrame] = []
        # None keeps every frame for the lifetime of the session
        self._max_entries = max_entries

    def __len__(self) -> int:
        return len(self._undo_stack)

    @property
    def max_entries(self) -> Optional[int]:
        return self._max_entries

    def clear(self):
        self._undo_stack.clear()

    def push(self, frame: UndoFrame):
        self._undo_stack.append(frame)
        # Cap history
        if self._max_entries is not None and len(self._undo_stack) > self._max_entries:
            self._undo_stack.pop(0)

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def record_checkpoint(self, session: 'LogSession'):
        """Push the session's pre-mutation state."""
        self.push(UndoFrame(
            snapshot=clone_document(session.document),
            first_letter_in_line=session.line_state.is_first_letter_in_line,
        ))

    def undo(self, session: 'LogSession') -> bool:
        if not self._undo_stack:
            return False
        frame = self._undo_stack.pop()
        # The popped snapshot becomes the live document
        session._apply_frame(frame)
        return True
