"""Line buffer, editor state, and undo data structures."""

from .buffer import Buffer, Transaction
from .document import LineDocument
from .state import EditorMode, EditorState, RunState
from .undo import UndoEntry, UndoStack

__all__ = [
    "Buffer",
    "Transaction",
    "LineDocument",
    "EditorMode",
    "EditorState",
    "RunState",
    "UndoEntry",
    "UndoStack",
]
