"""Undo history with grouping of consecutive typing and backspacing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from plainpad.document import Document


class UndoActionType(Enum):
    INSERT_TEXT = auto()
    DELETE_TEXT = auto()
    LINE_SPLIT = auto()
    LINE_JOIN = auto()


@dataclass
class UndoAction:
    kind: UndoActionType
    line: int
    col: int
    text: str = ""


def is_word_char(ch: str) -> bool:
    """True for letters, digits and underscore."""
    return ch.isalnum() or ch == "_"


def should_group_chars(first: str, second: str) -> bool:
    """Whether two characters belong in the same undo step."""
    if is_word_char(first) and is_word_char(second):
        return True
    return first.isspace() and second.isspace()


class UndoStack:
    """Last-in, first-out record of editing actions."""

    def __init__(self) -> None:
        self._actions: list[UndoAction] = []

    def __len__(self) -> int:
        return len(self._actions)

    def record_typing(self, line: int, col: int, ch: str) -> None:
        """Record one typed character, joining it to the previous insert if it fits."""
        last = self._actions[-1] if self._actions else None
        if (
            last is not None
            and last.kind is UndoActionType.INSERT_TEXT
            and last.line == line
            and last.text
            and last.col + len(last.text) == col
            and should_group_chars(last.text[-1], ch)
        ):
            last.text += ch
        else:
            self._actions.append(UndoAction(UndoActionType.INSERT_TEXT, line, col, ch))

    def record_deletion(self, line: int, col: int, ch: str) -> None:
        """Record one backspaced character, joining it to the previous deletion if it fits."""
        last = self._actions[-1] if self._actions else None
        if (
            last is not None
            and last.kind is UndoActionType.DELETE_TEXT
            and last.line == line
            and last.text
            and last.col == col + 1
            and should_group_chars(last.text[0], ch)
        ):
            last.text = ch + last.text
            last.col = col
        else:
            self._actions.append(UndoAction(UndoActionType.DELETE_TEXT, line, col, ch))

    def record_action(self, kind: UndoActionType, line: int, col: int, text: str = "") -> None:
        """Record an action as its own undo step."""
        self._actions.append(UndoAction(kind, line, col, text))

    def undo(self, document: Document) -> tuple[int, int] | None:
        """Revert the latest action on ``document``; return the new caret (line, col)."""
        if not self._actions:
            return None
        action = self._actions.pop()
        caret = (action.line, action.col)
        if action.kind is UndoActionType.INSERT_TEXT:
            document.delete_text_at(action.line, action.col, len(action.text))
        elif action.kind is UndoActionType.DELETE_TEXT:
            document.insert_text_at(action.line, action.col, action.text)
            caret = (action.line, action.col + len(action.text))
        elif action.kind is UndoActionType.LINE_SPLIT:
            document.merge_lines(action.line)
        elif action.kind is UndoActionType.LINE_JOIN:
            document.split_line(action.line, action.col, action.text)
        document.refresh_modified()
        return caret

    def clear(self) -> None:
        """Forget all recorded actions."""
        self._actions.clear()