"""Keyboard and mouse editing of a document with undo and selection."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from plainpad.document import Document
from plainpad.selection import Selection, get_selected_text
from plainpad.undo import UndoActionType, UndoStack
from plainpad.viewport import Viewport

TAB_TEXT = "    "


@dataclass
class Editor:
    """A document, its caret, selection, undo history and view."""

    document: Document = field(default_factory=Document)
    viewport: Viewport = field(default_factory=Viewport)
    undo_stack: UndoStack = field(default_factory=UndoStack)
    selection: Selection = field(default_factory=Selection)
    caret_line: int = 0
    caret_col: int = 0
    selected_text: str = ""
    caret_position: tuple[int, int] | None = field(default=None, init=False)
    _capturing: bool = field(default=False, init=False, repr=False)

    @property
    def lines(self) -> list[str]:
        return self.document.lines

    def _show_caret(self) -> None:
        self.caret_position = self.viewport.update_caret(
            self.lines, self.caret_line, self.caret_col
        )

    def _remeasure(self) -> None:
        self.viewport.resize(self.viewport.width, self.viewport.height, self.lines)

    def type_char(self, ch: str) -> None:
        """Handle one typed character: printable text, tab, return or backspace."""
        if len(ch) != 1:
            raise ValueError("expected a single character")
        if ord(ch) >= 32 or ch in "\t\r\b":
            while self.caret_line >= len(self.lines):
                self.lines.append("")
            if ch == "\t":
                self.tab()
            elif ch == "\b":
                self.backspace()
            elif ch == "\r":
                self.return_key()
            else:
                self.insert_char(ch)
        self.viewport.track_caret = True
        self.document.refresh_modified()
        self._remeasure()
        self._show_caret()

    def return_key(self) -> None:
        """Split the current line at the caret."""
        line = self.lines[self.caret_line]
        remaining = line[self.caret_col:] if self.caret_col < len(line) else ""
        if remaining:
            self.lines[self.caret_line] = line[: self.caret_col]
        self.lines.insert(self.caret_line + 1, remaining)
        self.undo_stack.record_action(
            UndoActionType.LINE_SPLIT, self.caret_line, self.caret_col, remaining
        )
        self.caret_line += 1
        self.caret_col = 0
        view = self.viewport
        if self.caret_line >= view.scroll_y + view.lines_per_page:
            view.scroll_y = self.caret_line - view.lines_per_page + 1

    def backspace(self) -> None:
        """Delete the character left of the caret, or join with the previous line."""
        if self.caret_col > 0:
            deleted = self.lines[self.caret_line][self.caret_col - 1]
            self.undo_stack.record_deletion(self.caret_line, self.caret_col - 1, deleted)
            self.document.delete_text_at(self.caret_line, self.caret_col - 1, 1)
            self.caret_col -= 1
        elif self.caret_line > 0:
            previous = self.caret_line - 1
            content = self.lines[self.caret_line]
            self.undo_stack.record_action(
                UndoActionType.LINE_JOIN, previous, len(self.lines[previous]), content
            )
            del self.lines[self.caret_line]
            self.caret_line = previous
            self.caret_col = len(self.lines[previous])
            self.lines[previous] += content
            if self.caret_line < self.viewport.scroll_y:
                self.viewport.scroll_y = self.caret_line

    def tab(self) -> None:
        """Insert four spaces as one undo step."""
        self.undo_stack.record_action(
            UndoActionType.INSERT_TEXT, self.caret_line, self.caret_col, TAB_TEXT
        )
        self.document.insert_text_at(self.caret_line, self.caret_col, TAB_TEXT)
        self.caret_col += len(TAB_TEXT)

    def insert_char(self, ch: str) -> None:
        """Insert one character at the caret, grouping it for undo."""
        self.undo_stack.record_typing(self.caret_line, self.caret_col, ch)
        self.document.insert_text_at(self.caret_line, self.caret_col, ch)
        self.caret_col += 1

    def _after_move(self) -> None:
        self.viewport.track_caret = True
        self.viewport.scroll_ranges(len(self.lines))
        self._show_caret()

    def move_left(self) -> None:
        if self.caret_col > 0:
            self.caret_col -= 1
        elif self.caret_line > 0:
            self.caret_line -= 1
            self.caret_col = len(self.lines[self.caret_line])
        self._after_move()

    def move_right(self) -> None:
        if self.caret_col < len(self.lines[self.caret_line]):
            self.caret_col += 1
        elif self.caret_line < len(self.lines) - 1:
            self.caret_line += 1
            self.caret_col = 0
        self._after_move()

    def move_down(self) -> None:
        """Move down a line; past the last line a new empty line is added."""
        if self.caret_line < len(self.lines) - 1:
            self.caret_line += 1
        else:
            self.lines.append("")
            self.caret_line += 1
            self.document.refresh_modified()
        self.caret_col = min(self.caret_col, len(self.lines[self.caret_line]))
        self._after_move()

    def move_up(self) -> None:
        if self.caret_line > 0:
            self.caret_line -= 1
            self.caret_col = min(self.caret_col, len(self.lines[self.caret_line]))
        self._after_move()

    def paste(self, text: str) -> None:
        """Insert clipboard text at the caret; the caret stays where it is."""
        self.document.insert_text_at(self.caret_line, self.caret_col, text)
        self.document.refresh_modified()
        self._remeasure()
        self._show_caret()

    def undo_last(self) -> bool:
        """Undo the latest action. Return False when there was nothing to undo."""
        caret = self.undo_stack.undo(self.document)
        if caret is None:
            return False
        self.caret_line, self.caret_col = caret
        self._remeasure()
        self._show_caret()
        return True

    def _line_at(self, y: int) -> int:
        return max(0, y // self.viewport.char_height + self.viewport.scroll_y)

    def mouse_down(self, x: int, y: int) -> None:
        """Place the caret at a click and anchor a selection there."""
        line = self._line_at(y)
        self.viewport.track_caret = True
        if line >= len(self.lines):
            self.caret_line = max(0, len(self.lines) - 1)
            self.caret_col = len(self.lines[self.caret_line])
            self._show_caret()
            return
        self.caret_line = line
        self.caret_col = self.viewport.column_at(self.lines[line], x)
        self._capturing = True
        self.selection.begin(self.caret_line, self.caret_col)
        self.selected_text = get_selected_text(self.selection, self.lines)
        self._show_caret()

    def mouse_drag(self, x: int, y: int) -> None:
        """Extend the selection while the button is held."""
        if not self._capturing:
            return
        self.caret_line = min(self._line_at(y), len(self.lines) - 1)
        self.caret_col = self.viewport.column_at(self.lines[self.caret_line], x)
        self.selection.extend(self.caret_line, self.caret_col)
        self.selected_text = get_selected_text(self.selection, self.lines)
        self.viewport.track_caret = True
        self._show_caret()

    def mouse_up(self) -> None:
        """Finish the selection; an empty one is dropped."""
        if not self._capturing:
            return
        self._capturing = False
        self.selection.end_line = self.caret_line
        self.selection.end_col = self.caret_col
        self.selected_text = get_selected_text(self.selection, self.lines)
        if self.selection.is_empty():
            self.selected_text = ""
            self.selection.clear()

    def _reset_view(self) -> None:
        self.caret_line = 0
        self.caret_col = 0
        self.viewport.scroll_x = 0
        self.viewport.scroll_y = 0
        self.viewport.track_caret = True
        self._remeasure()
        self.viewport.scroll_ranges(len(self.lines))
        self._show_caret()
        self.undo_stack.clear()

    def new_document(self) -> None:
        """Start an empty, unnamed document."""
        self.document.reset([""], "")
        self._reset_view()

    def load(self, lines: Sequence[str], path: str) -> None:
        """Replace the document with ``lines`` read from ``path``."""
        self.document.reset(list(lines), path)
        self._reset_view()