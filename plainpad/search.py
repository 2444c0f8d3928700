"""Incremental search box: query editing, match finding and jumping between matches."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from plainpad.editing import Editor
from plainpad.infobar import InfoBar

PROMPT = "Search: "
SEARCH_BOX_HEIGHT = 30


class SearchKey(Enum):
    """Keys the search box reacts to."""

    LEFT = auto()
    RIGHT = auto()
    BACKSPACE = auto()
    RETURN = auto()
    ESCAPE = auto()
    F3 = auto()


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass
class SearchMode:
    """Search state attached to an editor; the box sits above the info bar."""

    editor: Editor
    info_bar: InfoBar = field(default_factory=InfoBar)
    box_height: int = SEARCH_BOX_HEIGHT
    active: bool = False
    box_text: str = PROMPT
    matches: list[tuple[int, int]] = field(default_factory=list)
    current_index: int = 0
    caret_pos: int = len(PROMPT)
    _saved: tuple[int, int, int, int] = field(default=(0, 0, 0, 0), init=False, repr=False)

    def activate(self) -> None:
        """Open an empty search box and remember the editor's caret and scroll."""
        self.active = True
        self.box_text = PROMPT
        self.matches.clear()
        self.current_index = 0
        self.caret_pos = len(PROMPT)
        view = self.editor.viewport
        self._saved = (
            self.editor.caret_line,
            self.editor.caret_col,
            view.scroll_x,
            view.scroll_y,
        )

    def deactivate(self) -> None:
        """Close the search box and restore the remembered caret and scroll."""
        self.active = False
        view = self.editor.viewport
        (
            self.editor.caret_line,
            self.editor.caret_col,
            view.scroll_x,
            view.scroll_y,
        ) = self._saved
        self._refresh_caret()

    def query(self) -> str:
        """The text typed after the prompt."""
        return self.box_text[len(PROMPT):]

    def _refresh_caret(self) -> None:
        editor = self.editor
        editor.caret_position = editor.viewport.update_caret(
            editor.lines, editor.caret_line, editor.caret_col
        )

    def find_all_matches(self) -> list[tuple[int, int]]:
        """Find every non-overlapping occurrence of the query and jump to the first."""
        self.matches.clear()
        query = self.query()
        if not query:
            return self.matches
        for number, line in enumerate(self.editor.lines):
            pos = line.find(query)
            while pos != -1:
                self.matches.append((number, pos))
                pos = line.find(query, pos + len(query))
        self.current_index = 0
        if self.matches:
            self.jump_to_match(0)
        return self.matches

    def jump_to_match(self, index: int) -> bool:
        """Put the caret on match ``index`` and scroll it into view."""
        if not 0 <= index < len(self.matches):
            return False
        line, col = self.matches[index]
        editor = self.editor
        view = editor.viewport
        editor.caret_line = line
        editor.caret_col = col

        available_height = view.height - self.box_height
        if self.info_bar.visible:
            available_height -= self.info_bar.height
        available_lines = _cdiv(available_height, view.char_height)
        available_width = view.width

        target_y = line - _cdiv(available_lines, 2)
        view.scroll_y = max(0, min(target_y, len(editor.lines) - available_lines))

        start_px = col * view.char_width
        end_px = (col + len(self.query())) * view.char_width
        if end_px > view.scroll_x + available_width:
            view.scroll_x = end_px - available_width + view.padding
        if start_px < view.scroll_x:
            view.scroll_x = max(0, start_px - view.padding)
        view.scroll_x = max(0, view.scroll_x)

        self._refresh_caret()
        return True

    def find_next(self) -> None:
        """Go to the following match, wrapping around; search first if nothing is found yet."""
        if not self.matches:
            self.find_all_matches()
            return
        self.current_index = (self.current_index + 1) % len(self.matches)
        self.jump_to_match(self.current_index)

    def find_previous(self) -> None:
        """Go to the preceding match, wrapping around; search first if nothing is found yet."""
        if not self.matches:
            self.find_all_matches()
            return
        if self.current_index == 0:
            self.current_index = len(self.matches) - 1
        else:
            self.current_index -= 1
        self.jump_to_match(self.current_index)

    def handle_key(self, key: SearchKey, shift: bool = False) -> None:
        """React to a navigation or editing key pressed in the search box."""
        if key is SearchKey.LEFT:
            if self.caret_pos > len(PROMPT):
                self.caret_pos -= 1
        elif key is SearchKey.RIGHT:
            if self.caret_pos < len(self.box_text):
                self.caret_pos += 1
        elif key is SearchKey.BACKSPACE:
            if self.caret_pos > len(PROMPT):
                pos = self.caret_pos
                self.box_text = self.box_text[: pos - 1] + self.box_text[pos:]
                self.caret_pos -= 1
                self.find_all_matches()
            elif self.box_text == PROMPT:
                self.matches.clear()
                self.find_all_matches()
        elif key is SearchKey.RETURN:
            self.find_next()
        elif key is SearchKey.ESCAPE:
            self.deactivate()
        elif key is SearchKey.F3:
            if shift:
                self.find_previous()
            else:
                self.find_next()

    def handle_char(self, ch: str) -> bool:
        """Insert a printable ASCII character into the query. Return whether it was taken."""
        if len(ch) != 1 or not 32 <= ord(ch) <= 126:
            return False
        pos = self.caret_pos
        self.box_text = self.box_text[:pos] + ch + self.box_text[pos:]
        self.caret_pos += 1
        if len(self.box_text) > len(PROMPT):
            self.find_all_matches()
        return True