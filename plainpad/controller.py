"""Dispatch of keyboard, menu and clipboard events to the editor, search box and info bar."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto

from plainpad.editing import Editor
from plainpad.fileio import default_save_name, read_lines, write_lines
from plainpad.infobar import InfoBar
from plainpad.search import SearchKey, SearchMode

READ_ERROR = "Could not open file for reading."
WRITE_ERROR = "Could not open file for writing."


class Command(IntEnum):
    """Menu commands."""

    FILE_NEW = 40001
    FILE_OPEN = 40002
    FILE_SAVE = 40003
    FILE_SAVE_AS = 40004
    APP_EXIT = 40005
    VIEW_INFO_BAR = 5001


class Key(Enum):
    """Keys with a meaning of their own, apart from typed characters."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    BACKSPACE = auto()
    RETURN = auto()
    ESCAPE = auto()
    F3 = auto()
    A = auto()
    C = auto()
    F = auto()
    V = auto()
    Z = auto()


_SEARCH_KEYS = {
    Key.LEFT: SearchKey.LEFT,
    Key.RIGHT: SearchKey.RIGHT,
    Key.BACKSPACE: SearchKey.BACKSPACE,
    Key.RETURN: SearchKey.RETURN,
    Key.ESCAPE: SearchKey.ESCAPE,
    Key.F3: SearchKey.F3,
}


def _discard_changes() -> bool | None:
    return False


@dataclass
class Controller:
    """Routes user input to the editor and handles files and the clipboard.

    Dialogs are supplied as callables: ``ask_save`` answers "save changes?" with
    True (save), False (discard) or None (cancel); ``choose_save_path`` and
    ``choose_open_path`` return a path or None when cancelled. A dialog left
    as None behaves as if cancelled; with no ``report_error`` errors are
    dropped silently.
    """

    editor: Editor = field(default_factory=Editor)
    info_bar: InfoBar = field(default_factory=InfoBar)
    ask_save: Callable[[], bool | None] = _discard_changes
    choose_save_path: Callable[[str], str | None] | None = None
    choose_open_path: Callable[[], str | None] | None = None
    report_error: Callable[[str], None] | None = None
    clipboard: str = ""
    closed: bool = False
    search: SearchMode = field(init=False)

    def __post_init__(self) -> None:
        self.search = SearchMode(self.editor, self.info_bar)

    @property
    def document(self):
        return self.editor.document

    def key_down(self, key: Key, ctrl: bool = False, shift: bool = False) -> None:
        """Handle a key press, with Ctrl shortcuts taking precedence."""
        if ctrl:
            if key is Key.C:
                if self.editor.selection.active:
                    self.copy()
            elif key is Key.V:
                self.paste()
            elif key is Key.Z:
                self.editor.undo_last()
            elif key is Key.F:
                if self.search.active:
                    self.search.deactivate()
                else:
                    self.search.activate()
            elif key is Key.A:
                self.info_bar.toggle()

        if self.search.active:
            search_key = _SEARCH_KEYS.get(key)
            if search_key is not None:
                self.search.handle_key(search_key, shift)
            return

        moves = {
            Key.LEFT: self.editor.move_left,
            Key.RIGHT: self.editor.move_right,
            Key.UP: self.editor.move_up,
            Key.DOWN: self.editor.move_down,
        }
        move = moves.get(key)
        if move is not None:
            move()

    def char(self, ch: str) -> None:
        """Handle a typed character, sending it to the search box when it is open."""
        if self.search.active:
            self.search.handle_char(ch)
        else:
            self.editor.type_char(ch)

    def command(self, command: Command, path: str | None = None) -> None:
        """Run a menu command; ``path`` stands in for a file dialog's answer."""
        self.editor.viewport.track_caret = True
        if command is Command.FILE_NEW:
            self._new()
        elif command is Command.FILE_OPEN:
            self.open(path)
        elif command is Command.FILE_SAVE:
            self.save(path)
        elif command is Command.FILE_SAVE_AS:
            self._save_as(path)
        elif command is Command.APP_EXIT:
            self._close()
        elif command is Command.VIEW_INFO_BAR:
            self.info_bar.toggle()
        if self.search.active:
            self.search.deactivate()

    def copy(self) -> str | None:
        """Put the selected text on the clipboard and return it; None if nothing is selected."""
        if not self.editor.selected_text:
            return None
        self.clipboard = self.editor.selected_text
        return self.clipboard

    def paste(self, text: str | None = None) -> bool:
        """Insert ``text``, or the clipboard, at the caret. Return whether anything was pasted."""
        if text is None:
            text = self.clipboard
        if not text:
            return False
        self.editor.paste(text)
        return True

    def save(self, path: str | None = None) -> bool:
        """Save to ``path``, else to the document's file, else ask for a file."""
        if path is not None or not self.document.path:
            return self._save_as(path)
        written = self._write(self.document.path)
        self.document.mark_saved()
        return written

    def open(self, path: str | None = None) -> bool:
        """Open ``path`` (or ask for one) after offering to save changes."""
        if not self._prompt_for_save():
            return False
        if path is None and self.choose_open_path is not None:
            path = self.choose_open_path()
        loaded = False
        if path:
            try:
                lines = read_lines(path)
            except OSError:
                self._report(READ_ERROR)
            else:
                self.editor.load(lines, path)
                loaded = True
        self.document.mark_saved()
        self.editor.undo_stack.clear()
        return loaded

    def _ask_save_path(self, suggested: str) -> str | None:
        if self.choose_save_path is None:
            return None
        return self.choose_save_path(suggested)

    def _report(self, message: str) -> None:
        if self.report_error is not None:
            self.report_error(message)

    def _save_as(self, path: str | None = None) -> bool:
        if path is None:
            path = self._ask_save_path(default_save_name(self.document.path))
        written = self._write(path) if path else False
        self.document.mark_saved()
        return written

    def _write(self, path: str) -> bool:
        try:
            write_lines(path, self.document.lines)
        except OSError:
            self._report(WRITE_ERROR)
            return False
        return True

    def _prompt_for_save(self) -> bool:
        """Offer to save a modified document. Return False if the user cancelled."""
        if not self.document.modified:
            return True
        choice = self.ask_save()
        if choice is None:
            return False
        if not choice:
            return True
        path = self._ask_save_path(self.document.path)
        if not path:
            return False
        return self._write(path)

    def _new(self) -> None:
        if self._prompt_for_save():
            self.editor.new_document()

    def _close(self) -> bool:
        if self.document.modified and not self._prompt_for_save():
            return False
        self.closed = True
        return True