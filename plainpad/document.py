"""The text buffer of an open document and its saved/modified state."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PureWindowsPath

UNTITLED = "New Document"
MODIFIED_SUFFIX = " (Modified)"


@dataclass
class Document:
    """Lines of text, the file they belong to, and whether they differ from disk."""

    lines: list[str] = field(default_factory=lambda: [""])
    path: str = ""
    modified: bool = field(default=False, init=False)
    _saved: list[str] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.lines:
            self.lines = [""]
        self._saved = list(self.lines)

    def insert_text_at(self, line: int, col: int, text: str) -> None:
        """Insert text into a line; the column is clamped, a bad line is ignored."""
        if not 0 <= line < len(self.lines):
            return
        current = self.lines[line]
        col = min(max(col, 0), len(current))
        self.lines[line] = current[:col] + text + current[col:]

    def delete_text_at(self, line: int, col: int, length: int) -> None:
        """Remove up to ``length`` characters starting at ``col``."""
        if not 0 <= line < len(self.lines):
            return
        current = self.lines[line]
        col = max(col, 0)
        if col >= len(current):
            return
        count = min(length, len(current) - col)
        if count > 0:
            self.lines[line] = current[:col] + current[col + count:]

    def merge_lines(self, target_line: int) -> None:
        """Append the following line to ``target_line`` and drop it."""
        if not 0 <= target_line < len(self.lines) - 1:
            return
        self.lines[target_line] += self.lines.pop(target_line + 1)

    def split_line(self, line: int, col: int, remaining: str) -> None:
        """Cut ``line`` at ``col`` and insert ``remaining`` as the next line."""
        if not 0 <= line < len(self.lines):
            return
        current = self.lines[line]
        col = min(max(col, 0), len(current))
        self.lines[line] = current[:col]
        self.lines.insert(line + 1, remaining)

    def reset(self, lines: list[str], path: str = "") -> None:
        """Replace the whole content and treat it as freshly saved."""
        self.lines = list(lines) or [""]
        self.path = path
        self.mark_saved()

    def mark_saved(self) -> None:
        """Remember the current content as the saved state."""
        self._saved = list(self.lines)
        self.modified = False

    def refresh_modified(self) -> bool:
        """Compare with the saved state, update ``modified`` and return it."""
        self.modified = self.lines != self._saved
        return self.modified

    def window_title(self) -> str:
        """Title for the editor window: file name or placeholder, plus a modified tag."""
        name = PureWindowsPath(self.path).name if self.path else UNTITLED
        return name + MODIFIED_SUFFIX if self.modified else name

    def text(self) -> str:
        """The document as one string with newline separators."""
        return "\n".join(self.lines)