"""Mouse selection range and extraction of the selected text."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class Selection:
    """An anchor point and a moving end point, both as (line, column)."""

    start_line: int = 0
    start_col: int = 0
    end_line: int = 0
    end_col: int = 0
    active: bool = False

    def clear(self) -> None:
        """Drop the selection."""
        self.start_line = self.start_col = self.end_line = self.end_col = -1
        self.active = False

    def begin(self, line: int, col: int) -> None:
        """Start a new selection anchored at (line, col)."""
        self.start_line = self.end_line = line
        self.start_col = self.end_col = col
        self.active = True

    def extend(self, line: int, col: int) -> None:
        """Move the end point to (line, col)."""
        self.end_line = line
        self.end_col = col
        self.active = True

    def is_empty(self) -> bool:
        """True when anchor and end point coincide."""
        return (self.start_line, self.start_col) == (self.end_line, self.end_col)

    def normalized(self) -> tuple[int, int, int, int]:
        """(first line, first col, last line, last col) in document order."""
        start = (self.start_line, self.start_col)
        end = (self.end_line, self.end_col)
        first, last = sorted((start, end))
        return first[0], first[1], last[0], last[1]


def get_selected_text(selection: Selection, lines: Sequence[str]) -> str:
    """Text covered by ``selection``, lines joined with newlines."""
    if (
        not selection.active
        or selection.start_line >= len(lines)
        or selection.end_line >= len(lines)
    ):
        return ""
    start_line, start_col, end_line, end_col = selection.normalized()
    if start_line < 0:
        return ""
    if start_line == end_line:
        line = lines[start_line]
        start_col = min(start_col, len(line))
        end_col = min(end_col, len(line))
        return line[start_col:end_col]

    parts = []
    for number in range(start_line, end_line + 1):
        line = lines[number]
        begin = start_col if number == start_line else 0
        finish = end_col if number == end_line else len(line)
        begin = min(begin, len(line))
        finish = min(finish, len(line))
        parts.append(line[begin:finish] if begin < finish else "")
    return "\n".join(parts)