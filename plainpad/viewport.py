"""Text metrics, caret auto-scrolling and scroll-bar arithmetic for the editor view."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

WHEEL_DELTA = 120
WHEEL_LINES = 3


class ScrollAction(IntEnum):
    """Scroll-bar requests; the horizontal names share values with the vertical ones."""

    LINE_UP = 0
    LINE_DOWN = 1
    PAGE_UP = 2
    PAGE_DOWN = 3
    THUMB_POSITION = 4
    THUMB_TRACK = 5
    LINE_LEFT = 0
    LINE_RIGHT = 1
    PAGE_LEFT = 2
    PAGE_RIGHT = 3


@dataclass
class Viewport:
    """The visible window onto the text, measured with a fixed-pitch font."""

    width: int = 640
    height: int = 480
    char_width: int = 8
    char_height: int = 16
    padding: int = 3
    buffer_zone_y: int = 2
    scroll_x: int = 0
    scroll_y: int = 0
    track_caret: bool = True
    lines_per_page: int = field(default=1, init=False)
    max_line_width: int = field(default=0, init=False)
    buffer_zone_x: int = field(default=50, init=False)
    caret_hidden_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.resize(self.width, self.height, ())

    def text_width(self, text: str) -> int:
        """Pixel width of ``text``."""
        return len(text) * self.char_width

    def resize(self, width: int, height: int, lines: Sequence[str] = ()) -> None:
        """Take a new client size and recompute page height and widest line."""
        self.width = width
        self.height = height
        if self.char_height > 0:
            self.lines_per_page = height // self.char_height
        else:
            self.lines_per_page = 1
        if self.lines_per_page == 0:
            self.lines_per_page = 1
        widest = max((self.text_width(line) for line in lines), default=0)
        self.max_line_width = max(widest, width)

    def column_at(self, text: str, x: int) -> int:
        """Column in ``text`` nearest to window x coordinate ``x``."""
        effective = x + self.scroll_x
        col = 0
        if text:
            low, high = 0, len(text)
            while low <= high:
                mid = low + (high - low) // 2
                if self.text_width(text[:mid]) <= effective:
                    col = mid
                    low = mid + 1
                else:
                    high = mid - 1
            if col < len(text):
                char_w = self.text_width(text[col])
                if effective > self.text_width(text[:col]) + char_w // 2:
                    col += 1
        return min(col, len(text))

    def update_caret(
        self, lines: Sequence[str], caret_line: int, caret_col: int
    ) -> tuple[int, int] | None:
        """Scroll to follow the caret if tracking; return its screen (x, y) or None if hidden."""
        x = self.text_width(lines[caret_line][:caret_col]) if caret_line < len(lines) else 0
        position: tuple[int, int] | None
        if self.track_caret:
            self.buffer_zone_x = self.width // 2
            if x <= self.scroll_x + self.buffer_zone_x:
                self.scroll_x = max(0, x - self.buffer_zone_x)
            elif x > self.scroll_x + self.width - self.padding:
                self.scroll_x = x - self.width + self.padding

            if caret_line < self.scroll_y + self.buffer_zone_y:
                self.scroll_y = 0 if caret_line <= 1 else caret_line - self.buffer_zone_y
            elif caret_line >= self.scroll_y + self.lines_per_page:
                self.scroll_y = caret_line - self.lines_per_page + 1
            position = (x - self.scroll_x, (caret_line - self.scroll_y) * self.char_height)
            self.caret_hidden_count = 0
        else:
            sx = x - self.scroll_x
            sy = (caret_line - self.scroll_y) * self.char_height
            visible = 0 <= sy < self.height and 0 <= sx < self.width
            if not visible and self.caret_hidden_count == 0:
                self.caret_hidden_count += 1
                position = None
            else:
                position = (sx, sy)
        self.scroll_ranges(len(lines))
        return position

    def scroll_ranges(
        self, line_count: int
    ) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
        """Vertical and horizontal scroll bars as (maximum, page, position) each."""
        horizontal_max = max(0, self.max_line_width + self.padding)
        self.scroll_x = max(0, min(self.scroll_x, horizontal_max))
        vertical = (max(0, line_count - 1), self.lines_per_page, self.scroll_y)
        horizontal = (horizontal_max, self.width, self.scroll_x)
        return vertical, horizontal

    def wheel(self, delta: int, shift: bool, line_count: int) -> bool:
        """Scroll by a mouse-wheel delta; shift scrolls sideways. Return whether it moved."""
        if shift:
            old = self.scroll_x
            limit = max(0, self.max_line_width - self.width)
            self.scroll_x = max(0, min(self.scroll_x - delta, limit))
            changed = self.scroll_x != old
        else:
            old = self.scroll_y
            step = math.trunc(delta / WHEEL_DELTA) * WHEEL_LINES
            target = max(0, self.scroll_y - step)
            self.scroll_y = min(target, max(0, line_count - self.lines_per_page))
            changed = self.scroll_y != old
        if changed:
            self.track_caret = False
            self.scroll_ranges(line_count)
        return changed

    def scroll_vertical(self, action: ScrollAction, position: int, line_count: int) -> bool:
        """Apply a vertical scroll-bar request. Return whether the view moved."""
        old = self.scroll_y
        target = self.scroll_y
        if action is ScrollAction.LINE_UP:
            target -= 1
        elif action is ScrollAction.LINE_DOWN:
            target += 1
        elif action in (ScrollAction.THUMB_POSITION, ScrollAction.THUMB_TRACK):
            target = position
        elif action is ScrollAction.PAGE_UP:
            target -= self.lines_per_page
        elif action is ScrollAction.PAGE_DOWN:
            target += self.lines_per_page
        maximum, page, _ = self.scroll_ranges(line_count)[0]
        self.scroll_y = max(0, min(target, maximum - page + 1))
        if self.scroll_y != old:
            self.track_caret = False
            return True
        return False

    def scroll_horizontal(self, action: ScrollAction, position: int) -> bool:
        """Apply a horizontal scroll-bar request. Return whether the view moved."""
        old = self.scroll_x
        target = self.scroll_x
        if action is ScrollAction.LINE_LEFT:
            target -= self.char_width
        elif action is ScrollAction.LINE_RIGHT:
            target += self.char_width
        elif action in (ScrollAction.THUMB_POSITION, ScrollAction.THUMB_TRACK):
            target = position
        elif action is ScrollAction.PAGE_LEFT:
            target -= self.width
        elif action is ScrollAction.PAGE_RIGHT:
            target += self.width
        maximum = max(0, self.max_line_width + self.padding)
        self.scroll_x = max(0, min(target, maximum - self.width + 1))
        if self.scroll_x != old:
            self.track_caret = False
            return True
        return False