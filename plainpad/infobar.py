"""Status line at the bottom of the editor with caret position and document size."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_FONT_HEIGHT = 16
VERTICAL_PADDING = 12


def info_text(lines: Sequence[str], caret_line: int, caret_col: int) -> str:
    """Status text: one-based caret position, line count and character count."""
    chars = sum(len(line) for line in lines)
    return (
        f"Ln {caret_line + 1}, Col {caret_col + 1}  |  "
        f"Lines: {len(lines)}  |  Chars: {chars}"
    )


@dataclass
class InfoBar:
    """Visibility and height of the status line."""

    visible: bool = True
    height: int = DEFAULT_FONT_HEIGHT + VERTICAL_PADDING

    def toggle(self) -> bool:
        """Show or hide the bar; return the new visibility."""
        self.visible = not self.visible
        return self.visible

    def editor_height(self, client_height: int) -> int:
        """Height left for text once the bar, if shown, has taken its share."""
        return client_height - self.height if self.visible else client_height