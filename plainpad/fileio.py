"""Reading and writing documents as plain text files."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike

StrPath = str | PathLike[str]


def read_lines(path: StrPath) -> list[str]:
    """Read a text file as a list of lines; an empty file gives one empty line.

    Raises ``OSError`` when the file cannot be opened.
    """
    with open(path, encoding="utf-8", newline=None) as handle:
        content = handle.read()
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines if content else [""]


def write_lines(path: StrPath, lines: Iterable[str]) -> None:
    """Write lines joined by newlines, with no newline after the last one.

    Raises ``OSError`` when the file cannot be opened for writing.
    """
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write("\n".join(lines))


def default_save_name(path: str) -> str:
    """File name offered by a save dialog: the part after the last backslash."""
    if not path:
        return ""
    return path.rsplit("\\", 1)[-1]