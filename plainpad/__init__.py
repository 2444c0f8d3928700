"""A small plain-text editor with grouped undo, incremental search, a status bar and a Tk window."""

__version__ = "0.1.0"