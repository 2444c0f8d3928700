# plainpad

plainpad is a small plain-text editor. It keeps a document as a list of
lines, groups your typing into undo steps, finds text as you type, and
shows the caret position and document size in a status bar at the bottom
of the window.

## Installing

```
pip install .
```

The window uses `tkinter`, which ships with most Python installations.
On some Linux distributions it comes as a separate system package
(often called `python3-tk`). No other libraries are needed.

## Running

```
plainpad
```

The command takes no arguments. A window opens with an empty document
titled "New Document". When the text differs from what was last saved,
the title gains " (Modified)"; for a saved file the title is the file name.

## Keys

| Key                  | Action                                              |
|----------------------|-----------------------------------------------------|
| Arrow keys           | Move the caret; Down on the last line adds a line   |
| Enter                | Split the line at the caret                         |
| Backspace            | Delete left; at the start of a line, join it upward |
| Tab                  | Insert four spaces                                  |
| Ctrl+C               | Copy the selection                                  |
| Ctrl+V               | Paste at the caret                                  |
| Ctrl+Z               | Undo                                                |
| Ctrl+F               | Open or close the search box                        |
| Ctrl+A               | Show or hide the status bar                         |

Drag with the left mouse button to select text. The mouse wheel scrolls
up and down three lines per notch; with Shift held it scrolls sideways.

### Undo

Typing is grouped: a run of word characters (letters, digits and `_`)
is undone in one step, as is a run of whitespace. Backspacing over a word
is grouped the same way. Line splits, line joins and tabs are separate
steps.

### Search

In the search box, type the text to look for (printable ASCII characters
only); every occurrence is highlighted and the first one is brought into
view. Enter or F3 goes to the next match, Shift+F3 to the previous one,
and both wrap around. The box has buttons for previous, next and close.
Escape, Ctrl+F or any menu command closes the box and puts the caret and
scroll position back where they were before the search started.

### Status bar

The status bar reads, for example:

```
Ln 1, Col 1  |  Lines: 1  |  Chars: 0
```

Line and column count from 1; the character count leaves out line breaks.
It can also be toggled from the View menu ("Info Bar").

## Files

The File menu offers New, Open..., Save, Save As... and Exit. Closing the
window, New and Open ask whether to save a modified document first; Yes
asks for a file name, No discards the changes, Cancel keeps the document
open. Save writes to the document's file, or asks for a name if it has
none. Files are read as UTF-8 and written as UTF-8 with `\n` between
lines and no line break after the last one.

## What it does not do

- There is no redo and no cut.
- Typing or pasting does not replace a selection; the selection is only
  for copying.
- Pasting is not recorded in the undo history.
- Search is plain, case-sensitive substring matching; there is no
  replace.
- Files are always read and written as UTF-8; other encodings are not
  detected.

## Using the pieces from Python

The editor's logic does not depend on the window and can be used on its
own:

- `plainpad.document.Document` holds the lines, the file path and the
  modified state, with `insert_text_at`, `delete_text_at`, `merge_lines`,
  `split_line`, `mark_saved`, `refresh_modified`, `window_title` and
  `text`.
- `plainpad.undo.UndoStack` records edits (`record_typing`,
  `record_deletion`, `record_action`) and reverts them on a `Document`
  with `undo`.
- `plainpad.selection.Selection` and `get_selected_text(selection, lines)`
  describe and extract a selected range.
- `plainpad.viewport.Viewport` does the scrolling and caret-following
  arithmetic for a fixed-pitch font.
- `plainpad.editing.Editor` combines these into caret movement, typing
  (`type_char`), pasting, undo and mouse selection.
- `plainpad.search.SearchMode` finds and steps through matches.
- `plainpad.infobar.info_text(lines, caret_line, caret_col)` builds the
  status bar text.
- `plainpad.fileio.read_lines(path)` and `write_lines(path, lines)` load
  and store documents.
- `plainpad.controller.Controller` routes keys, characters and menu
  `Command`s to all of the above. File dialogs and the save question are
  plain callables (`ask_save`, `choose_save_path`, `choose_open_path`,
  `report_error`), so it runs without a window.

```python
from plainpad.infobar import info_text

print(info_text(["hello", "world"], 1, 5))
# Ln 2, Col 6  |  Lines: 2  |  Chars: 10
```

```python
from plainpad.controller import Controller, Key

controller = Controller()
for ch in "hello":
    controller.char(ch)
controller.key_down(Key.Z, ctrl=True)
print(controller.editor.document.text())
# (empty: the word was undone in one step)
```

## Running the tests

```
pip install .[test]
pytest
```