"""Tk window for the editor: drawing, menus, dialogs and input bindings."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from plainpad.controller import Command, Controller, Key
from plainpad.infobar import info_text
from plainpad.viewport import ScrollAction

WINDOW_TITLE = "Text Editor"
SAVE_QUESTION = "Do you want to save changes to your document?"
FILE_TYPES = [("Text Files", "*.txt"), ("All Files", "*.*")]
SELECTION_COLOUR = "#b4d7ff"
MATCH_COLOUR = "#ffff96"
CURRENT_MATCH_COLOUR = "#ffc864"
PANEL_COLOUR = "#f0f0f0"
BORDER_COLOUR = "#b4b4b4"
BUTTON_COLOUR = "#dcdcdc"
BUTTON_SIZE = 24
CONTROL_MASK = 0x4
SHIFT_MASK = 0x1

_NAMED_KEYS = {
    "Left": Key.LEFT,
    "Right": Key.RIGHT,
    "Up": Key.UP,
    "Down": Key.DOWN,
    "BackSpace": Key.BACKSPACE,
    "Return": Key.RETURN,
    "KP_Enter": Key.RETURN,
    "Escape": Key.ESCAPE,
    "F3": Key.F3,
}
_LETTER_KEYS = {"a": Key.A, "c": Key.C, "f": Key.F, "v": Key.V, "z": Key.Z}


def translate_key(keysym: str) -> Key | None:
    """Map a Tk key symbol to a controller key, or None if it has no meaning."""
    if keysym in _NAMED_KEYS:
        return _NAMED_KEYS[keysym]
    if len(keysym) == 1:
        return _LETTER_KEYS.get(keysym.lower())
    return None


class EditorWindow:
    """A top-level window showing one document."""

    def __init__(self, controller: Controller | None = None) -> None:
        # Tk is imported here so the rest of the package works without a display toolkit.
        import tkinter as tk
        from tkinter import filedialog, messagebox
        from tkinter import font as tkfont

        self._tk = tk
        self.controller = controller or Controller()
        self.root = tk.Tk()
        self.root.title(WINDOW_TITLE)

        controller = self.controller
        controller.ask_save = lambda: messagebox.askyesnocancel(
            WINDOW_TITLE, SAVE_QUESTION, parent=self.root
        )
        controller.choose_save_path = lambda suggested: filedialog.asksaveasfilename(
            parent=self.root, initialfile=suggested, filetypes=FILE_TYPES,
            defaultextension=".txt",
        ) or None
        controller.choose_open_path = lambda: filedialog.askopenfilename(
            parent=self.root, filetypes=FILE_TYPES
        ) or None
        controller.report_error = lambda message: messagebox.showerror(
            "Error", message, parent=self.root
        )

        self.font = tkfont.Font(root=self.root, family="Consolas", size=-14)
        view = controller.editor.viewport
        view.char_width = max(1, self.font.measure("0"))
        view.char_height = max(1, self.font.metrics("linespace"))
        controller.info_bar.height = self.font.metrics("linespace") + 12

        self.canvas = tk.Canvas(self.root, background="white", highlightthickness=0,
                                takefocus=True, width=640, height=480)
        self.vbar = tk.Scrollbar(self.root, orient="vertical", command=self._on_vscroll)
        self.hbar = tk.Scrollbar(self.root, orient="horizontal", command=self._on_hscroll)
        self.canvas.grid(row=0, column=0, sticky="nsew")
        self.vbar.grid(row=0, column=1, sticky="ns")
        self.hbar.grid(row=1, column=0, sticky="ew")
        self.root.grid_rowconfigure(0, weight=1)
        self.root.grid_columnconfigure(0, weight=1)

        self._build_menu()
        self._bind_events()
        self.root.protocol("WM_DELETE_WINDOW", lambda: self._run_command(Command.APP_EXIT))
        self.canvas.focus_set()

    def _build_menu(self) -> None:
        tk = self._tk
        menu = tk.Menu(self.root)
        file_menu = tk.Menu(menu, tearoff=False)
        file_menu.add_command(label="New", command=lambda: self._run_command(Command.FILE_NEW))
        file_menu.add_command(label="Open...", command=lambda: self._run_command(Command.FILE_OPEN))
        file_menu.add_command(label="Save", command=lambda: self._run_command(Command.FILE_SAVE))
        file_menu.add_command(label="Save As...",
                              command=lambda: self._run_command(Command.FILE_SAVE_AS))
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=lambda: self._run_command(Command.APP_EXIT))
        menu.add_cascade(label="File", menu=file_menu)
        view_menu = tk.Menu(menu, tearoff=False)
        view_menu.add_command(label="Info Bar",
                              command=lambda: self._run_command(Command.VIEW_INFO_BAR))
        menu.add_cascade(label="View", menu=view_menu)
        self.root.config(menu=menu)

    def _bind_events(self) -> None:
        canvas = self.canvas
        canvas.bind("<Key>", self._on_key)
        canvas.bind("<Button-1>", self._on_press)
        canvas.bind("<B1-Motion>", self._on_drag)
        canvas.bind("<ButtonRelease-1>", self._on_release)
        canvas.bind("<MouseWheel>", self._on_wheel)
        canvas.bind("<Button-4>", lambda event: self._wheel(120, event.state))
        canvas.bind("<Button-5>", lambda event: self._wheel(-120, event.state))
        canvas.bind("<Configure>", self._on_configure)
        canvas.bind("<FocusIn>", lambda event: self._redraw())
        canvas.bind("<FocusOut>", lambda event: self._redraw())

    def run(self) -> None:
        """Show the window and process events until it is closed."""
        self._redraw()
        self.root.mainloop()

    # --- input -------------------------------------------------------------

    def _run_command(self, command: Command) -> None:
        self.controller.command(command)
        if self.controller.closed:
            self.root.destroy()
            return
        self._refresh_caret()
        self._redraw()

    def _on_key(self, event) -> str:
        ctrl = bool(event.state & CONTROL_MASK)
        shift = bool(event.state & SHIFT_MASK)
        key = translate_key(event.keysym)
        if key is not None:
            if ctrl and key is Key.V:
                self._pull_clipboard()
            self.controller.key_down(key, ctrl, shift)
            if ctrl and key is Key.C and self.controller.clipboard:
                self.root.clipboard_clear()
                self.root.clipboard_append(self.controller.clipboard)
        ch = event.char
        if not ctrl and len(ch) == 1 and (ord(ch) >= 32 or ch in "\t\r\b"):
            self.controller.char(ch)
        self._redraw()
        return "break"

    def _pull_clipboard(self) -> None:
        try:
            self.controller.clipboard = self.root.clipboard_get()
        except self._tk.TclError:
            self.controller.clipboard = ""

    def _on_press(self, event) -> None:
        self.canvas.focus_set()
        if not self._search_click(event.x, event.y):
            self.controller.editor.mouse_down(event.x, event.y)
        self._redraw()

    def _on_drag(self, event) -> None:
        self.controller.editor.mouse_drag(event.x, event.y)
        self._redraw()

    def _on_release(self, event) -> None:
        self.controller.editor.mouse_up()
        self._redraw()

    def _on_wheel(self, event) -> None:
        self._wheel(event.delta, event.state)

    def _wheel(self, delta: int, state: int) -> None:
        editor = self.controller.editor
        if editor.viewport.wheel(delta, bool(state & SHIFT_MASK), len(editor.lines)):
            self._refresh_caret()
        self._redraw()

    def _on_configure(self, event) -> None:
        editor = self.controller.editor
        editor.viewport.resize(event.width, event.height, editor.lines)
        self._refresh_caret()
        self._redraw()

    def _on_vscroll(self, *args: str) -> None:
        editor = self.controller.editor
        view = editor.viewport
        count = len(editor.lines)
        position = 0
        if args[0] == "moveto":
            action = ScrollAction.THUMB_TRACK
            position = int(float(args[1]) * count)
        elif args[2] == "pages":
            action = ScrollAction.PAGE_UP if int(args[1]) < 0 else ScrollAction.PAGE_DOWN
        else:
            action = ScrollAction.LINE_UP if int(args[1]) < 0 else ScrollAction.LINE_DOWN
        if view.scroll_vertical(action, position, count):
            self._refresh_caret()
        self._redraw()

    def _on_hscroll(self, *args: str) -> None:
        view = self.controller.editor.viewport
        position = 0
        if args[0] == "moveto":
            action = ScrollAction.THUMB_TRACK
            position = int(float(args[1]) * (view.max_line_width + view.padding + 1))
        elif args[2] == "pages":
            action = ScrollAction.PAGE_LEFT if int(args[1]) < 0 else ScrollAction.PAGE_RIGHT
        else:
            action = ScrollAction.LINE_LEFT if int(args[1]) < 0 else ScrollAction.LINE_RIGHT
        if view.scroll_horizontal(action, position):
            self._refresh_caret()
        self._redraw()

    def _refresh_caret(self) -> None:
        editor = self.controller.editor
        editor.caret_position = editor.viewport.update_caret(
            editor.lines, editor.caret_line, editor.caret_col
        )

    def _search_top(self) -> int:
        controller = self.controller
        top = controller.editor.viewport.height - controller.search.box_height
        if controller.info_bar.visible:
            top -= controller.info_bar.height
        return top

    def _search_click(self, x: int, y: int) -> bool:
        """Handle a click inside the search box. Return whether it was there."""
        search = self.controller.search
        if not search.active:
            return False
        top = self._search_top()
        if y <= top:
            return False
        right = self.controller.editor.viewport.width - 10
        button_top = top + 3
        in_row = button_top < y < button_top + BUTTON_SIZE
        if in_row and right - BUTTON_SIZE * 3 < x < right - BUTTON_SIZE * 2:
            search.find_previous()
        elif in_row and right - BUTTON_SIZE * 2 < x < right - BUTTON_SIZE:
            search.find_next()
        elif in_row and right - BUTTON_SIZE < x < right:
            search.deactivate()
        else:
            click_x = x - 10
            text = search.box_text
            search.caret_pos = len(text)
            for index in range(7, len(text) + 1):
                if self.font.measure(text[:index]) >= click_x:
                    search.caret_pos = index
                    break
        return True

    # --- drawing -----------------------------------------------------------

    def _redraw(self) -> None:
        controller = self.controller
        editor = controller.editor
        view = editor.viewport
        canvas = self.canvas
        canvas.delete("all")

        if editor.selection.active:
            self._draw_selection()
        if controller.search.active:
            self._draw_matches()
        for number, line in enumerate(editor.lines[view.scroll_y:], start=view.scroll_y):
            y = (number - view.scroll_y) * view.char_height
            if y >= view.height:
                break
            canvas.create_text(-view.scroll_x, y, anchor="nw", text=line, font=self.font)

        caret = editor.caret_position
        if caret is not None and self.root.focus_get() is canvas:
            x, y = caret
            canvas.create_line(x, y, x, y + view.char_height, width=2)

        if controller.search.active:
            self._draw_search_box()
        if controller.info_bar.visible:
            self._draw_info_bar()
        self._update_scrollbars()
        self.root.title(editor.document.window_title())

    def _draw_selection(self) -> None:
        editor = self.controller.editor
        view = editor.viewport
        start_line, start_col, end_line, end_col = editor.selection.normalized()
        last_visible = min(end_line, view.scroll_y + view.height // view.char_height,
                           len(editor.lines) - 1)
        for line in range(max(start_line, view.scroll_y), last_visible + 1):
            length = len(editor.lines[line])
            first = start_col if line == start_line else 0
            last = end_col if line == end_line else length
            left = max(first * view.char_width - view.scroll_x, 0)
            right = min(last * view.char_width - view.scroll_x, view.width)
            if right > left:
                top = (line - view.scroll_y) * view.char_height
                self.canvas.create_rectangle(left, top, right, top + view.char_height,
                                             fill=SELECTION_COLOUR, outline="")

    def _draw_matches(self) -> None:
        controller = self.controller
        editor = controller.editor
        view = editor.viewport
        query = controller.search.query()
        if not query:
            return
        visible_height = self._search_top()
        max_line = view.scroll_y + visible_height // view.char_height
        for line, col in controller.search.matches:
            if line < view.scroll_y or line > max_line:
                continue
            left = max(col * view.char_width - view.scroll_x, 0)
            right = min((col + len(query)) * view.char_width - view.scroll_x, view.width)
            if right <= left:
                continue
            top = (line - view.scroll_y) * view.char_height
            current = (line, col) == (editor.caret_line, editor.caret_col)
            colour = CURRENT_MATCH_COLOUR if current else MATCH_COLOUR
            self.canvas.create_rectangle(left, top, right, top + view.char_height,
                                         fill=colour, outline="")

    def _draw_search_box(self) -> None:
        search = self.controller.search
        width = self.controller.editor.viewport.width
        top = self._search_top()
        bottom = top + search.box_height
        canvas = self.canvas
        canvas.create_rectangle(0, top, width, bottom, fill=PANEL_COLOUR, outline="")
        canvas.create_line(0, top, width, top, fill=BORDER_COLOUR)
        canvas.create_text(10, top + 8, anchor="nw", text=search.box_text, font=self.font)
        button_top = top + 3
        for offset, label in ((80, "\u25b2"), (54, "\u25bc"), (28, "X")):
            left = width - offset
            canvas.create_rectangle(left, button_top, left + BUTTON_SIZE,
                                    button_top + BUTTON_SIZE, fill=BUTTON_COLOUR, outline="")
            canvas.create_text(left + 8, button_top + 4, anchor="nw", text=label,
                               font=self.font)
        caret_x = 10 + self.font.measure(search.box_text[: search.caret_pos])
        canvas.create_line(caret_x, top + 5, caret_x, bottom - 5)

    def _draw_info_bar(self) -> None:
        controller = self.controller
        editor = controller.editor
        view = editor.viewport
        top = view.height - controller.info_bar.height
        self.canvas.create_rectangle(0, top, view.width, view.height,
                                     fill=PANEL_COLOUR, outline="")
        self.canvas.create_line(0, top, view.width, top, fill=BORDER_COLOUR)
        text = info_text(editor.lines, editor.caret_line, editor.caret_col)
        self.canvas.create_text(10, top + controller.info_bar.height // 2, anchor="w",
                                text=text)

    def _update_scrollbars(self) -> None:
        editor = self.controller.editor
        vertical, horizontal = editor.viewport.scroll_ranges(len(editor.lines))
        for bar, (maximum, page, position) in ((self.vbar, vertical), (self.hbar, horizontal)):
            total = maximum + 1
            first = min(1.0, position / total)
            last = min(1.0, (position + page) / total)
            bar.set(first, last)


def main(argv: Sequence[str] | None = None) -> int:
    """Open an editor window and run it until closed."""
    parser = argparse.ArgumentParser(prog="plainpad", description="A plain text editor.")
    parser.parse_args(argv)
    EditorWindow().run()
    return 0