import pytest

from plainpad.editing import TAB_TEXT, Editor


def type_text(editor, text):
    for ch in text:
        editor.type_char(ch)


@pytest.fixture
def editor():
    return Editor()


def test_typing_inserts_and_moves_caret(editor):
    type_text(editor, "abc")
    assert editor.lines == ["abc"]
    assert (editor.caret_line, editor.caret_col) == (0, 3)
    assert editor.document.modified is True
    assert editor.document.window_title().endswith("(Modified)")


def test_type_char_rejects_multiple_characters(editor):
    with pytest.raises(ValueError):
        editor.type_char("ab")


def test_control_characters_ignored(editor):
    editor.type_char("\x01")
    assert editor.lines == [""]
    assert editor.caret_col == 0


def test_tab_inserts_spaces(editor):
    editor.type_char("\t")
    assert editor.lines == [TAB_TEXT]
    assert editor.caret_col == len(TAB_TEXT)
    editor.undo_last()
    assert editor.lines == [""]


def test_return_splits_line_and_undo_merges(editor):
    type_text(editor, "abcd")
    editor.move_left()
    editor.move_left()
    editor.type_char("\r")
    assert editor.lines == ["ab", "cd"]
    assert (editor.caret_line, editor.caret_col) == (1, 0)
    assert editor.undo_last() is True
    assert editor.lines == ["abcd"]
    assert (editor.caret_line, editor.caret_col) == (0, 2)


def test_backspace_joins_lines_and_undo_splits(editor):
    type_text(editor, "ab\rcd")
    editor.move_left()
    editor.move_left()
    editor.type_char("\b")
    assert editor.lines == ["abcd"]
    assert (editor.caret_line, editor.caret_col) == (0, 2)
    editor.undo_last()
    assert editor.lines == ["ab", "cd"]


def test_backspace_and_undo_restore(editor):
    type_text(editor, "ab")
    editor.type_char("\b")
    assert editor.lines == ["a"]
    editor.undo_last()
    assert editor.lines == ["ab"]
    assert editor.caret_col == 2


def test_undo_groups_words(editor):
    type_text(editor, "hello world")
    assert len(editor.undo_stack) == 3
    editor.undo_last()
    assert editor.lines == ["hello "]
    while editor.undo_last():
        pass
    assert editor.lines == [""]
    assert editor.document.modified is False


def test_cursor_movement_wraps_lines(editor):
    type_text(editor, "ab\rc")
    editor.move_right()
    assert (editor.caret_line, editor.caret_col) == (1, 1)
    editor.move_up()
    assert (editor.caret_line, editor.caret_col) == (0, 1)
    editor.move_right()
    editor.move_right()
    assert (editor.caret_line, editor.caret_col) == (1, 0)
    editor.move_left()
    assert (editor.caret_line, editor.caret_col) == (0, 2)


def test_move_down_past_end_adds_line(editor):
    editor.load(["only"], "")
    editor.move_down()
    assert editor.lines == ["only", ""]
    assert editor.caret_line == 1
    assert editor.caret_col <= len(editor.lines[1])
    assert editor.document.modified is True


def test_paste_keeps_caret(editor):
    type_text(editor, "ad")
    editor.move_left()
    editor.paste("bc")
    assert editor.lines == ["abcd"]
    assert editor.caret_col == 1


def test_mouse_selection_across_lines(editor):
    editor.load(["hello", "world"], "")
    view = editor.viewport
    editor.mouse_down(view.text_width("he"), 0)
    assert (editor.caret_line, editor.caret_col) == (0, 2)
    editor.mouse_drag(view.text_width("wor"), view.char_height)
    editor.mouse_up()
    assert editor.selected_text == "llo\nwor"
    assert editor.selection.active is True


def test_click_without_drag_clears_selection(editor):
    editor.load(["hello"], "")
    editor.mouse_down(editor.viewport.text_width("h"), 0)
    editor.mouse_up()
    assert editor.selection.active is False
    assert editor.selected_text == ""


def test_click_below_text_goes_to_end(editor):
    editor.load(["one", "three"], "")
    editor.mouse_down(0, editor.viewport.char_height * 20)
    assert (editor.caret_line, editor.caret_col) == (1, len("three"))


def test_drag_without_press_does_nothing(editor):
    editor.load(["hello"], "")
    editor.mouse_drag(100, 0)
    assert editor.caret_col == 0
    assert editor.selected_text == ""


def test_load_and_new_document_reset_state(editor):
    type_text(editor, "xyz")
    editor.load(["first", "second"], "C:\\docs\\notes.txt")
    assert editor.lines == ["first", "second"]
    assert (editor.caret_line, editor.caret_col) == (0, 0)
    assert len(editor.undo_stack) == 0
    assert editor.document.window_title() == "notes.txt"
    editor.new_document()
    assert editor.lines == [""]
    assert editor.document.path == ""
    assert editor.undo_last() is False