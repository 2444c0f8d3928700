import pytest

from plainpad.document import Document
from plainpad.editing import Editor
from plainpad.search import PROMPT, SearchKey, SearchMode

TEXT = ["the cat sat", "on the mat", "", "the end"]


def make_search(lines=TEXT):
    editor = Editor(document=Document(lines=list(lines)))
    search = SearchMode(editor)
    search.activate()
    return search


def type_query(search, text):
    for ch in text:
        search.handle_char(ch)


def test_activate_starts_with_prompt():
    search = make_search()
    assert search.active is True
    assert search.box_text == "Search: "
    assert search.caret_pos == 8
    assert search.query() == ""


def test_typing_builds_query():
    search = make_search()
    type_query(search, "the")
    assert search.query() == "the"
    assert search.box_text == PROMPT + "the"
    assert search.caret_pos == len(PROMPT) + 3


def test_matches_point_at_query():
    search = make_search()
    type_query(search, "the")
    assert search.matches
    for line, col in search.matches:
        assert TEXT[line][col:col + 3] == "the"
    assert len(search.matches) == sum(line.count("the") for line in TEXT)


def test_first_match_gets_caret():
    search = make_search()
    type_query(search, "at")
    editor = search.editor
    assert (editor.caret_line, editor.caret_col) == search.matches[0]


def test_matches_do_not_overlap():
    search = make_search(["aaaa"])
    type_query(search, "aa")
    assert len(search.matches) == 2


def test_find_next_cycles_through_all_matches():
    search = make_search()
    type_query(search, "the")
    count = len(search.matches)
    visited = []
    for _ in range(count):
        search.find_next()
        editor = search.editor
        visited.append((editor.caret_line, editor.caret_col))
    assert search.current_index == 0
    assert sorted(visited) == sorted(search.matches)


def test_find_previous_wraps_to_last():
    search = make_search()
    type_query(search, "the")
    search.find_previous()
    assert search.current_index == len(search.matches) - 1
    editor = search.editor
    assert (editor.caret_line, editor.caret_col) == search.matches[-1]


def test_f3_with_shift_goes_back():
    search = make_search()
    type_query(search, "the")
    search.handle_key(SearchKey.F3, shift=True)
    assert search.current_index == len(search.matches) - 1
    search.handle_key(SearchKey.F3)
    assert search.current_index == 0


def test_return_advances():
    search = make_search()
    type_query(search, "the")
    search.handle_key(SearchKey.RETURN)
    assert search.current_index == 1


def test_find_next_without_matches_searches():
    search = make_search()
    search.box_text = PROMPT + "mat"
    search.find_next()
    assert search.matches
    assert search.current_index == 0


def test_jump_out_of_range_is_refused():
    search = make_search()
    type_query(search, "end")
    assert search.jump_to_match(len(search.matches)) is False
    assert search.jump_to_match(-1) is False


def test_backspace_removes_character_and_researches():
    search = make_search()
    type_query(search, "thx")
    assert search.matches == []
    search.handle_key(SearchKey.BACKSPACE)
    assert search.query() == "th"
    assert search.matches


def test_backspace_on_empty_query_keeps_prompt():
    search = make_search()
    search.handle_key(SearchKey.BACKSPACE)
    assert search.box_text == PROMPT
    assert search.matches == []


def test_caret_stays_inside_query():
    search = make_search()
    type_query(search, "ab")
    for _ in range(5):
        search.handle_key(SearchKey.LEFT)
    assert search.caret_pos == len(PROMPT)
    for _ in range(5):
        search.handle_key(SearchKey.RIGHT)
    assert search.caret_pos == len(search.box_text)


def test_typing_inserts_at_caret():
    search = make_search()
    type_query(search, "ac")
    search.handle_key(SearchKey.LEFT)
    search.handle_char("b")
    assert search.query() == "abc"


@pytest.mark.parametrize("ch", ["\t", "\x7f", "é", "\n"])
def test_non_printable_characters_are_rejected(ch):
    search = make_search()
    assert search.handle_char(ch) is False
    assert search.box_text == PROMPT


def test_escape_restores_editor_state():
    search = make_search()
    editor = search.editor
    type_query(search, "end")
    assert editor.caret_line == 3
    search.handle_key(SearchKey.ESCAPE)
    assert search.active is False
    assert (editor.caret_line, editor.caret_col) == (0, 0)


def test_deactivate_restores_saved_position():
    editor = Editor(document=Document(lines=list(TEXT)))
    editor.caret_line, editor.caret_col = 1, 4
    search = SearchMode(editor)
    search.activate()
    type_query(search, "end")
    search.deactivate()
    assert (editor.caret_line, editor.caret_col) == (1, 4)