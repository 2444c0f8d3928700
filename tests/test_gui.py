import pytest

from plainpad.controller import Key
from plainpad.gui import translate_key


@pytest.mark.parametrize(
    "keysym, expected",
    [
        ("Left", Key.LEFT),
        ("Right", Key.RIGHT),
        ("Up", Key.UP),
        ("Down", Key.DOWN),
        ("BackSpace", Key.BACKSPACE),
        ("Return", Key.RETURN),
        ("KP_Enter", Key.RETURN),
        ("Escape", Key.ESCAPE),
        ("F3", Key.F3),
    ],
)
def test_named_keys(keysym, expected):
    assert translate_key(keysym) is expected


@pytest.mark.parametrize(
    "keysym, expected",
    [("c", Key.C), ("C", Key.C), ("v", Key.V), ("z", Key.Z), ("f", Key.F), ("A", Key.A)],
)
def test_shortcut_letters_ignore_case(keysym, expected):
    assert translate_key(keysym) is expected


@pytest.mark.parametrize("keysym", ["x", "Shift_L", "F4", "space", "1"])
def test_other_keys_have_no_meaning(keysym):
    assert translate_key(keysym) is None