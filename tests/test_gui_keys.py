import pytest

from ferrotext.gui_keys import convert_named_key
from ferrotext.keys import KeyCode, KeyKind, KeyModifiers


@pytest.mark.parametrize(
    "name, kind",
    [
        ("Backspace", KeyKind.BACKSPACE),
        ("Enter", KeyKind.ENTER),
        ("ArrowLeft", KeyKind.LEFT),
        ("ArrowRight", KeyKind.RIGHT),
        ("ArrowUp", KeyKind.UP),
        ("ArrowDown", KeyKind.DOWN),
        ("Home", KeyKind.HOME),
        ("End", KeyKind.END),
        ("PageUp", KeyKind.PAGE_UP),
        ("PageDown", KeyKind.PAGE_DOWN),
        ("Delete", KeyKind.DELETE),
        ("Insert", KeyKind.INSERT),
        ("Escape", KeyKind.ESC),
        ("CapsLock", KeyKind.CAPS_LOCK),
        ("ScrollLock", KeyKind.SCROLL_LOCK),
        ("NumLock", KeyKind.NUM_LOCK),
        ("PrintScreen", KeyKind.PRINT_SCREEN),
        ("Pause", KeyKind.PAUSE),
    ],
)
def test_plain_named_keys(name, kind):
    assert convert_named_key(name, KeyModifiers.NONE) == KeyCode(kind)


def test_tab_without_shift():
    assert convert_named_key("Tab", KeyModifiers.CONTROL) == KeyCode(KeyKind.TAB)


def test_tab_with_shift_is_back_tab():
    assert convert_named_key("Tab", KeyModifiers.SHIFT) == KeyCode(KeyKind.BACK_TAB)
    both = KeyModifiers.SHIFT | KeyModifiers.ALT
    assert convert_named_key("Tab", both) == KeyCode(KeyKind.BACK_TAB)


@pytest.mark.parametrize("number", range(1, 25))
def test_function_keys(number):
    assert convert_named_key(f"F{number}", KeyModifiers.NONE) == KeyCode.function(number)


@pytest.mark.parametrize("name", ["F25", "F0", "Super", "Meta", "Space", ""])
def test_unknown_keys_give_none(name):
    assert convert_named_key(name, KeyModifiers.NONE) is None