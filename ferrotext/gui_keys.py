"""Conversion of windowing-system named keys to editor key codes.

Named keys are given by their names, such as ``"Enter"``, ``"ArrowLeft"``
or ``"F5"``.
"""

from __future__ import annotations

from .keys import KeyCode, KeyKind, KeyModifiers

_NAMED_KEYS = {
    "Backspace": KeyKind.BACKSPACE,
    "Enter": KeyKind.ENTER,
    "ArrowLeft": KeyKind.LEFT,
    "ArrowRight": KeyKind.RIGHT,
    "ArrowUp": KeyKind.UP,
    "ArrowDown": KeyKind.DOWN,
    "Home": KeyKind.HOME,
    "End": KeyKind.END,
    "PageUp": KeyKind.PAGE_UP,
    "PageDown": KeyKind.PAGE_DOWN,
    "Delete": KeyKind.DELETE,
    "Insert": KeyKind.INSERT,
    "Escape": KeyKind.ESC,
    "CapsLock": KeyKind.CAPS_LOCK,
    "ScrollLock": KeyKind.SCROLL_LOCK,
    "NumLock": KeyKind.NUM_LOCK,
    "PrintScreen": KeyKind.PRINT_SCREEN,
    "Pause": KeyKind.PAUSE,
}

_FUNCTION_KEYS = {f"F{number}": number for number in range(1, 25)}


def convert_named_key(named_key: str, modifiers: KeyModifiers) -> KeyCode | None:
    """The editor key for ``named_key``, or None if it has none.

    Tab becomes BackTab while SHIFT is held.
    """
    if named_key == "Tab":
        if KeyModifiers.SHIFT in modifiers:
            return KeyCode(KeyKind.BACK_TAB)
        return KeyCode(KeyKind.TAB)
    kind = _NAMED_KEYS.get(named_key)
    if kind is not None:
        return KeyCode(kind)
    number = _FUNCTION_KEYS.get(named_key)
    if number is not None:
        return KeyCode.function(number)
    return None