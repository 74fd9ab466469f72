"""Editor key codes and conversion from terminal key events.

Terminal key codes are given by name: a plain name such as ``"Enter"`` or
``"BackTab"``, or a pair for keys with a payload: ``("F", 5)``,
``("Char", "a")``, ``("Media", "Play")``, ``("Modifier", "LeftShift")``.
Terminal modifiers are a bit mask with SHIFT=1, CONTROL=2, ALT=4,
SUPER=8, HYPER=16 and META=32.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Union


class KeyKind(Enum):
    BACKSPACE = "Backspace"
    ENTER = "Enter"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    TAB = "Tab"
    BACK_TAB = "BackTab"
    DELETE = "Delete"
    INSERT = "Insert"
    F = "F"
    CHAR = "Char"
    NULL = "Null"
    ESC = "Esc"
    CAPS_LOCK = "CapsLock"
    SCROLL_LOCK = "ScrollLock"
    NUM_LOCK = "NumLock"
    PRINT_SCREEN = "PrintScreen"
    PAUSE = "Pause"
    MENU = "Menu"
    KEYPAD_BEGIN = "KeypadBegin"
    MEDIA = "Media"
    MODIFIER = "Modifier"


class MediaKeyCode(Enum):
    PLAY = "Play"
    PAUSE = "Pause"
    PLAY_PAUSE = "PlayPause"
    REVERSE = "Reverse"
    STOP = "Stop"
    FAST_FORWARD = "FastForward"
    REWIND = "Rewind"
    TRACK_NEXT = "TrackNext"
    TRACK_PREVIOUS = "TrackPrevious"
    RECORD = "Record"
    LOWER_VOLUME = "LowerVolume"
    RAISE_VOLUME = "RaiseVolume"
    MUTE_VOLUME = "MuteVolume"


class ModifierKeyCode(Enum):
    LEFT_SHIFT = "LeftShift"
    LEFT_CONTROL = "LeftControl"
    LEFT_ALT = "LeftAlt"
    LEFT_SUPER = "LeftSuper"
    LEFT_HYPER = "LeftHyper"
    LEFT_META = "LeftMeta"
    RIGHT_SHIFT = "RightShift"
    RIGHT_CONTROL = "RightControl"
    RIGHT_ALT = "RightAlt"
    RIGHT_SUPER = "RightSuper"
    RIGHT_HYPER = "RightHyper"
    RIGHT_META = "RightMeta"
    ISO_LEVEL3_SHIFT = "IsoLevel3Shift"
    ISO_LEVEL5_SHIFT = "IsoLevel5Shift"


class KeyModifiers(Flag):
    NONE = 0
    SHIFT = auto()
    CONTROL = auto()
    ALT = auto()
    SUPER = auto()
    HYPER = auto()
    META = auto()


Payload = Union[None, int, str, MediaKeyCode, ModifierKeyCode]

_PAYLOAD_TYPES = {
    KeyKind.F: int,
    KeyKind.CHAR: str,
    KeyKind.MEDIA: MediaKeyCode,
    KeyKind.MODIFIER: ModifierKeyCode,
}


@dataclass(frozen=True)
class KeyCode:
    """A key, with the payload that F, Char, Media and Modifier keys carry."""

    kind: KeyKind
    value: Payload = None

    def __post_init__(self) -> None:
        expected = _PAYLOAD_TYPES.get(self.kind)
        if expected is None:
            if self.value is not None:
                raise ValueError(f"{self.kind.value} key takes no payload")
        elif not isinstance(self.value, expected) or isinstance(self.value, bool):
            raise ValueError(f"{self.kind.value} key needs a {expected.__name__} payload")

    @classmethod
    def char(cls, ch: str) -> KeyCode:
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return cls(KeyKind.CHAR, ch)

    @classmethod
    def function(cls, number: int) -> KeyCode:
        if not 0 <= number <= 255:
            raise ValueError(f"function key number {number} out of range")
        return cls(KeyKind.F, number)

    @classmethod
    def media(cls, media: MediaKeyCode) -> KeyCode:
        return cls(KeyKind.MEDIA, media)

    @classmethod
    def modifier(cls, modifier: ModifierKeyCode) -> KeyCode:
        return cls(KeyKind.MODIFIER, modifier)

    def __str__(self) -> str:
        if self.kind is KeyKind.F:
            return f"F{self.value}"
        if self.kind is KeyKind.CHAR:
            return str(self.value)
        if self.kind in (KeyKind.MEDIA, KeyKind.MODIFIER):
            return self.value.value  # type: ignore[union-attr]
        return self.kind.value


_PLAIN_KEYS = {kind.value: kind for kind in KeyKind if kind not in _PAYLOAD_TYPES}

_TERMINAL_MODIFIER_BITS = (
    (0b1, KeyModifiers.SHIFT),
    (0b10, KeyModifiers.CONTROL),
    (0b100, KeyModifiers.ALT),
    (0b1000, KeyModifiers.SUPER),
    (0b1_0000, KeyModifiers.HYPER),
    (0b10_0000, KeyModifiers.META),
)


def convert_media(media: str | MediaKeyCode) -> MediaKeyCode:
    """The media key named ``media``."""
    if isinstance(media, MediaKeyCode):
        return media
    try:
        return MediaKeyCode(media)
    except ValueError:
        raise ValueError(f"unknown media key {media!r}") from None


def convert_modifier_keycode(modifier: str | ModifierKeyCode) -> ModifierKeyCode:
    """The modifier key named ``modifier``."""
    if isinstance(modifier, ModifierKeyCode):
        return modifier
    try:
        return ModifierKeyCode(modifier)
    except ValueError:
        raise ValueError(f"unknown modifier key {modifier!r}") from None


def convert_keycode(code: str | tuple[str, object]) -> KeyCode:
    """Convert a terminal key code to an editor key code."""
    if isinstance(code, str):
        kind = _PLAIN_KEYS.get(code)
        if kind is None:
            raise ValueError(f"unknown key {code!r}")
        return KeyCode(kind)

    name, payload = code
    if name == "F":
        return KeyCode.function(payload)  # type: ignore[arg-type]
    if name == "Char":
        return KeyCode.char(payload)  # type: ignore[arg-type]
    if name == "Media":
        return KeyCode.media(convert_media(payload))  # type: ignore[arg-type]
    if name == "Modifier":
        return KeyCode.modifier(convert_modifier_keycode(payload))  # type: ignore[arg-type]
    raise ValueError(f"unknown key {code!r}")


def convert_modifier(modifiers: int) -> KeyModifiers:
    """Convert a terminal modifier bit mask to editor modifiers."""
    output = KeyModifiers.NONE
    for bit, flag in _TERMINAL_MODIFIER_BITS:
        if modifiers & bit:
            output |= flag
    return output