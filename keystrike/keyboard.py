"""Translation of keyboard make codes into characters, honouring caps lock and shift."""

from __future__ import annotations

NUM_MAPPED_KEYS = 58

CAPS_LOCK_MAKECODE = 0x3A
LEFT_SHIFT_MAKECODE = 0x2A
LEFT_SHIFT_BREAKCODE = 0xAA
RIGHT_SHIFT_MAKECODE = 0x36
RIGHT_SHIFT_BREAKCODE = 0xB6
ESC_BREAKCODE = 0x81

_NONE = ("", "")

# (upper, lower) characters for each make code below NUM_MAPPED_KEYS.
_KEYS: tuple[tuple[str, str], ...] = (
    _NONE,
    _NONE,
    ("!", "1"),
    ('"', "2"),
    ("#", "3"),
    ("$", "4"),
    ("%", "5"),
    ("&", "6"),
    ("/", "7"),
    ("(", "8"),
    (")", "9"),
    ("=", "0"),
    ("?", "'"),
    _NONE,
    ("\b", "\b"),
    ("\t", "\t"),
    ("Q", "q"),
    ("W", "w"),
    ("E", "e"),
    ("R", "r"),
    ("T", "t"),
    ("Y", "y"),
    ("U", "u"),
    ("I", "i"),
    ("O", "o"),
    ("P", "p"),
    ("*", "+"),
    _NONE,
    ("\n", "\n"),
    _NONE,
    ("A", "a"),
    ("S", "s"),
    ("D", "d"),
    ("F", "f"),
    ("G", "g"),
    ("H", "h"),
    ("J", "j"),
    ("K", "k"),
    ("L", "l"),
    _NONE,
    _NONE,
    _NONE,
    _NONE,
    _NONE,
    ("Z", "z"),
    ("X", "x"),
    ("C", "c"),
    ("V", "v"),
    ("B", "b"),
    ("N", "n"),
    ("M", "m"),
    (";", ","),
    (":", "."),
    ("_", "-"),
    _NONE,
    _NONE,
    _NONE,
    (" ", " "),
)


class KeyMapper:
    """Keeps track of caps lock and shift keys and maps make codes to characters."""

    def __init__(self) -> None:
        self.caps_lock = False
        self._left_shift = False
        self._right_shift = False

    @property
    def shift(self) -> bool:
        """Whether either shift key is held down."""
        return self._left_shift or self._right_shift

    def translate(self, scancode: int) -> str:
        """Character for ``scancode``, or an empty string if it maps to none.

        Caps lock and shift codes update the modifier state and yield no character.
        """
        if not 0 <= scancode <= 0xFF:
            raise ValueError(f"scancode must be a byte, got {scancode}")

        if scancode == CAPS_LOCK_MAKECODE:
            self.caps_lock = not self.caps_lock
        elif scancode == LEFT_SHIFT_MAKECODE:
            self._left_shift = True
        elif scancode == LEFT_SHIFT_BREAKCODE:
            self._left_shift = False
        elif scancode == RIGHT_SHIFT_MAKECODE:
            self._right_shift = True
        elif scancode == RIGHT_SHIFT_BREAKCODE:
            self._right_shift = False
        elif scancode < NUM_MAPPED_KEYS:
            upper, lower = _KEYS[scancode]
            return upper if self.caps_lock != self.shift else lower
        return ""