"""Mouse packet assembly, button event detection and vertical-line gesture recognition."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto

L_BUTTON = 0x01
R_BUTTON = 0x02
M_BUTTON = 0x04
SYNC_BIT = 0x08
X_SIGN = 0x10
Y_SIGN = 0x20
X_OVF = 0x40
Y_OVF = 0x80

MIN_LENGTH = 50
"""Minimum length of the vertical gesture."""
TOL = 30
"""Movement allowed in unwanted directions during the vertical gesture."""


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"expected a byte, got {value}")
    return value


@dataclass(frozen=True)
class Packet:
    """A complete three-byte mouse packet."""

    raw: tuple[int, int, int]
    lb: bool
    rb: bool
    mb: bool
    x_ov: bool
    y_ov: bool
    delta_x: int
    delta_y: int

    @classmethod
    def from_bytes(cls, first: int, second: int, third: int) -> Packet:
        for value in (first, second, third):
            _check_byte(value)
        delta_x = second - 0x100 if first & X_SIGN else second
        delta_y = third - 0x100 if first & Y_SIGN else third
        return cls(
            raw=(first, second, third),
            lb=bool(first & L_BUTTON),
            rb=bool(first & R_BUTTON),
            mb=bool(first & M_BUTTON),
            x_ov=bool(first & X_OVF),
            y_ov=bool(first & Y_OVF),
            delta_x=delta_x,
            delta_y=delta_y,
        )


class PacketAssembler:
    """Collects bytes from the mouse into packets, synchronising on bit 3 of the first."""

    def __init__(self) -> None:
        self._pending: list[int] = []

    def feed(self, byte: int) -> Packet | None:
        """Add one byte; return the packet it completes, if any."""
        _check_byte(byte)
        if not self._pending and not byte & SYNC_BIT:
            return None
        self._pending.append(byte)
        if len(self._pending) < 3:
            return None
        packet = Packet.from_bytes(*self._pending)
        self._pending.clear()
        return packet


class MouseEventType(Enum):
    LB_PRESSED = auto()
    LB_RELEASED = auto()
    RB_PRESSED = auto()
    RB_RELEASED = auto()
    BUTTON_EV = auto()
    MOUSE_MOV = auto()


@dataclass(frozen=True)
class MouseEvent:
    type: MouseEventType
    delta_x: int = 0
    delta_y: int = 0


class _Buttons(Enum):
    ALL_RELEASED = auto()
    LEFT_PRESSED = auto()
    RIGHT_PRESSED = auto()
    OTHER_COMBINATION = auto()


class MouseEventDetector:
    """Turns successive packets into button and movement events."""

    def __init__(self) -> None:
        self._state = _Buttons.ALL_RELEASED

    def detect(self, packet: Packet) -> MouseEvent:
        none = not (packet.lb or packet.rb or packet.mb)
        only_left = packet.lb and not (packet.rb or packet.mb)
        only_right = packet.rb and not (packet.lb or packet.mb)
        movement = MouseEvent(MouseEventType.MOUSE_MOV, packet.delta_x, packet.delta_y)
        state = self._state

        if state is _Buttons.ALL_RELEASED:
            if none:
                return movement
            if only_left:
                self._state = _Buttons.LEFT_PRESSED
                return MouseEvent(MouseEventType.LB_PRESSED)
            if only_right:
                self._state = _Buttons.RIGHT_PRESSED
                return MouseEvent(MouseEventType.RB_PRESSED)
            self._state = _Buttons.OTHER_COMBINATION
            return MouseEvent(MouseEventType.BUTTON_EV)

        if state is _Buttons.LEFT_PRESSED:
            if none:
                self._state = _Buttons.ALL_RELEASED
                return MouseEvent(MouseEventType.LB_RELEASED)
            if only_left:
                return movement
            self._state = _Buttons.OTHER_COMBINATION
            return MouseEvent(MouseEventType.BUTTON_EV)

        if state is _Buttons.RIGHT_PRESSED:
            if none:
                self._state = _Buttons.ALL_RELEASED
                return MouseEvent(MouseEventType.RB_RELEASED)
            if only_right:
                return movement
            self._state = _Buttons.OTHER_COMBINATION
            return MouseEvent(MouseEventType.BUTTON_EV)

        if none:
            self._state = _Buttons.ALL_RELEASED
        elif only_right:
            self._state = _Buttons.RIGHT_PRESSED
        elif only_left:
            self._state = _Buttons.LEFT_PRESSED
        return MouseEvent(MouseEventType.BUTTON_EV)


class Gesture(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2


class _GestureState(Enum):
    INIT = auto()
    LB_DOWN = auto()
    RB_DOWN = auto()


class VerticalLineGesture:
    """Recognises a downward vertical line drawn while holding the left or right button."""

    def __init__(self) -> None:
        self._state = _GestureState.INIT
        self._length = 0

    def feed(self, event: MouseEvent) -> Gesture:
        state = self._state

        if state is _GestureState.INIT:
            if event.type is MouseEventType.LB_PRESSED:
                self._length = 0
                self._state = _GestureState.LB_DOWN
            elif event.type is MouseEventType.RB_PRESSED:
                self._length = 0
                self._state = _GestureState.RB_DOWN
            return Gesture.NONE

        if state is _GestureState.LB_DOWN:
            release, result = MouseEventType.LB_RELEASED, Gesture.LEFT
        else:
            release, result = MouseEventType.RB_RELEASED, Gesture.RIGHT

        if event.type is MouseEventType.MOUSE_MOV:
            if abs(event.delta_x) > TOL or event.delta_y > TOL:
                self._state = _GestureState.INIT
            else:
                self._length -= event.delta_y
        elif event.type is release:
            if self._length > MIN_LENGTH:
                return result
            self._state = _GestureState.INIT
        else:
            self._state = _GestureState.INIT
        return Gesture.NONE