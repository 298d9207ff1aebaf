"""Enumerations for the ReMOTE 25SL controls."""

from enum import Enum, IntEnum
from typing import Optional


class KeyState(str, Enum):
    """Whether a key or button went down or came up."""

    PRESSED = "pressed"
    RELEASED = "released"

    @classmethod
    def from_value(cls, value: int) -> "KeyState":
        """Button state from a CC value: 0 is released, anything else pressed."""
        return cls.RELEASED if value == 0 else cls.PRESSED


class Octet(IntEnum):
    """Position of a control within a strip of eight, left to right."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    @classmethod
    def from_index(cls, index: int) -> Optional["Octet"]:
        """
        Convert a 0-7 index to an Octet.

        Args:
            index: Position within the strip

        Returns:
            Octet, or None if index is outside 0-7
        """
        if not 0 <= index < 8:
            return None
        return cls(index)


class ButtonRow(str, Enum):
    """The four rows of eight buttons."""

    TOP_LEFT = "top_left"
    BOTTOM_LEFT = "bottom_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"


class Axis(str, Enum):
    """Axes reported by the touch pad."""

    X = "x"
    Y = "y"


class Side(str, Enum):
    """Left and right halves of the controller."""

    LEFT = "left"
    RIGHT = "right"


class PageDirection(str, Enum):
    """Page up and page down buttons."""

    UP = "up"
    DOWN = "down"


class LeftButtonId(str, Enum):
    """The four buttons on the upper left, top to bottom."""

    A = "a"
    B = "b"
    C = "c"
    D = "d"


class RightButtonId(str, Enum):
    """The three buttons on the upper right, top to bottom."""

    A = "a"
    B = "b"
    C = "c"


class PlaybackId(str, Enum):
    """Transport-style buttons."""

    PREVIOUS = "previous"
    NEXT = "next"
    STOP = "stop"
    PLAY = "play"
    RECORD = "record"
    LOOP = "loop"
