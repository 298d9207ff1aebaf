"""Event model for decoded ReMOTE 25SL input.

Every control class on the hardware has its own frozen model, tagged with a
``kind`` literal so that ``Control`` and ``Event`` are discriminated unions:

    Event
    ├── KeyEvent(state, pitch, velocity)
    └── ControlEvent(control)
            └── RotaryDial | RotarySlider | VerticalSlider | PressurePad
                | Button | TouchPad | Pitch | Mod | Page
                | LeftButton | RightButton | Playback

All models are immutable and hashable, so decoded events can be compared,
stored in sets or used as dictionary keys.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import (
    Axis,
    ButtonRow,
    KeyState,
    LeftButtonId,
    Octet,
    PageDirection,
    PlaybackId,
    RightButtonId,
    Side,
)
from .pitch import LetterOctave

# Absolute 7-bit position or intensity
Level = Annotated[int, Field(ge=0, le=127)]

# Signed, zero-centred value derived from a 7-bit value where 64 is zero.
# Ranges from -64 up to, but excluding, 64.
Magnitude = Annotated[int, Field(ge=-64, lt=64)]

# Key press force
Velocity = Annotated[int, Field(ge=0, le=127)]


def _format_value(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name
    return str(value)


class _ControlBase(BaseModel):
    """Shared behaviour of all control variants."""

    model_config = ConfigDict(frozen=True)

    def to_event(self) -> "ControlEvent":
        """Wrap this control in a ControlEvent."""
        return ControlEvent(control=self)

    def __str__(self) -> str:
        fields = ", ".join(
            f"{name}={_format_value(value)}" for name, value in self if name != "kind"
        )
        return f"{type(self).__name__}({fields})"


class RotaryDial(_ControlBase):
    """Magnitude in the direction the dial was turned, -63 to 63."""

    kind: Literal["rotary_dial"] = "rotary_dial"
    octet: Octet
    magnitude: Magnitude


class RotarySlider(_ControlBase):
    """Value to which the rotary slider was set."""

    kind: Literal["rotary_slider"] = "rotary_slider"
    octet: Octet
    level: Level


class VerticalSlider(_ControlBase):
    """Value to which the vertical slider was set."""

    kind: Literal["vertical_slider"] = "vertical_slider"
    octet: Octet
    level: Level


class PressurePad(_ControlBase):
    """Force with which the pad was pressed."""

    kind: Literal["pressure_pad"] = "pressure_pad"
    octet: Octet
    level: Level


class Button(_ControlBase):
    """A button in one of the four rows of eight."""

    kind: Literal["button"] = "button"
    row: ButtonRow
    octet: Octet
    state: KeyState


class TouchPad(_ControlBase):
    """Position touched on one axis of the touch pad."""

    kind: Literal["touch_pad"] = "touch_pad"
    axis: Axis
    level: Level


class Pitch(_ControlBase):
    """Position of the pitch bend wheel, -64 to 63 with 0 at rest."""

    kind: Literal["pitch"] = "pitch"
    magnitude: Magnitude


class Mod(_ControlBase):
    """Position of the modulation wheel."""

    kind: Literal["mod"] = "mod"
    level: Level


class Page(_ControlBase):
    """Page up and down buttons at the top left and right."""

    kind: Literal["page"] = "page"
    side: Side
    direction: PageDirection
    state: KeyState


class LeftButton(_ControlBase):
    """One of the four buttons on the upper left."""

    kind: Literal["left_button"] = "left_button"
    button: LeftButtonId
    state: KeyState


class RightButton(_ControlBase):
    """One of the three buttons on the upper right."""

    kind: Literal["right_button"] = "right_button"
    button: RightButtonId
    state: KeyState


class Playback(_ControlBase):
    """Media playback-style buttons."""

    kind: Literal["playback"] = "playback"
    button: PlaybackId
    state: KeyState


Control = Annotated[
    Union[
        RotaryDial,
        RotarySlider,
        VerticalSlider,
        PressurePad,
        Button,
        TouchPad,
        Pitch,
        Mod,
        Page,
        LeftButton,
        RightButton,
        Playback,
    ],
    Field(discriminator="kind"),
]


class ControlEvent(BaseModel):
    """A control on the surface or a wheel changed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["control"] = "control"
    control: Control

    def __str__(self) -> str:
        return str(self.control)


class KeyEvent(BaseModel):
    """A key on the keyboard was pressed or released."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["key"] = "key"
    state: KeyState
    pitch: LetterOctave
    velocity: Velocity

    def __str__(self) -> str:
        return f"Key({self.state.name}, {self.pitch}, velocity={self.velocity})"


Event = Annotated[Union[ControlEvent, KeyEvent], Field(discriminator="kind")]
