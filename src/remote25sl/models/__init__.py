"""Data models for the ReMOTE 25SL."""

from .config import AppConfig, PortNames, default_config_path
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
from .events import (
    Button,
    Control,
    ControlEvent,
    Event,
    KeyEvent,
    LeftButton,
    Level,
    Magnitude,
    Mod,
    Page,
    Pitch,
    Playback,
    PressurePad,
    RightButton,
    RotaryDial,
    RotarySlider,
    TouchPad,
    Velocity,
    VerticalSlider,
)
from .pitch import Letter, LetterOctave, pitch_of
from .ports import (
    DEFAULT_PORT_NAMES,
    MIDI_INPUT_PORT_A,
    MIDI_INPUT_PORT_B,
    MIDI_INPUT_PORT_C,
    InputPort,
    port_from_name,
)

__all__ = [
    # Config
    "AppConfig",
    "PortNames",
    "default_config_path",
    # Ports
    "DEFAULT_PORT_NAMES",
    "InputPort",
    "MIDI_INPUT_PORT_A",
    "MIDI_INPUT_PORT_B",
    "MIDI_INPUT_PORT_C",
    "port_from_name",
    # Enums
    "Axis",
    "ButtonRow",
    "KeyState",
    "LeftButtonId",
    "Octet",
    "PageDirection",
    "PlaybackId",
    "RightButtonId",
    "Side",
    # Pitch
    "Letter",
    "LetterOctave",
    "pitch_of",
    # Events
    "Button",
    "Control",
    "ControlEvent",
    "Event",
    "KeyEvent",
    "LeftButton",
    "Level",
    "Magnitude",
    "Mod",
    "Page",
    "Pitch",
    "Playback",
    "PressurePad",
    "RightButton",
    "RotaryDial",
    "RotarySlider",
    "TouchPad",
    "Velocity",
    "VerticalSlider",
]
