"""MIDI input ports of the ReMOTE 25SL and their names."""

from collections.abc import Mapping
from enum import Enum
from typing import Optional

# Names under which the controller's input ports show up in the MIDI backend
MIDI_INPUT_PORT_A = "ReMOTE SL 24:0"
MIDI_INPUT_PORT_B = "ReMOTE SL 24:1"
MIDI_INPUT_PORT_C = "ReMOTE SL 24:2"


class InputPort(str, Enum):
    """The MIDI input ports on which the controller emits messages."""

    A = "a"  # Keyboard notes plus pitch and mod wheels
    B = "b"  # Every other control
    C = "c"  # Preset load notifications

    @property
    def description(self) -> str:
        """Human-readable summary of what arrives on this port."""
        return {
            InputPort.A: "keyboard, pitch and mod wheels",
            InputPort.B: "dials, sliders, pads and buttons",
            InputPort.C: "preset notifications",
        }[self]

    @classmethod
    def from_name(cls, name: str) -> Optional["InputPort"]:
        """Determine the port from its default MIDI port name."""
        return port_from_name(name)


DEFAULT_PORT_NAMES: Mapping[InputPort, str] = {
    InputPort.A: MIDI_INPUT_PORT_A,
    InputPort.B: MIDI_INPUT_PORT_B,
    InputPort.C: MIDI_INPUT_PORT_C,
}


def port_from_name(
    name: str,
    port_names: Optional[Mapping[InputPort, str]] = None,
) -> Optional[InputPort]:
    """
    Resolve a MIDI port name reported by the backend to an InputPort.

    Matching is exact: no case folding, trimming or pattern matching.

    Args:
        name: Port name as reported by the MIDI backend
        port_names: Port binding to use (defaults to DEFAULT_PORT_NAMES)

    Returns:
        The bound InputPort, or None for unrelated ports
    """
    names = DEFAULT_PORT_NAMES if port_names is None else port_names
    for port, port_name in names.items():
        if port_name == name:
            return port
    return None
