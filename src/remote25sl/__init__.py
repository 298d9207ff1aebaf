"""remote25sl: Typed events from the Novation ReMOTE 25SL MIDI controller."""

__version__ = "0.1.0"

from .devices import Remote25SLController, Remote25SLInput, decode
from .models import ControlEvent, InputPort, KeyEvent, pitch_of, port_from_name

__all__ = [
    "ControlEvent",
    "InputPort",
    "KeyEvent",
    "Remote25SLController",
    "Remote25SLInput",
    "decode",
    "pitch_of",
    "port_from_name",
]
