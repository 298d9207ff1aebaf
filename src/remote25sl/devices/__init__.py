"""Device infrastructure for MIDI controllers."""

from .protocols import DeviceInput
from .remote25sl import Remote25SLController, Remote25SLInput, decode

__all__ = [
    "DeviceInput",
    "Remote25SLController",
    "Remote25SLInput",
    "decode",
]
