"""ReMOTE 25SL-specific device code."""

from .controller import Remote25SLController
from .input import MESSAGE_LENGTH, Remote25SLInput, decode
from .mapper import Remote25SLControlMapper

__all__ = [
    "MESSAGE_LENGTH",
    "Remote25SLControlMapper",
    "Remote25SLController",
    "Remote25SLInput",
    "decode",
]
