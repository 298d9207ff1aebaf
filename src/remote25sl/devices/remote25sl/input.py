"""ReMOTE 25SL input decoding."""

from collections.abc import Sequence
from typing import Optional

import mido

from remote25sl.models import (
    Event,
    InputPort,
    KeyEvent,
    KeyState,
    Mod,
    Pitch,
    pitch_of,
)

from .mapper import (
    MAGNITUDE_CENTER,
    MOD_WHEEL_CC,
    PITCH_BEND_DATA1,
    STATUS_CONTROL_CHANGE,
    STATUS_NOTE_OFF,
    STATUS_NOTE_ON,
    STATUS_PITCH_BEND,
    Remote25SLControlMapper,
)

# Every message the controller sends on its channel is three bytes long
MESSAGE_LENGTH = 3

_mapper = Remote25SLControlMapper()


def decode(port: InputPort, data: Sequence[int]) -> Optional[Event]:
    """
    Decode one raw MIDI message received on the given input port.

    This is a pure function: it never raises, never logs and keeps no
    state between calls. Anything that does not correspond to a known
    control yields None.

    Args:
        port: Input port the message arrived on
        data: Raw message bytes (bytes, bytearray or a sequence of ints)

    Returns:
        The decoded Event, or None for unrecognized or malformed input
    """
    if len(data) != MESSAGE_LENGTH:
        return None

    status, data1, data2 = data
    if not 0 <= status <= 255 or not 0 <= data1 <= 127 or not 0 <= data2 <= 127:
        return None

    if port == InputPort.A:
        return _decode_keyboard(status, data1, data2)

    if port == InputPort.B:
        control = _mapper.map_control(status, data1, data2)
        return control.to_event() if control is not None else None

    # Port C carries preset load notifications, which are not decoded
    return None


def _decode_keyboard(status: int, data1: int, data2: int) -> Optional[Event]:
    """Keyboard notes plus the pitch and mod wheels (port A)."""
    if status == STATUS_PITCH_BEND and data1 == PITCH_BEND_DATA1:
        return Pitch(magnitude=data2 - MAGNITUDE_CENTER).to_event()

    if status == STATUS_CONTROL_CHANGE and data1 == MOD_WHEEL_CC:
        return Mod(level=data2).to_event()

    if status == STATUS_NOTE_ON:
        state = KeyState.PRESSED
    elif status == STATUS_NOTE_OFF:
        state = KeyState.RELEASED
    else:
        return None

    return KeyEvent(state=state, pitch=pitch_of(data1), velocity=data2)


class Remote25SLInput:
    """Parse mido messages from the ReMOTE 25SL into events."""

    def parse_message(self, port: InputPort, msg: mido.Message) -> Optional[Event]:
        """
        Parse an incoming MIDI message.

        Args:
            port: Input port the message arrived on
            msg: MIDI message

        Returns:
            Decoded Event, or None
        """
        # Clock, sysex and other non channel-voice messages never match
        if msg.is_meta or msg.type in ("clock", "sysex"):
            return None

        return decode(port, msg.bytes())
