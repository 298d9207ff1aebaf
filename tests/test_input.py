"""Tests for parsing mido messages from the ReMOTE 25SL."""

import mido
import pytest

from remote25sl.devices import DeviceInput, Remote25SLInput
from remote25sl.models import (
    InputPort,
    KeyEvent,
    KeyState,
    Mod,
    Octet,
    Pitch,
    PressurePad,
    RotaryDial,
    pitch_of,
)


@pytest.fixture
def parser():
    return Remote25SLInput()


@pytest.mark.unit
class TestRemote25SLInput:
    """Test Remote25SLInput.parse_message."""

    def test_implements_protocol(self, parser):
        device_input: DeviceInput = parser
        assert callable(device_input.parse_message)

    def test_note_on(self, parser):
        msg = mido.Message("note_on", note=60, velocity=100)
        event = parser.parse_message(InputPort.A, msg)
        assert event == KeyEvent(state=KeyState.PRESSED, pitch=pitch_of(60), velocity=100)

    def test_note_off(self, parser):
        msg = mido.Message("note_off", note=61, velocity=30)
        event = parser.parse_message(InputPort.A, msg)
        assert event == KeyEvent(state=KeyState.RELEASED, pitch=pitch_of(61), velocity=30)

    def test_mod_wheel(self, parser):
        msg = mido.Message("control_change", control=1, value=77)
        assert parser.parse_message(InputPort.A, msg) == Mod(level=77).to_event()

    @pytest.mark.parametrize("pitch,magnitude", [
        (0, 0),
        (-8192, -64),
        (8064, 63),
    ])
    def test_pitchwheel(self, parser, pitch, magnitude):
        """mido's signed pitch maps onto the MSB of the 14-bit value."""
        msg = mido.Message("pitchwheel", pitch=pitch)
        assert parser.parse_message(InputPort.A, msg) == Pitch(magnitude=magnitude).to_event()

    def test_rotary_dial(self, parser):
        msg = mido.Message("control_change", control=58, value=66)
        event = parser.parse_message(InputPort.B, msg)
        assert event.control == RotaryDial(octet=Octet.C, magnitude=-2)

    def test_pressure_pad(self, parser):
        msg = mido.Message("note_on", note=43, velocity=90)
        event = parser.parse_message(InputPort.B, msg)
        assert event.control == PressurePad(octet=Octet.H, level=90)

    def test_other_channel(self, parser):
        """The controller only talks on channel 1."""
        msg = mido.Message("control_change", channel=1, control=58, value=66)
        assert parser.parse_message(InputPort.B, msg) is None
        msg = mido.Message("note_on", channel=2, note=60, velocity=100)
        assert parser.parse_message(InputPort.A, msg) is None

    def test_clock(self, parser):
        assert parser.parse_message(InputPort.B, mido.Message("clock")) is None

    def test_sysex(self, parser):
        msg = mido.Message("sysex", data=[0, 32, 41])
        assert parser.parse_message(InputPort.C, msg) is None
        assert parser.parse_message(InputPort.B, msg) is None

    def test_program_change(self, parser):
        """Two-byte messages never match."""
        msg = mido.Message("program_change", program=5)
        assert parser.parse_message(InputPort.B, msg) is None

    def test_port_c(self, parser):
        msg = mido.Message("control_change", control=58, value=66)
        assert parser.parse_message(InputPort.C, msg) is None
