"""Control-change assignment table for the ReMOTE 25SL.

The hardware reports its controls on input port B as control-change (status
176) or note-on (status 144, pressure pads only) messages. The control is
selected by data byte 1 from a set of disjoint ranges:

    CC  8-15   rotary sliders          CC 56-63   rotary dials
    CC 16-23   vertical sliders        CC 68-69   touch pad X / Y
    CC 24-31   buttons, top left       CC 72-77   playback buttons
    CC 32-39   buttons, bottom left    CC 80-83   left buttons A-D
    CC 40-47   buttons, top right      CC 85-87   right buttons A-C
    CC 48-55   buttons, bottom right   CC 88-91   page up / down
    Note 36-43 pressure pads

Keyboard notes and the two wheels arrive on port A with standard note-on,
note-off, control-change and pitch-bend status bytes.
"""

from typing import Optional

from remote25sl.models import (
    Axis,
    Button,
    ButtonRow,
    Control,
    KeyState,
    LeftButton,
    LeftButtonId,
    Octet,
    Page,
    PageDirection,
    Playback,
    PlaybackId,
    PressurePad,
    RightButton,
    RightButtonId,
    RotaryDial,
    RotarySlider,
    Side,
    TouchPad,
    VerticalSlider,
)

# Status bytes (channel 1)
STATUS_NOTE_OFF = 128
STATUS_NOTE_ON = 144
STATUS_CONTROL_CHANGE = 176
STATUS_PITCH_BEND = 224

# Port A fixed data bytes
PITCH_BEND_DATA1 = 0
MOD_WHEEL_CC = 1

# Zero point of bidirectional controls (dials, pitch bend)
MAGNITUDE_CENTER = 64

# Port B strips of eight
ROTARY_DIAL_CCS = range(56, 64)
ROTARY_SLIDER_CCS = range(8, 16)
VERTICAL_SLIDER_CCS = range(16, 24)
PRESSURE_PAD_NOTES = range(36, 44)

BUTTON_ROW_CCS: tuple[tuple[ButtonRow, range], ...] = (
    (ButtonRow.TOP_LEFT, range(24, 32)),
    (ButtonRow.BOTTOM_LEFT, range(32, 40)),
    (ButtonRow.TOP_RIGHT, range(40, 48)),
    (ButtonRow.BOTTOM_RIGHT, range(48, 56)),
)

# Port B single controls
TOUCH_PAD_CCS: dict[int, Axis] = {
    68: Axis.X,
    69: Axis.Y,
}

PAGE_CCS: dict[int, tuple[Side, PageDirection]] = {
    88: (Side.LEFT, PageDirection.UP),
    89: (Side.LEFT, PageDirection.DOWN),
    90: (Side.RIGHT, PageDirection.UP),
    91: (Side.RIGHT, PageDirection.DOWN),
}

LEFT_BUTTON_CCS: dict[int, LeftButtonId] = {
    80: LeftButtonId.A,
    81: LeftButtonId.B,
    82: LeftButtonId.C,
    83: LeftButtonId.D,
}

RIGHT_BUTTON_CCS: dict[int, RightButtonId] = {
    85: RightButtonId.A,
    86: RightButtonId.B,
    87: RightButtonId.C,
}

PLAYBACK_CCS: dict[int, PlaybackId] = {
    72: PlaybackId.PREVIOUS,
    73: PlaybackId.NEXT,
    74: PlaybackId.STOP,
    75: PlaybackId.PLAY,
    76: PlaybackId.RECORD,
    77: PlaybackId.LOOP,
}


class Remote25SLControlMapper:
    """
    Maps port B (status, data1, data2) triples to Control values.

    Ranges are checked in a fixed order, first match wins. They are disjoint,
    so the order only keeps the table readable.

    Provides:
    - map_control(): (status, data1, data2) → Control or None
    - octet(): data1 within a strip → Octet or None
    - dial_magnitude(): dial value → signed magnitude
    - key_state(): button value → KeyState
    """

    @staticmethod
    def octet(control: int, strip: range) -> Optional[Octet]:
        """
        Position of a control within its strip of eight.

        Args:
            control: Data byte 1 of the message
            strip: The CC (or note) range of the strip

        Returns:
            Octet, or None if control lies outside the strip
        """
        return Octet.from_index(control - strip.start)

    @staticmethod
    def dial_magnitude(value: int) -> int:
        """
        Signed turn magnitude of a rotary dial.

        Values above 64 are turns to the left and come back negated relative
        to 64. Values below 64 are turns to the right and pass through. 64
        itself is the zero point.

        Example:
            64 → 0, 65 → -1, 127 → -63, 1 → 1, 0 → 0
        """
        if value >= MAGNITUDE_CENTER:
            return -(value - MAGNITUDE_CENTER)
        return value

    @staticmethod
    def key_state(value: int) -> KeyState:
        """Button state: 0 is released, any other value is pressed."""
        return KeyState.from_value(value)

    def map_control(self, status: int, control: int, value: int) -> Optional[Control]:
        """
        Classify a port B message.

        Args:
            status: Status byte
            control: Data byte 1 (CC number, or note number for pads)
            value: Data byte 2

        Returns:
            The matching Control, or None if no range matches
        """
        if status == STATUS_NOTE_ON:
            if control in PRESSURE_PAD_NOTES:
                octet = self.octet(control, PRESSURE_PAD_NOTES)
                if octet is None:
                    return None
                return PressurePad(octet=octet, level=value)
            return None

        if status != STATUS_CONTROL_CHANGE:
            return None

        if control in ROTARY_DIAL_CCS:
            octet = self.octet(control, ROTARY_DIAL_CCS)
            if octet is None:
                return None
            return RotaryDial(octet=octet, magnitude=self.dial_magnitude(value))

        if control in ROTARY_SLIDER_CCS:
            octet = self.octet(control, ROTARY_SLIDER_CCS)
            if octet is None:
                return None
            return RotarySlider(octet=octet, level=value)

        if control in VERTICAL_SLIDER_CCS:
            octet = self.octet(control, VERTICAL_SLIDER_CCS)
            if octet is None:
                return None
            return VerticalSlider(octet=octet, level=value)

        if control in TOUCH_PAD_CCS:
            return TouchPad(axis=TOUCH_PAD_CCS[control], level=value)

        for row, strip in BUTTON_ROW_CCS:
            if control in strip:
                octet = self.octet(control, strip)
                if octet is None:
                    return None
                return Button(row=row, octet=octet, state=self.key_state(value))

        if control in PAGE_CCS:
            side, direction = PAGE_CCS[control]
            return Page(side=side, direction=direction, state=self.key_state(value))

        if control in LEFT_BUTTON_CCS:
            return LeftButton(button=LEFT_BUTTON_CCS[control], state=self.key_state(value))

        if control in RIGHT_BUTTON_CCS:
            return RightButton(button=RIGHT_BUTTON_CCS[control], state=self.key_state(value))

        if control in PLAYBACK_CCS:
            return Playback(button=PLAYBACK_CCS[control], state=self.key_state(value))

        return None
