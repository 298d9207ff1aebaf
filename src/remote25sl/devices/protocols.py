"""Generic device protocols."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import mido

    from remote25sl.models import Event, InputPort


class DeviceInput(Protocol):
    """Protocol for device input handling."""

    def parse_message(self, port: InputPort, msg: mido.Message) -> Event | None:
        """
        Parse an incoming message received on a device input port.

        Must return None, never raise, for messages the device does not
        define.
        """
        ...
