"""Hot-plug manager for one MIDI input port."""

import logging
from collections.abc import Callable

import mido

from .base_manager import BaseMidiManager

logger = logging.getLogger(__name__)


class MidiInputManager(BaseMidiManager[mido.ports.BaseInput]):
    """
    Keeps one mido input port open and hands its messages to a callback.

    The port is opened with a mido callback, so messages arrive on the
    backend's I/O thread rather than being polled.
    """

    def __init__(self, device_filter: Callable[[str], bool], poll_interval: float = 5.0):
        super().__init__(device_filter, poll_interval)
        self._message_callback: Callable[[mido.Message], None] | None = None

    @staticmethod
    def list_ports() -> list[str]:
        """Input port names currently reported by the mido backend."""
        return mido.get_input_names()

    def on_message(self, callback: Callable[[mido.Message], None]) -> None:
        """Set the receiver for messages from the open port (runs on mido's thread)."""
        self._message_callback = callback

    def _get_available_ports(self) -> list[str]:
        return self.list_ports()

    def _open_port(self, port_name: str) -> mido.ports.BaseInput:
        return mido.open_input(port_name, callback=self._midi_callback)

    def _get_port_type_name(self) -> str:
        return "input"

    def _midi_callback(self, msg: mido.Message) -> None:
        # An exception here would end up inside the backend thread
        callback = self._message_callback
        if callback is None:
            return
        try:
            callback(msg)
        except Exception as e:
            logger.error(f"Error handling MIDI message {msg}: {e}")
