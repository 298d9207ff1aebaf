"""Observer protocols for decoded controller input."""

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from remote25sl.exceptions import MidiPortError
    from remote25sl.models import Event, InputPort


@runtime_checkable
class ControllerObserver(Protocol):
    """
    Observer that receives decoded ReMOTE 25SL events.

    Note:
        Both methods are called from MIDI backend threads, so implementations
        should be thread-safe and avoid blocking operations.
    """

    def on_controller_event(self, port: "InputPort", event: "Event") -> None:
        """
        Handle a decoded event.

        Args:
            port: Input port the message arrived on
            event: The decoded event
        """
        ...

    def on_connection_changed(
        self, port: "InputPort", connected: bool, port_name: Optional[str]
    ) -> None:
        """
        Handle an input port being connected or disconnected.

        Args:
            port: The affected input port
            connected: True when the port was opened, False when it vanished
            port_name: MIDI port name when connected, None otherwise
        """
        ...

    def on_port_error(self, port: "InputPort", error: "MidiPortError") -> None:
        """
        Handle an input port that was found but could not be opened.

        Reported once per failure; the port keeps being retried and a later
        success arrives through on_connection_changed.

        Args:
            port: The affected input port
            error: Why the port could not be opened
        """
        ...
