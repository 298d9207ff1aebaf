"""ReMOTE 25SL controller."""

import logging
import queue
from collections.abc import Callable
from typing import Optional

import mido

from remote25sl.exceptions import MidiPortError, wrap_midi_error
from remote25sl.midi import MidiInputManager
from remote25sl.models import AppConfig, Event, InputPort
from remote25sl.protocols import ControllerObserver

from .input import Remote25SLInput

logger = logging.getLogger(__name__)


class Remote25SLController:
    """
    High-level ReMOTE 25SL controller.

    Opens one hot-plug MidiInputManager per input port (A, B and C), decodes
    every received message with the port it arrived on, and hands the
    resulting events to registered observers and, if given, to a queue as
    ``(port, event)`` tuples.

    Messages from one port are delivered in the order mido receives them.
    Messages from different ports arrive on different backend threads and
    have no ordering between them.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        event_queue: Optional["queue.Queue[tuple[InputPort, Event]]"] = None,
    ):
        """
        Initialize controller.

        Args:
            config: Application config providing port names and poll interval
            event_queue: Optional queue receiving (port, event) tuples
        """
        self._config = config or AppConfig()
        self._input = Remote25SLInput()
        self._queue = event_queue
        self._observers: list[ControllerObserver] = []
        self._managers: dict[InputPort, MidiInputManager] = {}
        self._port_errors: dict[InputPort, MidiPortError] = {}

        for port in InputPort:
            port_name = self._config.port_names.name_for(port)
            manager = MidiInputManager(
                device_filter=self._make_filter(port_name),
                poll_interval=self._config.midi_poll_interval,
            )
            manager.on_message(self._make_message_handler(port))
            manager.on_connection_changed(self._make_connection_handler(port))
            manager.on_open_failed(self._make_open_failed_handler(port))
            self._managers[port] = manager

    @staticmethod
    def _make_filter(port_name: str) -> Callable[[str], bool]:
        return lambda name: name == port_name

    def _make_message_handler(self, port: InputPort) -> Callable[[mido.Message], None]:
        def handler(msg: mido.Message) -> None:
            self.handle_message(port, msg)
        return handler

    def _make_connection_handler(
        self, port: InputPort
    ) -> Callable[[bool, Optional[str]], None]:
        def handler(connected: bool, port_name: Optional[str]) -> None:
            self._handle_connection_changed(port, connected, port_name)
        return handler

    def _make_open_failed_handler(self, port: InputPort) -> Callable[[str, Exception], None]:
        def handler(port_name: str, error: Exception) -> None:
            self._handle_open_failed(port, port_name, error)
        return handler

    def register_observer(self, observer: ControllerObserver) -> None:
        """Register observer for decoded events."""
        if observer not in self._observers:
            self._observers.append(observer)
            logger.debug(f"Registered controller observer: {observer}")

    def unregister_observer(self, observer: ControllerObserver) -> None:
        """Unregister observer."""
        if observer in self._observers:
            self._observers.remove(observer)
            logger.debug(f"Unregistered controller observer: {observer}")

    def handle_message(self, port: InputPort, msg: mido.Message) -> Optional[Event]:
        """
        Decode a message received on a port and dispatch the result.

        Args:
            port: Input port the message arrived on
            msg: MIDI message

        Returns:
            The decoded event, or None if the message was not recognized
        """
        event = self._input.parse_message(port, msg)
        if event is None:
            logger.debug(f"No event for message on port {port.name}: {msg}")
            return None

        if self._queue is not None:
            self._queue.put((port, event))

        for observer in list(self._observers):
            try:
                observer.on_controller_event(port, event)
            except Exception as e:
                logger.error(f"Error notifying controller observer {observer}: {e}")

        return event

    def _handle_connection_changed(
        self, port: InputPort, connected: bool, port_name: Optional[str]
    ) -> None:
        if connected:
            self._port_errors.pop(port, None)
            logger.info(f"ReMOTE 25SL port {port.name} connected: {port_name}")
        else:
            logger.info(f"ReMOTE 25SL port {port.name} disconnected")

        for observer in list(self._observers):
            try:
                observer.on_connection_changed(port, connected, port_name)
            except Exception as e:
                logger.error(f"Error notifying controller observer {observer}: {e}")

    def _handle_open_failed(self, port: InputPort, port_name: str, error: Exception) -> None:
        port_error = wrap_midi_error(error, port_name)
        self._port_errors[port] = port_error

        for observer in list(self._observers):
            try:
                observer.on_port_error(port, port_error)
            except Exception as e:
                logger.error(f"Error notifying controller observer {observer}: {e}")

    def start(self) -> None:
        """Start monitoring all three input ports."""
        for manager in self._managers.values():
            manager.start()
        logger.info("ReMOTE 25SL controller started")

    def stop(self) -> None:
        """Stop monitoring and close all ports."""
        for manager in self._managers.values():
            manager.stop()
        logger.info("ReMOTE 25SL controller stopped")

    @property
    def connected_ports(self) -> list[InputPort]:
        """Input ports that currently have an open MIDI connection."""
        return [port for port, manager in self._managers.items() if manager.is_connected]

    @property
    def is_connected(self) -> bool:
        """True if at least one input port is connected."""
        return bool(self.connected_ports)

    @property
    def port_errors(self) -> dict[InputPort, MidiPortError]:
        """Ports whose MIDI port was found but could not be opened, with the reason."""
        return dict(self._port_errors)

    def __enter__(self):
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.stop()
