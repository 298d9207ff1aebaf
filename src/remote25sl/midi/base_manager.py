"""Base MIDI manager with hot-plug support."""

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, Optional, TypeVar

import mido

logger = logging.getLogger(__name__)

PortType = TypeVar('PortType', bound=mido.ports.BasePort)


class BaseMidiManager(ABC, Generic[PortType]):
    """
    Base MIDI manager with hot-plug support.

    Polls the MIDI backend for a port matching a filter function and
    connects to it, reconnecting when the device is unplugged and plugged
    back in.

    Subclasses implement the port-specific operations.
    """

    def __init__(
        self,
        device_filter: Callable[[str], bool],
        poll_interval: float = 5.0,
    ):
        """
        Initialize MIDI manager.

        Args:
            device_filter: Function that returns True if port name matches desired device
            poll_interval: How often to check for device changes (seconds)
        """
        self._device_filter = device_filter
        self._poll_interval = poll_interval
        self._running = False
        self._stop_event = threading.Event()
        self._monitor_thread: Optional[threading.Thread] = None
        self._port: Optional[PortType] = None
        self._port_lock = threading.Lock()
        self._no_device_warned = False
        self._on_connection_changed: Optional[Callable[[bool, Optional[str]], None]] = None
        self._on_open_failed: Optional[Callable[[str, Exception], None]] = None
        self._last_error: Optional[Exception] = None
        self._failed_port: Optional[str] = None

    @abstractmethod
    def _get_available_ports(self) -> list[str]:
        """Get list of available port names."""

    @abstractmethod
    def _open_port(self, port_name: str) -> PortType:
        """
        Open a MIDI port.

        Raises:
            Exception: If port cannot be opened
        """

    @abstractmethod
    def _get_port_type_name(self) -> str:
        """Human-readable port type name for logging ("input")."""

    def start(self) -> None:
        """Start monitoring for MIDI devices."""
        if self._running:
            logger.warning(f"MIDI {self._get_port_type_name()} manager is already running")
            return

        self._running = True
        self._stop_event.clear()
        self._monitor_thread = threading.Thread(target=self._monitor_devices, daemon=True)
        self._monitor_thread.start()
        logger.debug(f"MIDI {self._get_port_type_name()} manager started")

    def on_connection_changed(self, callback: Callable[[bool, Optional[str]], None]) -> None:
        """
        Register callback for connection state changes.

        Args:
            callback: Function that receives (is_connected, port_name)
        """
        self._on_connection_changed = callback

    def on_open_failed(self, callback: Callable[[str, Exception], None]) -> None:
        """
        Register callback for a matching port that could not be opened.

        Called once per failure streak: retries that fail again on the same
        port are not reported until a different outcome occurs.

        Args:
            callback: Function that receives (port_name, error)
        """
        self._on_open_failed = callback

    def stop(self) -> None:
        """Stop monitoring and close the connection."""
        self._running = False
        self._stop_event.set()

        with self._port_lock:
            if self._port:
                try:
                    self._port.close()
                except Exception as e:
                    logger.error(f"Error closing MIDI {self._get_port_type_name()} port: {e}")
                self._port = None

        if self._monitor_thread and self._monitor_thread.is_alive():
            self._monitor_thread.join(timeout=1.0)

        logger.debug(f"MIDI {self._get_port_type_name()} manager stopped")

    def _find_matching_port(self) -> Optional[str]:
        """Find first available port matching the device filter."""
        matching_ports = [p for p in self._get_available_ports() if self._device_filter(p)]

        return matching_ports[0] if matching_ports else None

    @staticmethod
    def _fire(callback: Optional[Callable], *args) -> None:
        """Run a callback on its own thread so it cannot deadlock the monitor."""
        if not callback:
            return

        def fire_callback():
            try:
                callback(*args)
            except Exception as e:
                logger.error(f"Error in MIDI manager callback: {e}")

        threading.Thread(target=fire_callback, daemon=True).start()

    def _fire_connection_changed(self, connected: bool, port_name: Optional[str]) -> None:
        self._fire(self._on_connection_changed, connected, port_name)

    def _monitor_devices(self) -> None:
        """Monitor for device connection/disconnection."""
        port_type = self._get_port_type_name()
        logger.debug(f"Starting MIDI {port_type} device monitoring")

        while self._running:
            try:
                self._poll_once()
            except Exception as e:
                logger.error(f"Error in MIDI {port_type} monitoring: {e}")

            self._stop_event.wait(self._poll_interval)

    def _poll_once(self) -> None:
        """Check the backend once, dropping a vanished port and connecting a new one."""
        port_type = self._get_port_type_name()
        available_ports = set(self._get_available_ports())

        with self._port_lock:
            if self._port and self._port.name not in available_ports:
                port_name = self._port.name
                logger.warning(f"MIDI {port_type} disconnected: {port_name}")
                try:
                    self._port.close()
                except Exception as e:
                    logger.debug(f"Ignoring error closing vanished port {port_name}: {e}")
                self._port = None
                self._no_device_warned = False
                self._fire_connection_changed(False, None)

            if not self._port:
                port = self._find_matching_port()
                if port:
                    if port != self._failed_port:
                        logger.info(f"MIDI {port_type} detected: {port}")
                    self._connect_to_port(port)
                else:
                    # Unplugged, so a later open failure is a new one
                    self._failed_port = None
                    if not self._no_device_warned:
                        logger.warning(f"No matching MIDI {port_type} device found")
                        self._no_device_warned = True

    def _connect_to_port(self, port_name: str) -> None:
        """
        Connect to a MIDI port.

        Note: Should be called with _port_lock held.
        """
        port_type = self._get_port_type_name()
        try:
            self._port = self._open_port(port_name)
        except Exception as e:
            self._port = None
            self._last_error = e
            if port_name == self._failed_port:
                logger.debug(f"Still unable to connect to {port_name}: {e}")
                return
            logger.error(f"Failed to connect to {port_name}: {e}")
            self._failed_port = port_name
            self._fire(self._on_open_failed, port_name, e)
            return

        self._last_error = None
        self._failed_port = None
        logger.info(f"Connected to MIDI {port_type}: {port_name}")
        self._fire_connection_changed(True, port_name)

    @property
    def last_error(self) -> Optional[Exception]:
        """Error from the most recent failed open, cleared on a successful connect."""
        with self._port_lock:
            return self._last_error

    @property
    def is_connected(self) -> bool:
        """Check if MIDI device is currently connected."""
        with self._port_lock:
            return self._port is not None

    @property
    def current_port(self) -> Optional[str]:
        """Get currently connected port name."""
        with self._port_lock:
            return self._port.name if self._port else None

    def __enter__(self):
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.stop()
