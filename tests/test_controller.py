"""Tests for Remote25SLController."""

import queue
import time
from unittest.mock import MagicMock, Mock, patch

import mido
import pytest

from remote25sl.devices import Remote25SLController
from remote25sl.exceptions import MidiPortError
from remote25sl.models import (
    AppConfig,
    InputPort,
    KeyEvent,
    Mod,
    PortNames,
)
from remote25sl.protocols import ControllerObserver


@pytest.fixture
def controller():
    return Remote25SLController(AppConfig(midi_poll_interval=0.05))


@pytest.mark.unit
class TestObservers:
    """Test observer registration and dispatch."""

    def test_observer_registration(self, controller):
        observer = Mock(spec=ControllerObserver)

        controller.register_observer(observer)
        controller.register_observer(observer)
        assert controller._observers == [observer]

        controller.unregister_observer(observer)
        assert observer not in controller._observers

    def test_dispatch_decoded_event(self, controller):
        observer = Mock(spec=ControllerObserver)
        controller.register_observer(observer)

        event = controller.handle_message(
            InputPort.A, mido.Message("control_change", control=1, value=20)
        )

        assert event == Mod(level=20).to_event()
        observer.on_controller_event.assert_called_once_with(InputPort.A, event)

    def test_unrecognized_message_not_dispatched(self, controller):
        observer = Mock(spec=ControllerObserver)
        controller.register_observer(observer)

        event = controller.handle_message(
            InputPort.C, mido.Message("control_change", control=1, value=20)
        )

        assert event is None
        observer.on_controller_event.assert_not_called()

    def test_failing_observer_does_not_block_others(self, controller):
        failing = Mock(spec=ControllerObserver)
        failing.on_controller_event.side_effect = RuntimeError("boom")
        healthy = Mock(spec=ControllerObserver)
        controller.register_observer(failing)
        controller.register_observer(healthy)

        controller.handle_message(InputPort.A, mido.Message("note_on", note=60, velocity=1))

        healthy.on_controller_event.assert_called_once()

    def test_connection_changes_forwarded(self, controller):
        observer = Mock(spec=ControllerObserver)
        controller.register_observer(observer)

        controller._handle_connection_changed(InputPort.B, True, "ReMOTE SL 24:1")
        controller._handle_connection_changed(InputPort.B, False, None)

        observer.on_connection_changed.assert_any_call(InputPort.B, True, "ReMOTE SL 24:1")
        observer.on_connection_changed.assert_any_call(InputPort.B, False, None)

    def test_observer_protocol_runtime_check(self):
        class Printer:
            def on_controller_event(self, port, event):
                pass

            def on_connection_changed(self, port, connected, port_name):
                pass

            def on_port_error(self, port, error):
                pass

        assert isinstance(Printer(), ControllerObserver)


@pytest.mark.unit
class TestQueue:
    """Test queue delivery."""

    def test_events_put_on_queue(self):
        events = queue.Queue()
        controller = Remote25SLController(event_queue=events)

        controller.handle_message(InputPort.A, mido.Message("note_on", note=60, velocity=9))
        controller.handle_message(InputPort.B, mido.Message("clock"))
        controller.handle_message(InputPort.B, mido.Message("control_change", control=68, value=3))

        port, event = events.get_nowait()
        assert port == InputPort.A
        assert isinstance(event, KeyEvent)

        port, event = events.get_nowait()
        assert port == InputPort.B
        assert event.control.kind == "touch_pad"

        assert events.empty()

    def test_order_preserved_per_port(self):
        events = queue.Queue()
        controller = Remote25SLController(event_queue=events)

        for value in range(10):
            controller.handle_message(
                InputPort.A, mido.Message("control_change", control=1, value=value)
            )

        levels = [events.get_nowait()[1].control.level for _ in range(10)]
        assert levels == list(range(10))


@pytest.mark.unit
class TestManagers:
    """Test per-port MIDI managers."""

    def test_one_manager_per_port(self, controller):
        assert set(controller._managers) == set(InputPort)

    def test_filters_use_configured_names(self):
        config = AppConfig(port_names=PortNames(a="Keys", b="Surface", c="Presets"))
        controller = Remote25SLController(config)

        surface_filter = controller._managers[InputPort.B]._device_filter
        assert surface_filter("Surface")
        assert not surface_filter("Keys")
        assert not surface_filter("ReMOTE SL 24:1")

    def test_poll_interval_from_config(self, controller):
        for manager in controller._managers.values():
            assert manager._poll_interval == 0.05

    def test_message_routed_with_port(self, controller):
        """A manager's message callback decodes with the port it serves."""
        observer = Mock(spec=ControllerObserver)
        controller.register_observer(observer)

        msg = mido.Message("control_change", control=1, value=5)
        controller._managers[InputPort.A]._midi_callback(msg)
        controller._managers[InputPort.B]._midi_callback(msg)

        observer.on_controller_event.assert_called_once_with(
            InputPort.A, Mod(level=5).to_event()
        )

    def test_not_connected_initially(self, controller):
        assert controller.connected_ports == []
        assert not controller.is_connected


@pytest.mark.integration
class TestLifecycle:
    """Start, stop and hot-plug through the managers."""

    @patch('remote25sl.midi.input_manager.mido.get_input_names')
    def test_start_stop(self, mock_get_input, controller):
        mock_get_input.return_value = []

        controller.start()
        time.sleep(0.05)
        assert all(m._running for m in controller._managers.values())

        controller.stop()
        assert not any(m._running for m in controller._managers.values())

    @patch('remote25sl.midi.input_manager.mido.open_input')
    @patch('remote25sl.midi.input_manager.mido.get_input_names')
    def test_context_manager_connects(self, mock_get_input, mock_open, controller):
        def open_port(name, callback=None):
            port = MagicMock()
            port.name = name
            return port

        mock_get_input.return_value = ["ReMOTE SL 24:0", "ReMOTE SL 24:1"]
        mock_open.side_effect = open_port

        with controller:
            deadline = time.time() + 1.0
            while len(controller.connected_ports) < 2 and time.time() < deadline:
                time.sleep(0.01)
            assert set(controller.connected_ports) == {InputPort.A, InputPort.B}
            assert controller.is_connected

        assert controller.connected_ports == []


@pytest.mark.unit
class TestPortErrors:
    """Ports that are found but cannot be opened."""

    def test_open_failure_becomes_port_error(self, controller):
        observer = Mock(spec=ControllerObserver)
        controller.register_observer(observer)

        controller._handle_open_failed(InputPort.B, "ReMOTE SL 24:1", OSError("port busy"))

        error = controller.port_errors[InputPort.B]
        assert isinstance(error, MidiPortError)
        assert error.port_name == "ReMOTE SL 24:1"
        assert error.original_error == "port busy"
        observer.on_port_error.assert_called_once_with(InputPort.B, error)

    def test_connect_clears_port_error(self, controller):
        controller._handle_open_failed(InputPort.A, "ReMOTE SL 24:0", OSError("port busy"))
        controller._handle_connection_changed(InputPort.A, True, "ReMOTE SL 24:0")
        assert controller.port_errors == {}

    def test_failing_observer_isolated(self, controller):
        failing = Mock(spec=ControllerObserver)
        failing.on_port_error.side_effect = RuntimeError("boom")
        healthy = Mock(spec=ControllerObserver)
        controller.register_observer(failing)
        controller.register_observer(healthy)

        controller._handle_open_failed(InputPort.C, "ReMOTE SL 24:2", OSError("busy"))

        healthy.on_port_error.assert_called_once()


@pytest.mark.integration
class TestPortOpenFailure:
    """An unopenable port surfaces as a MidiPortError through the managers."""

    @patch('remote25sl.midi.input_manager.mido.open_input')
    @patch('remote25sl.midi.input_manager.mido.get_input_names')
    def test_busy_port_reported(self, mock_get_input, mock_open, controller):
        mock_get_input.return_value = ["ReMOTE SL 24:1"]
        mock_open.side_effect = OSError("port busy")
        observer = Mock(spec=ControllerObserver)
        controller.register_observer(observer)

        with controller:
            deadline = time.time() + 1.0
            while InputPort.B not in controller.port_errors and time.time() < deadline:
                time.sleep(0.01)
            # Several polls at 0.05s, still one report
            time.sleep(0.2)

            assert controller.connected_ports == []
            error = controller.port_errors[InputPort.B]
            assert error.port_name == "ReMOTE SL 24:1"
            assert "port busy" in error.technical_message

        observer.on_port_error.assert_called_once_with(InputPort.B, error)
        assert mock_open.call_count > 1
