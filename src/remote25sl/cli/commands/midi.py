"""MIDI command implementations."""

import logging
import queue
from datetime import datetime
from typing import Optional

import click

from remote25sl.devices import Remote25SLController
from remote25sl.exceptions import (
    ErrorContext,
    MidiPortError,
    format_error_for_display,
    wrap_midi_error,
)
from remote25sl.midi import MidiInputManager
from remote25sl.models import Event, InputPort

from .common import exit_with_error, load_config

logger = logging.getLogger(__name__)


@click.group(name="midi")
def midi_group():
    """MIDI device commands."""
    pass


@midi_group.command(name="list")
@click.pass_context
def list_midi(ctx):
    """List MIDI input ports and which ReMOTE 25SL port each is bound to."""
    config = load_config(ctx)

    try:
        ports = MidiInputManager.list_ports()
    except Exception as e:
        exit_with_error(wrap_midi_error(e))

    click.echo("MIDI Input Ports:\n")
    if not ports:
        click.echo("  No MIDI input ports found.")
    else:
        for i, name in enumerate(ports):
            port = config.port_names.lookup(name)
            binding = f"  -> port {port.name} ({port.description})" if port else ""
            click.echo(f"  [{i}] {name}{binding}")

    missing = [
        port for port in InputPort if config.port_names.name_for(port) not in ports
    ]
    if missing:
        click.echo("\nNot found:")
        for port in missing:
            click.echo(f"  port {port.name}: {config.port_names.name_for(port)}")


class _ConnectionPrinter:
    """Prints connection changes while monitoring."""

    def on_controller_event(self, port: InputPort, event: Event) -> None:
        pass

    def on_connection_changed(
        self, port: InputPort, connected: bool, port_name: Optional[str]
    ) -> None:
        if connected:
            click.echo(f"* port {port.name} connected: {port_name}")
        else:
            click.echo(f"* port {port.name} disconnected")

    def on_port_error(self, port: InputPort, error: MidiPortError) -> None:
        # Keep monitoring: the port is retried and may open later
        user_message, recovery_hint = format_error_for_display(error)
        click.echo(f"ERROR: port {port.name}: {user_message}", err=True)
        if recovery_hint:
            click.echo(recovery_hint, err=True)


@midi_group.command(name="monitor")
@click.option("--json", "as_json", is_flag=True, help="Print events as JSON")
@click.pass_context
def monitor_midi(ctx, as_json: bool):
    """
    Print decoded ReMOTE 25SL events as they arrive.

    Connects to the three controller ports (reconnecting if the device is
    unplugged) and prints one line per decoded event. Messages that do not
    decode are logged at DEBUG level (-vv).

    Press Ctrl+C to stop.
    """
    config = load_config(ctx)
    events: "queue.Queue[tuple[InputPort, Event]]" = queue.Queue()
    controller = Remote25SLController(config=config, event_queue=events)
    controller.register_observer(_ConnectionPrinter())

    click.echo("Waiting for ReMOTE 25SL ports:")
    for port in InputPort:
        click.echo(f"  {port.name}: {config.port_names.name_for(port)}")
    click.echo("\nPress Ctrl+C to stop\n")

    controller.start()

    try:
        while True:
            try:
                port, event = events.get(timeout=0.1)
            except queue.Empty:
                continue

            timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
            text = event.model_dump_json() if as_json else str(event)
            click.echo(f"[{timestamp}] {port.name}: {text}")

    except KeyboardInterrupt:
        click.echo("\n\nStopping monitor...")

    finally:
        with ErrorContext("stop ReMOTE 25SL controller", logger_instance=logger, re_raise=False):
            controller.stop()
