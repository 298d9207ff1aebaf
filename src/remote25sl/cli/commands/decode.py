"""Offline decoding of raw MIDI bytes."""

import click

from remote25sl.devices import decode
from remote25sl.models import InputPort

from .common import BYTE


@click.command(name="decode")
@click.argument("port", type=click.Choice(["A", "B", "C"], case_sensitive=False))
@click.argument("data", nargs=-1, required=True, type=BYTE)
@click.option("--json", "as_json", is_flag=True, help="Print the event as JSON")
def decode_command(port: str, data: tuple[int, ...], as_json: bool):
    """
    Decode a raw MIDI message as if received on PORT.

    DATA is the message bytes, in decimal or 0x-prefixed hex.

    \b
    Examples:
      remote25sl decode A 144 60 100     # middle key pressed
      remote25sl decode B 0xB0 0x38 65   # dial 1 turned left
    """
    event = decode(InputPort(port.lower()), data)

    if event is None:
        click.echo("no match")
    elif as_json:
        click.echo(event.model_dump_json())
    else:
        click.echo(str(event))
