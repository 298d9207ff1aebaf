"""CLI commands for remote25sl."""

from .config import config_group
from .decode import decode_command
from .midi import midi_group

__all__ = ["config_group", "decode_command", "midi_group"]
