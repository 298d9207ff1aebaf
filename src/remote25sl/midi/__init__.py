"""MIDI transport - hot-plug input port management."""

from .base_manager import BaseMidiManager
from .input_manager import MidiInputManager

__all__ = ["BaseMidiManager", "MidiInputManager"]
