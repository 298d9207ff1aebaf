"""MIDI transport exceptions."""

from typing import Optional

from .base import Remote25SLError


class MidiPortError(Remote25SLError):
    """A MIDI input port could not be opened or listed."""

    def __init__(self, port_name: Optional[str] = None, original_error: Optional[str] = None):
        """
        Initialize MIDI port error.

        Args:
            port_name: Name of the port that failed (None when listing ports failed)
            original_error: The original error message from the MIDI backend
        """
        if port_name:
            user_msg = f"Could not open MIDI input port '{port_name}'."
        else:
            user_msg = "Could not access the MIDI subsystem."

        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recoverable=True,
            recovery_hint=(
                "Check that the ReMOTE 25SL is plugged in and not held by another "
                "application. Run 'remote25sl midi list' to see available ports."
            ),
        )
        self.port_name = port_name
        self.original_error = original_error
