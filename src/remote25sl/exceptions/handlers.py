"""
Error handling utilities.

Errors are translated as they travel up the layers:

```
CLI            formats user_message and recovery_hint, logs technical details
   ^
   |  Remote25SLError
   |
services       config loading, controller start-up
   ^
   |  ValidationError, OSError, backend errors
   |
low level      pydantic, mido / rtmidi, file I/O
```

| Scenario | Use This |
|----------|----------|
| Config file fails pydantic validation | `wrap_pydantic_error(e, path)` |
| MIDI backend fails to open a port | `wrap_midi_error(e, port_name)` |
| Show an error on the command line | `format_error_for_display(e)` |
| Critical section with auto-logging | `with ErrorContext("open ports"): ...` |
"""

import logging
from typing import Optional

from .base import Remote25SLError
from .config import ConfigFileInvalidError, ConfigValidationError
from .midi import MidiPortError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("start controller", re_raise=False) as ctx:
            controller.start()

        if ctx.error:
            print(f"Failed: {ctx.error}")
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self):
        """Enter the context."""
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the context and handle any exceptions.

        Returns:
            True if exception should be suppressed, False otherwise
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, Remote25SLError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)

        return not self.re_raise


def wrap_pydantic_error(error: Exception, file_path: str) -> Remote25SLError:
    """
    Convert Pydantic validation errors to remote25sl exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Invalid JSON surfaces as a json_invalid validation error in Pydantic v2
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ())) or "unknown"
            return ConfigValidationError(
                field=field,
                value=first_error.get('input', None),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ())) or "unknown"
                msg = err.get('msg', 'validation failed')
                error_lines.append(f"  - {field}: {msg}")

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=f"{len(errors)} validation errors:\n" + "\n".join(error_lines),
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def wrap_midi_error(error: Exception, port_name: Optional[str] = None) -> MidiPortError:
    """
    Convert low-level MIDI backend errors to MidiPortError.

    Args:
        error: The original exception raised by mido or its backend
        port_name: The port involved in the error, if any

    Returns:
        MidiPortError carrying the original message
    """
    if isinstance(error, MidiPortError):
        return error
    return MidiPortError(port_name=port_name, original_error=str(error))


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, Remote25SLError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
