"""
Custom exception hierarchy for remote25sl.

```
Remote25SLError (base)
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
└── MidiPortError
```

The decoder does not raise: unmapped input decodes to ``None``. These
exceptions cover configuration files and the MIDI transport.

All of them provide `user_message`, `technical_message`, `recoverable` and
`recovery_hint`. See `remote25sl.exceptions.handlers` for helpers that
convert library errors into this hierarchy.
"""

from .base import Remote25SLError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    wrap_midi_error,
    wrap_pydantic_error,
)
from .midi import MidiPortError

__all__ = [
    # Base
    "Remote25SLError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # MIDI
    "MidiPortError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_midi_error",
    "wrap_pydantic_error",
]
