"""Application configuration model."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from remote25sl.utils.persistence import PydanticPersistence

from .ports import (
    MIDI_INPUT_PORT_A,
    MIDI_INPUT_PORT_B,
    MIDI_INPUT_PORT_C,
    InputPort,
    port_from_name,
)


def default_config_path() -> Path:
    """Location of the config file when none is given."""
    return Path.home() / ".remote25sl" / "config.json"


class PortNames(BaseModel):
    """Binding of MIDI backend port names to the controller's input ports."""

    a: str = Field(
        default=MIDI_INPUT_PORT_A,
        min_length=1,
        description="Port carrying keyboard notes and the pitch/mod wheels",
    )
    b: str = Field(
        default=MIDI_INPUT_PORT_B,
        min_length=1,
        description="Port carrying dials, sliders, pads and buttons",
    )
    c: str = Field(
        default=MIDI_INPUT_PORT_C,
        min_length=1,
        description="Port carrying preset load notifications",
    )

    @model_validator(mode="after")
    def check_distinct(self) -> "PortNames":
        """Each port must be bound to a different name."""
        if len({self.a, self.b, self.c}) != 3:
            raise ValueError("port names must be distinct")
        return self

    def as_mapping(self) -> dict[InputPort, str]:
        """Port binding as a mapping usable by port_from_name."""
        return {InputPort.A: self.a, InputPort.B: self.b, InputPort.C: self.c}

    def name_for(self, port: InputPort) -> str:
        """MIDI port name bound to the given input port."""
        return self.as_mapping()[port]

    def lookup(self, name: str) -> Optional[InputPort]:
        """Resolve a MIDI port name using this binding (exact match)."""
        return port_from_name(name, self.as_mapping())


class AppConfig(BaseModel):
    """Application configuration and settings."""

    port_names: PortNames = Field(
        default_factory=PortNames,
        description="MIDI port names for the controller's three input ports",
    )

    midi_poll_interval: float = Field(
        default=2.0,
        gt=0,
        description="How often to check for MIDI device changes (seconds)",
    )

    @classmethod
    def load_or_default(cls, path: Optional[Path] = None) -> "AppConfig":
        """
        Load config from file or return defaults if the file is missing.

        Args:
            path: Path to config file. If None, uses ~/.remote25sl/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = default_config_path()
        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to file."""
        if path is None:
            path = default_config_path()
        PydanticPersistence.save_json(self, path)
