"""Protocol definitions for consumers of decoded controller input."""

from .observers import ControllerObserver

__all__ = ["ControllerObserver"]
