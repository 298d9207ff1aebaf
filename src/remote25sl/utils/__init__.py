"""Generic utility modules for remote25sl."""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
