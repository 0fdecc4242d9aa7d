"""Abstract interfaces for the file protocol."""

from .filesystem import Filesystem
from .protocol import Protocol

__all__ = ["Filesystem", "Protocol"]
