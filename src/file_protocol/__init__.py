"""Fetch local files and directories as HTTP-shaped protocol responses."""

from .config import Config, load_config
from .core import (
    FileResponse,
    LocatorDecodingError,
    MalformedLocatorError,
    Metadata,
    ProtocolResponse,
    StatusCode,
)
from .protocol import FileProtocol

__all__ = [
    "Config",
    "load_config",
    "FileProtocol",
    "FileResponse",
    "LocatorDecodingError",
    "MalformedLocatorError",
    "Metadata",
    "ProtocolResponse",
    "StatusCode",
]
