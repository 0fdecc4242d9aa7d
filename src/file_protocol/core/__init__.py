"""Core components for the file protocol."""

from .metadata import Metadata
from .protocol_response import (
    CONTENT_LENGTH,
    CONTENT_TYPE,
    IS_SITEMAP,
    LAST_MODIFIED,
    LOCATION,
    ProtocolResponse,
    StatusCode,
)
from .date_format import format_date, parse_date
from .locator import LocatorDecodingError, MalformedLocatorError, locator_to_path, to_file_locator
from .sitemap import generate_sitemap
from .file_response import FileResponse

__all__ = [
    "Metadata",
    "ProtocolResponse",
    "StatusCode",
    "CONTENT_LENGTH",
    "CONTENT_TYPE",
    "IS_SITEMAP",
    "LAST_MODIFIED",
    "LOCATION",
    "format_date",
    "parse_date",
    "LocatorDecodingError",
    "MalformedLocatorError",
    "locator_to_path",
    "to_file_locator",
    "generate_sitemap",
    "FileResponse",
]
