"""Protocol response returned to the fetch pipeline."""

from dataclasses import dataclass
from enum import IntEnum

from .metadata import Metadata

CONTENT_LENGTH = "Content-Length"
LAST_MODIFIED = "Last-Modified"
LOCATION = "Location"
CONTENT_TYPE = "Content-Type"
IS_SITEMAP = "isSitemap"


class StatusCode(IntEnum):
    """HTTP status numbers used to report the outcome of a local fetch."""

    OK = 200
    MULTIPLE_CHOICES = 300
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    NOT_FOUND = 404
    METHOD_FAILURE = 420
    INTERNAL_SERVER_ERROR = 500


@dataclass(frozen=True)
class ProtocolResponse:
    """Finished response: payload, status code and metadata.

    Attributes:
        content: Response body, empty when nothing was read.
        status_code: One of the StatusCode values.
        metadata: The caller's metadata, as updated by the fetch.
    """

    content: bytes
    status_code: int
    metadata: Metadata
