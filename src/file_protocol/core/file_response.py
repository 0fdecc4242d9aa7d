"""FileResponse - resolves a file locator into a protocol response."""

import logging

from ..config import Config
from ..interfaces.filesystem import Filesystem
from .date_format import format_date
from .locator import locator_to_path, to_file_locator
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
from .sitemap import generate_sitemap

logger = logging.getLogger(__name__)

MAX_CONTENT_SIZE = 2**31 - 1


class FileResponse:
    """Response for a single file locator, computed on construction.

    Missing, unreadable and unsupported targets are reported through the
    status code, never raised. Non-canonical paths (symlinks, "." or ".."
    segments) get a MULTIPLE_CHOICES redirect to the canonical locator.
    Directories become sitemap listings.

    The caller's metadata is updated in place. The keys it may receive
    are Content-Length, Last-Modified, Location, Content-Type and
    isSitemap.
    """

    def __init__(
        self,
        url: str,
        metadata: Metadata,
        config: Config,
        filesystem: Filesystem,
    ):
        """
        Resolve a locator against the filesystem.

        Args:
            url: Locator such as "file:/tmp/file.txt".
            metadata: Caller metadata, updated in place.
            config: Encoding and listing settings.
            filesystem: Filesystem to resolve against.

        Raises:
            MalformedLocatorError: If url is not a URL.
            LocatorDecodingError: If the path cannot be decoded.
        """
        self.url = url
        self.metadata = metadata
        self.config = config
        self.filesystem = filesystem
        self.content: bytes | None = None
        self.status_code = StatusCode.OK

        self._resolve(locator_to_path(url, config.encoding))

        if self.content is None:
            self.content = b""

    def to_protocol_response(self) -> ProtocolResponse:
        """Wrap the resolved content, status and metadata."""
        return ProtocolResponse(self.content, self.status_code, self.metadata)

    def _resolve(self, path: str) -> None:
        fs = self.filesystem

        if not fs.exists(path):
            logger.debug(f"Not found: {path}")
            self.status_code = StatusCode.NOT_FOUND
            return

        if not fs.is_readable(path):
            logger.debug(f"Not readable: {path}")
            self.status_code = StatusCode.UNAUTHORIZED
            return

        try:
            canonical = fs.canonicalize(path)
        except OSError as e:
            logger.error(f"Cannot canonicalize {path}: {e}")
            self.status_code = StatusCode.INTERNAL_SERVER_ERROR
            return

        if canonical != path:
            location = to_file_locator(canonical, is_dir=fs.is_dir(canonical))
            logger.debug(f"Redirecting {path} to {location}")
            self.metadata.set_value(LOCATION, location)
            self.status_code = StatusCode.MULTIPLE_CHOICES
            return

        if fs.is_dir(path):
            self._get_dir_as_response(path)
        elif fs.is_file(path):
            self._get_file_as_response(path)
        else:
            logger.warning(f"Neither a file nor a directory: {path}")
            self.status_code = StatusCode.INTERNAL_SERVER_ERROR

    def _get_file_as_response(self, path: str) -> None:
        try:
            size = self.filesystem.size(path)
        except OSError:
            logger.exception(f"Exception while reading size of {path}")
            self.status_code = StatusCode.METHOD_FAILURE
            return

        if size > MAX_CONTENT_SIZE:
            logger.warning(f"File too large to fetch ({size} bytes): {path}")
            self.status_code = StatusCode.BAD_REQUEST
            return

        try:
            self.content = self.filesystem.read_bytes(path, size)
        except (OSError, ValueError):
            logger.exception(f"Exception while fetching file response {path}")
            self.status_code = StatusCode.METHOD_FAILURE
            return

        self.metadata.set_value(CONTENT_LENGTH, str(size))
        self.metadata.set_value(
            LAST_MODIFIED, format_date(self.filesystem.last_modified(path))
        )
        self.status_code = StatusCode.OK

    def _get_dir_as_response(self, path: str) -> None:
        try:
            self.content = generate_sitemap(
                path, self.filesystem, self.config.crawl_parent
            )
        except OSError:
            logger.exception(f"Exception while listing directory {path}")
            self.status_code = StatusCode.METHOD_FAILURE
            return

        self.metadata.set_value(CONTENT_TYPE, "application/xml")
        self.metadata.set_value(IS_SITEMAP, "true")
        self.status_code = StatusCode.OK
