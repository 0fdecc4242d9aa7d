"""FileProtocol - fetches file locators for the crawl pipeline."""

import logging

from .config import Config
from .core import FileResponse, Metadata, ProtocolResponse
from .interfaces import Filesystem, Protocol
from .providers import LocalFilesystem

logger = logging.getLogger(__name__)


class FileProtocol(Protocol):
    """Protocol implementation for local files and directories.

    Holds the configuration and filesystem shared by all fetches. Each
    call to get_protocol_output is independent, so one instance can
    serve many threads.
    """

    def __init__(
        self,
        config: Config | None = None,
        filesystem: Filesystem | None = None,
    ):
        """
        Initialize the protocol.

        Args:
            config: Protocol configuration (uses defaults if None).
            filesystem: Filesystem to read from (local disk if None).
        """
        self.config = config or Config()
        self.filesystem = filesystem or LocalFilesystem()

    @property
    def encoding(self) -> str:
        return self.config.encoding

    @property
    def crawl_parent(self) -> bool:
        return self.config.crawl_parent

    def configure(self, config: Config) -> None:
        self.config = config
        logger.debug(
            f"Configured file protocol: encoding={config.encoding}, "
            f"crawl_parent={config.crawl_parent}"
        )

    def get_protocol_output(
        self, url: str, metadata: Metadata | None = None
    ) -> ProtocolResponse:
        """
        Fetch a file locator.

        Args:
            url: Locator such as "file:/tmp/file.txt".
            metadata: Caller metadata, updated in place (new one if None).

        Returns:
            The protocol response.

        Raises:
            MalformedLocatorError: If url is not a URL.
            LocatorDecodingError: If the path cannot be decoded.
        """
        if metadata is None:
            metadata = Metadata()

        response = FileResponse(url, metadata, self.config, self.filesystem)
        logger.info(f"Fetched {url}: {response.status_code}")
        return response.to_protocol_response()
