"""Abstract interface for fetch protocols."""

from abc import ABC, abstractmethod

from ..config import Config
from ..core.metadata import Metadata
from ..core.protocol_response import ProtocolResponse


class Protocol(ABC):
    """Abstract interface for fetching a URL as a protocol response."""

    @abstractmethod
    def configure(self, config: Config) -> None:
        """Apply configuration settings."""
        pass

    @abstractmethod
    def get_protocol_output(
        self, url: str, metadata: Metadata | None = None
    ) -> ProtocolResponse:
        """
        Fetch a URL.

        Args:
            url: The URL to fetch.
            metadata: Caller metadata, updated in place with response values.

        Returns:
            The protocol response.
        """
        pass

    def cleanup(self) -> None:
        """Release any resources held by the protocol."""
        pass
