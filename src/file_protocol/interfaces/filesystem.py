"""Abstract interface for filesystem access."""

from abc import ABC, abstractmethod


class Filesystem(ABC):
    """Abstract interface for the filesystem queries a file fetch needs.

    Paths are plain absolute path strings. Implementations decide how
    canonical paths are computed (symlinks, case folding).
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a path exists."""
        pass

    @abstractmethod
    def is_readable(self, path: str) -> bool:
        """Check if the current process may read a path."""
        pass

    @abstractmethod
    def canonicalize(self, path: str) -> str:
        """Return the canonical form of a path.

        Raises:
            OSError: If the canonical form cannot be determined.
        """
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""
        pass

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Check if a path is a regular file."""
        pass

    @abstractmethod
    def size(self, path: str) -> int:
        """Return the size of a file in bytes."""
        pass

    @abstractmethod
    def last_modified(self, path: str) -> int:
        """Return the modification time in milliseconds since the epoch.

        Returns 0 when the time cannot be determined.
        """
        pass

    @abstractmethod
    def list_dir(self, path: str) -> list[str]:
        """List the paths of a directory's children in enumeration order."""
        pass

    @abstractmethod
    def parent(self, path: str) -> str | None:
        """Return the parent directory path, or None for a root."""
        pass

    @abstractmethod
    def read_bytes(self, path: str, size: int) -> bytes:
        """Read exactly size bytes from a file.

        Raises:
            OSError: If the file cannot be read or its length differs from size.
        """
        pass
