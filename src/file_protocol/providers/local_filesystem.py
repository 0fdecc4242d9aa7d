"""Filesystem implementation backed by the local operating system."""

import os
from pathlib import Path

from ..interfaces.filesystem import Filesystem


class LocalFilesystem(Filesystem):
    """Filesystem that answers queries against the real local disk.

    Canonical paths resolve symlinks and "." / ".." segments with
    Path.resolve(strict=True). On case-insensitive filesystems the case of the
    existing entries is not recovered, so only the symlink and segment
    differences produce a different canonical path.
    """

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_readable(self, path: str) -> bool:
        return os.access(path, os.R_OK)

    def canonicalize(self, path: str) -> str:
        """
        Resolve a path to its canonical absolute form.

        Args:
            path: Path to resolve.

        Returns:
            Absolute path with all symlinks and relative segments resolved.

        Raises:
            OSError: If the path or one of its components cannot be resolved.
        """
        return str(Path(path).resolve(strict=True))

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def size(self, path: str) -> int:
        return os.stat(path).st_size

    def last_modified(self, path: str) -> int:
        try:
            return os.stat(path).st_mtime_ns // 1_000_000
        except OSError:
            # Dangling symlinks and entries removed mid-listing
            return 0

    def list_dir(self, path: str) -> list[str]:
        """
        List a directory's children.

        Entries come back in the order the operating system enumerates
        them; no sorting is applied.

        Args:
            path: Directory path.

        Returns:
            Paths of the children, each joined onto path.
        """
        with os.scandir(path) as entries:
            return [os.path.join(path, entry.name) for entry in entries]

    def parent(self, path: str) -> str | None:
        parent = os.path.dirname(path)
        if not parent or parent == path:
            return None
        return parent

    def read_bytes(self, path: str, size: int) -> bytes:
        """
        Read a whole file, checking it still has the expected size.

        Args:
            path: File path.
            size: Expected number of bytes.

        Returns:
            The file content.

        Raises:
            ValueError: If size is negative.
            OSError: If the file cannot be read or its length changed.
        """
        if size < 0:
            raise ValueError(f"Size must be non-negative: {size}")

        with open(path, "rb") as f:
            data = f.read(size)
            if len(data) != size:
                raise OSError(f"Unexpected read size, read {len(data)} of {size} bytes: {path}")

        return data
