"""Pytest configuration and fixtures."""

import os
import posixpath
import pytest
import tempfile
from dataclasses import dataclass
from pathlib import Path

from file_protocol.interfaces import Filesystem

# 2021-01-01 00:00:00 UTC
FIXED_MTIME_MS = 1609459200000
FIXED_DATE = "Fri, 01 Jan 2021 00:00:00 GMT"


@dataclass
class FakeEntry:
    """An entry in the fake filesystem."""

    kind: str = "file"
    content: bytes = b""
    size: int | None = None
    readable: bool = True
    mtime: int = FIXED_MTIME_MS
    canonical: str | None = None
    read_error: Exception | None = None


class FakeFilesystem(Filesystem):
    """In-memory filesystem with scriptable permissions and canonical paths.

    Children are listed in the order they were added.
    """

    def __init__(self):
        self.entries: dict[str, FakeEntry] = {"/": FakeEntry(kind="dir")}

    def add_dir(self, path: str, **kwargs) -> None:
        self.entries[path] = FakeEntry(kind="dir", **kwargs)

    def add_file(self, path: str, content: bytes = b"", **kwargs) -> None:
        self.entries[path] = FakeEntry(kind="file", content=content, **kwargs)

    def add_other(self, path: str, **kwargs) -> None:
        self.entries[path] = FakeEntry(kind="other", **kwargs)

    def _entry(self, path: str) -> FakeEntry:
        if path not in self.entries:
            raise FileNotFoundError(path)
        return self.entries[path]

    def exists(self, path: str) -> bool:
        return path in self.entries

    def is_readable(self, path: str) -> bool:
        return self._entry(path).readable

    def canonicalize(self, path: str) -> str:
        return self._entry(path).canonical or path

    def is_dir(self, path: str) -> bool:
        return path in self.entries and self.entries[path].kind == "dir"

    def is_file(self, path: str) -> bool:
        return path in self.entries and self.entries[path].kind == "file"

    def size(self, path: str) -> int:
        entry = self._entry(path)
        return entry.size if entry.size is not None else len(entry.content)

    def last_modified(self, path: str) -> int:
        return self._entry(path).mtime

    def list_dir(self, path: str) -> list[str]:
        return [
            p for p in self.entries
            if p != path and posixpath.dirname(p) == path
        ]

    def parent(self, path: str) -> str | None:
        if path == "/":
            return None
        return posixpath.dirname(path)

    def read_bytes(self, path: str, size: int) -> bytes:
        entry = self._entry(path)
        if entry.read_error is not None:
            raise entry.read_error
        return entry.content[:size]


@pytest.fixture
def fake_fs():
    """Fake filesystem with a small tree under /data."""
    fs = FakeFilesystem()
    fs.add_dir("/data")
    fs.add_file("/data/a.txt", b"alpha")
    fs.add_file("/data/b.txt", b"bravo")
    return fs


@pytest.fixture
def temp_content_dir():
    """Create a temporary directory with sample content."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir).resolve()

        (root / "documents").mkdir()
        (root / "welcome.txt").write_bytes(b"Welcome to the file protocol!")
        (root / "documents" / "readme.txt").write_bytes(b"A readme file.")
        (root / "documents" / "data.bin").write_bytes(bytes(range(256)))

        for path in [
            root / "welcome.txt",
            root / "documents" / "readme.txt",
            root / "documents" / "data.bin",
            root / "documents",
        ]:
            os.utime(path, ns=(FIXED_MTIME_MS * 1_000_000, FIXED_MTIME_MS * 1_000_000))

        yield root
