"""Tests for the LocalFilesystem module."""

import os
import pytest
from file_protocol.providers.local_filesystem import LocalFilesystem

from conftest import FIXED_MTIME_MS


class TestLocalFilesystem:
    """Tests for LocalFilesystem."""

    def test_exists_file(self, temp_content_dir):
        """exists returns True for existing file."""
        fs = LocalFilesystem()
        assert fs.exists(str(temp_content_dir / "welcome.txt")) is True

    def test_exists_nonexistent(self, temp_content_dir):
        """exists returns False for nonexistent path."""
        fs = LocalFilesystem()
        assert fs.exists(str(temp_content_dir / "nonexistent.txt")) is False

    def test_is_readable(self, temp_content_dir):
        """Files created by the test are readable."""
        fs = LocalFilesystem()
        assert fs.is_readable(str(temp_content_dir / "welcome.txt")) is True

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="permission bits are not enforced for root",
    )
    def test_is_readable_false_without_permission(self, temp_content_dir):
        """Files without read permission are not readable."""
        path = temp_content_dir / "welcome.txt"
        path.chmod(0o000)
        try:
            assert LocalFilesystem().is_readable(str(path)) is False
        finally:
            path.chmod(0o644)

    def test_is_dir_and_is_file(self, temp_content_dir):
        """is_dir and is_file tell directories and files apart."""
        fs = LocalFilesystem()
        assert fs.is_dir(str(temp_content_dir / "documents")) is True
        assert fs.is_file(str(temp_content_dir / "documents")) is False
        assert fs.is_file(str(temp_content_dir / "welcome.txt")) is True
        assert fs.is_dir(str(temp_content_dir / "welcome.txt")) is False

    def test_canonicalize_plain_path(self, temp_content_dir):
        """A canonical path is returned unchanged."""
        fs = LocalFilesystem()
        path = str(temp_content_dir / "welcome.txt")
        assert fs.canonicalize(path) == path

    def test_canonicalize_dot_segments(self, temp_content_dir):
        """Dot segments are resolved."""
        fs = LocalFilesystem()
        path = f"{temp_content_dir}/documents/../welcome.txt"
        assert fs.canonicalize(path) == str(temp_content_dir / "welcome.txt")

    def test_canonicalize_symlink(self, temp_content_dir):
        """Symlinks resolve to their target."""
        link = temp_content_dir / "link.txt"
        link.symlink_to(temp_content_dir / "welcome.txt")
        fs = LocalFilesystem()
        assert fs.canonicalize(str(link)) == str(temp_content_dir / "welcome.txt")

    def test_canonicalize_missing_raises(self, temp_content_dir):
        """Canonicalizing a missing path raises OSError."""
        fs = LocalFilesystem()
        with pytest.raises(OSError):
            fs.canonicalize(str(temp_content_dir / "missing"))

    def test_size(self, temp_content_dir):
        """size returns the byte length."""
        fs = LocalFilesystem()
        assert fs.size(str(temp_content_dir / "documents" / "data.bin")) == 256

    def test_last_modified(self, temp_content_dir):
        """last_modified returns milliseconds since the epoch."""
        fs = LocalFilesystem()
        assert fs.last_modified(str(temp_content_dir / "welcome.txt")) == FIXED_MTIME_MS

    def test_last_modified_dangling_symlink(self, temp_content_dir):
        """A dangling symlink has no modification time."""
        link = temp_content_dir / "dangling"
        link.symlink_to(temp_content_dir / "gone")
        assert LocalFilesystem().last_modified(str(link)) == 0

    def test_list_dir(self, temp_content_dir):
        """list_dir returns child paths in enumeration order."""
        fs = LocalFilesystem()
        directory = str(temp_content_dir / "documents")
        children = fs.list_dir(directory)
        assert children == [os.path.join(directory, name) for name in os.listdir(directory)]
        assert sorted(os.path.basename(c) for c in children) == ["data.bin", "readme.txt"]

    def test_list_dir_includes_hidden(self, temp_content_dir):
        """Hidden files are listed."""
        (temp_content_dir / ".hidden").write_text("secret")
        names = [os.path.basename(p) for p in LocalFilesystem().list_dir(str(temp_content_dir))]
        assert ".hidden" in names

    def test_list_dir_empty(self, temp_content_dir):
        """list_dir returns empty list for empty directory."""
        empty_dir = temp_content_dir / "empty"
        empty_dir.mkdir()
        assert LocalFilesystem().list_dir(str(empty_dir)) == []

    def test_parent(self, temp_content_dir):
        """parent returns the containing directory."""
        fs = LocalFilesystem()
        assert fs.parent(str(temp_content_dir / "documents")) == str(temp_content_dir)

    def test_parent_of_root(self):
        """The root has no parent."""
        assert LocalFilesystem().parent("/") is None

    def test_read_bytes(self, temp_content_dir):
        """read_bytes returns the exact content."""
        fs = LocalFilesystem()
        data = fs.read_bytes(str(temp_content_dir / "documents" / "data.bin"), 256)
        assert data == bytes(range(256))

    def test_read_bytes_short_file_raises(self, temp_content_dir):
        """A file shorter than expected raises OSError."""
        fs = LocalFilesystem()
        with pytest.raises(OSError):
            fs.read_bytes(str(temp_content_dir / "welcome.txt"), 1000)

    def test_read_bytes_negative_size_raises(self, temp_content_dir):
        """A negative size raises ValueError."""
        fs = LocalFilesystem()
        with pytest.raises(ValueError):
            fs.read_bytes(str(temp_content_dir / "welcome.txt"), -1)
