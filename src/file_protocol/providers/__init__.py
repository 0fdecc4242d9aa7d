"""Filesystem implementations."""

from .local_filesystem import LocalFilesystem

__all__ = ["LocalFilesystem"]
