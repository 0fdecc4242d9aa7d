"""Conversion between file locators and local filesystem paths."""

import codecs
import logging
import os
import re
from urllib.parse import quote, unquote_plus, urlsplit

logger = logging.getLogger(__name__)

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_REPEATED_SEPARATORS = re.compile(r"/{2,}")

# Sub-delimiters left unescaped in paths. "+" is escaped since paths are form-decoded.
_PATH_SAFE = "/:@!$&'()*,;="


class MalformedLocatorError(ValueError):
    """Raised when a locator cannot be parsed as a URL."""


class LocatorDecodingError(ValueError):
    """Raised when a locator path cannot be decoded with the configured encoding."""


def locator_to_path(url: str, encoding: str = "UTF-8") -> str:
    """
    Extract and decode the filesystem path addressed by a locator.

    The scheme and host are ignored; only the path matters. Query strings
    are ignored with a warning. The path is form-decoded, so "%20" and
    "+" both become a space.

    Args:
        url: Locator such as "file:/tmp/some%20file.txt".
        encoding: Character encoding of percent-escaped bytes.

    Returns:
        Decoded path, normalized like a plain file path (no repeated or
        trailing separators). "." and ".." segments are left in place.

    Raises:
        MalformedLocatorError: If url is not a URL.
        LocatorDecodingError: If the path cannot be decoded.
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise MalformedLocatorError(f"Malformed locator: {url!r}") from e

    if not parts.scheme:
        raise MalformedLocatorError(f"No scheme in locator: {url!r}")

    if parts.query or "?" in url.partition("#")[0]:
        logger.warning(f"Ignoring query string in locator: {url}")

    path = parts.path or "/"
    return normalize_path(decode_path(path, encoding))


def decode_path(path: str, encoding: str) -> str:
    """
    Form-decode a locator path.

    Raises:
        LocatorDecodingError: If the encoding is unknown, an escape is
            truncated, or the escaped bytes are invalid in the encoding.
    """
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise LocatorDecodingError(f"Unsupported encoding: {encoding}") from e

    if _MALFORMED_ESCAPE.search(path):
        raise LocatorDecodingError(f"Incomplete escape sequence in path: {path!r}")

    try:
        return unquote_plus(path, encoding=encoding, errors="strict")
    except UnicodeDecodeError as e:
        raise LocatorDecodingError(f"Path is not valid {encoding}: {path!r}") from e


def normalize_path(path: str) -> str:
    """Collapse repeated separators and drop a trailing one, except on root."""
    path = _REPEATED_SEPARATORS.sub("/", path)
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    return path


def to_file_locator(path: str, is_dir: bool = False) -> str:
    """
    Render an absolute path as a file locator.

    Args:
        path: Absolute filesystem path.
        is_dir: Whether the path names a directory (adds a trailing "/").

    Returns:
        Locator such as "file:/tmp/a%20b/". The on-disk bytes of the path
        are percent-encoded, so names that are not valid UTF-8 keep their
        original bytes.
    """
    if is_dir and not path.endswith("/"):
        path = path + "/"
    return "file:" + quote(os.fsencode(path), safe=_PATH_SAFE)
