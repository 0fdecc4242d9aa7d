"""Directory listings rendered as sitemap documents."""

import logging
from xml.sax.saxutils import escape

from ..interfaces.filesystem import Filesystem
from .date_format import format_date

logger = logging.getLogger(__name__)

SITEMAP_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
)
SITEMAP_FOOTER = "</urlset>"

# Listings use backslash separators after the scheme; existing sitemap
# consumers depend on this exact form.
LOC_PREFIX = "file:\\"


def _url_entry(loc: str, lastmod: str) -> str:
    return (
        f"<url>\n  <loc>{escape(loc)}</loc>\n"
        f"  <lastmod>{lastmod}</lastmod>\n</url>\n"
    )


def generate_sitemap(directory: str, filesystem: Filesystem, crawl_parent: bool) -> bytes:
    """
    Render a directory's immediate children as a sitemap.

    The first entry is the directory itself, followed by one entry per
    child in enumeration order. When crawl_parent is set, the parent
    directory is appended last; a root directory has no parent and the
    entry is left out.

    Args:
        directory: Canonical path of the directory.
        filesystem: Filesystem to query.
        crawl_parent: Whether to add an entry for the parent directory.

    Returns:
        The UTF-8 encoded sitemap document. Characters that cannot be
        encoded, such as undecodable bytes in file names, are replaced
        with "?".
    """
    children = filesystem.list_dir(directory)
    logger.debug(f"Directory {directory} has {len(children)} entries")

    parts = [SITEMAP_HEADER]
    parts.append(_url_entry(
        f"{LOC_PREFIX}{directory}\\",
        format_date(filesystem.last_modified(directory)),
    ))

    for child in children:
        parts.append(_url_entry(
            f"{LOC_PREFIX}{child}",
            format_date(filesystem.last_modified(child)),
        ))

    if crawl_parent:
        parent = filesystem.parent(directory)
        if parent is None:
            logger.debug(f"No parent entry for root directory {directory}")
        else:
            parts.append(_url_entry(
                f"{LOC_PREFIX}{parent}\\",
                format_date(filesystem.last_modified(parent)),
            ))

    parts.append(SITEMAP_FOOTER)
    return "".join(parts).encode("utf-8", errors="replace")
