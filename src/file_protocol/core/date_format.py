"""RFC 1123 dates for Last-Modified and sitemap lastmod values.

Both functions are pure, so they are safe to call from many fetch
threads at once.
"""

from datetime import timezone
from email.utils import formatdate, parsedate_to_datetime


def format_date(millis: int) -> str:
    """
    Format a timestamp as an RFC 1123 date in GMT.

    Day and month names are always English, whatever the process locale.

    Args:
        millis: Milliseconds since the epoch.

    Returns:
        Date string such as "Thu, 01 Jan 1970 00:00:00 GMT".
    """
    return formatdate(millis // 1000, usegmt=True)


def parse_date(text: str) -> int:
    """
    Parse a date produced by format_date back into milliseconds.

    Args:
        text: RFC 1123 date string.

    Returns:
        Milliseconds since the epoch, at one-second precision.

    Raises:
        ValueError: If text is not a valid date.
    """
    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid date: {text!r}") from e

    if parsed is None:
        raise ValueError(f"Invalid date: {text!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    return int(parsed.timestamp()) * 1000
