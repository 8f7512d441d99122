"""Utility functions for date operations."""

import logging
from datetime import datetime, timezone

import dateutil.parser

logger = logging.getLogger("jira-mcp-server.utils.date")


def parse_date(date_str: str | int | None) -> datetime | None:
    """
    Parse a Jira timestamp into a datetime.

    The input accepts:
    - None or an empty string
    - Epoch timestamp in milliseconds (int or digit-only string)
    - Anything `dateutil.parser` understands (ISO 8601 such as
      "2024-01-15T10:30:00.000+0000", RFC 3339, ...)

    Args:
        date_str: Date string

    Returns:
        Parsed datetime or None if date_str is None / empty string

    Raises:
        ValueError: If the string cannot be parsed
    """
    if not date_str:
        return None
    if isinstance(date_str, int) or date_str.isdigit():
        return datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
    return dateutil.parser.parse(date_str)


def format_local_date(date_str: str | int | None) -> str | None:
    """
    Render a timestamp as a short local date, e.g. "1/15/2024".

    The timestamp is converted to the local timezone before the date part is
    taken. Values that cannot be parsed are returned unchanged.

    Args:
        date_str: Timestamp as returned by the Jira API

    Returns:
        The month/day/year string, the original value if unparseable,
        or None if date_str is empty
    """
    try:
        parsed = parse_date(date_str)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Could not parse date '{date_str}': {e}")
        return str(date_str)

    if parsed is None:
        return None

    local = parsed.astimezone()
    return f"{local.month}/{local.day}/{local.year}"
