"""Formatting helpers for backup log messages."""

from datetime import datetime
from typing import Optional

BYTES_PER_MEGABYTE = 1024 * 1024


def format_megabytes(size_bytes: int) -> str:
    """Format a byte count as megabytes with two decimals.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Size string such as ``"1.50 MB"``.
    """
    return f"{size_bytes / BYTES_PER_MEGABYTE:.2f} MB"


def date_tag(dt: Optional[datetime] = None) -> str:
    """Return the YYYY-MM-DD tag used in backup names."""
    return (dt or datetime.now()).strftime('%Y-%m-%d')


def parse_date_tag(value: str) -> str:
    """Validate a YYYY-MM-DD string and return it unchanged.

    Raises:
        ValueError: If the value is not a valid date.
    """
    datetime.strptime(value, '%Y-%m-%d')
    return value


def format_date(dt: datetime) -> str:
    return dt.strftime('%Y-%m-%d %H:%M:%S')
