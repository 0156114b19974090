"""Utility modules for world backups."""

from .formatters import format_megabytes, date_tag, parse_date_tag, format_date

__all__ = ["format_megabytes", "date_tag", "parse_date_tag", "format_date"]
