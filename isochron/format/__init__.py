"""Temporal formatting and parsing.

This module provides functions for converting Isochron values to and from
ISO 8601 text.

Functions:
    parse_date: Parse an ISO 8601 calendar date.
    parse_datetime: Parse an ISO 8601 date-time, normalized to UTC.
    parse_zoned_datetime: Parse an ISO 8601 date-time into a timezone.
    format_date: Format a Date as YYYY-MM-DD.
    format_datetime: Format a DateTime as YYYY-MM-DDTHH:MM:SS.sssZ.
    format_zoned_datetime: Format a ZonedDateTime with its offset.

Examples:
    >>> from isochron.format import parse_datetime, format_datetime
    >>> dt = parse_datetime("2018-05-27T10:00:00+05:00")
    >>> format_datetime(dt)
    '2018-05-27T05:00:00.000Z'
"""

from __future__ import annotations

from isochron.format.iso8601 import (
    format_date,
    format_datetime,
    format_zoned_datetime,
    parse_date,
    parse_datetime,
    parse_zoned_datetime,
)

__all__: list[str] = [
    "parse_date",
    "parse_datetime",
    "parse_zoned_datetime",
    "format_date",
    "format_datetime",
    "format_zoned_datetime",
]
