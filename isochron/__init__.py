"""Isochron: ISO 8601 parsing and rendering for dates and date-times.

Isochron reads ISO 8601 text into validated temporal values, reporting
failures with the offset, problem and grammar context where parsing
stopped, and renders values back to canonical, zero-padded text.

Core Types:
    Date: Calendar date (year, month, day)
    DateTime: Naive date-time with millisecond precision, read as UTC
    ZonedDateTime: UTC instant viewed through a timezone

Units:
    Timezone: Fixed UTC offset or IANA rule set

Format Functions:
    parse_date, parse_datetime, parse_zoned_datetime
    format_date, format_datetime, format_zoned_datetime

Exceptions:
    IsochronError: Base exception
    ParseError: Failed to parse a string; carries dead_ends
    ValidationError: Invalid component values
    TimezoneError: Invalid or unknown timezone

Example:
    >>> from isochron import Timezone, parse_zoned_datetime
    >>> ny = Timezone.named("America/New_York")
    >>> str(parse_zoned_datetime(ny, "1970-01-01T00:00:00Z"))
    '1969-12-31T19:00:00.000-05:00'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from isochron.core.date import Date
from isochron.core.datetime import DateTime
from isochron.core.zoned import ZonedDateTime

# Units
from isochron.units.timezone import Timezone

# Exceptions
from isochron.errors import (
    IsochronError,
    ParseError,
    TimezoneError,
    ValidationError,
)

# Format functions
from isochron.format import (
    format_date,
    format_datetime,
    format_zoned_datetime,
    parse_date,
    parse_datetime,
    parse_zoned_datetime,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "ZonedDateTime",
    # Units
    "Timezone",
    # Exceptions
    "IsochronError",
    "ParseError",
    "ValidationError",
    "TimezoneError",
    # Format functions
    "parse_date",
    "parse_datetime",
    "parse_zoned_datetime",
    "format_date",
    "format_datetime",
    "format_zoned_datetime",
]
