"""Core temporal types.

This module provides the value types the ISO 8601 codec reads and writes:
    - Date: Calendar date in the proleptic Gregorian calendar
    - DateTime: Naive date-time with millisecond precision, read as UTC
    - ZonedDateTime: UTC instant bound to a timezone
"""

from __future__ import annotations

from isochron.core.date import Date
from isochron.core.datetime import DateTime
from isochron.core.zoned import ZonedDateTime

__all__: list[str] = [
    "Date",
    "DateTime",
    "ZonedDateTime",
]
