"""Internal constants for Isochron.

These constants define the limits and unit conversions used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: int = 24 * MILLIS_PER_HOUR  # 86_400_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE

# Year limits for validated construction
MIN_YEAR: int = 0
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Ordinal of 1970-01-01 (ordinal 1 = 0001-01-01)
UNIX_EPOCH_ORDINAL: int = 719_163

# Fixed offsets are limited to what real zones use (Pacific/Kiritimati is +14)
MAX_UTC_OFFSET_SECONDS: int = 14 * SECONDS_PER_HOUR


__all__ = [
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_ORDINAL",
    "MAX_UTC_OFFSET_SECONDS",
]
