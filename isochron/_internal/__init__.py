"""Internal utilities for Isochron.

This module contains private implementation details:
    - Calendar arithmetic (leap years, month lengths, ordinals)
    - Constants and unit conversions
    - The parsing state and combinators behind the ISO 8601 grammar
    - Range validation for value-type constructors

Note: This module is not part of the public API.
"""

from __future__ import annotations

from isochron._internal.validation import (
    validate_day,
    validate_month,
    validate_range,
    validate_time,
    validate_year,
)

__all__: list[str] = [
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_time",
    "validate_year",
]
