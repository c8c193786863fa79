"""Validation utilities for Isochron.

Range checks shared by the value-type constructors. Each raises
ValidationError with a message naming the offending component.

This module is not part of the public API.
"""

from __future__ import annotations

from isochron._internal.calendar import days_in_month
from isochron._internal.constants import MAX_YEAR, MIN_YEAR
from isochron.errors import ValidationError


def validate_range(name: str, value: int, lo: int, hi: int) -> None:
    """Validate that value lies within [lo, hi].

    Args:
        name: Component name used in the error message.
        value: The value to check.
        lo: Inclusive lower bound.
        hi: Inclusive upper bound.

    Raises:
        ValidationError: If value is outside the bounds.

    Examples:
        >>> validate_range("hour", 24, 0, 23)
        Traceback (most recent call last):
        ...
        ValidationError: hour must be between 0 and 23, got 24
    """
    if value < lo or value > hi:
        raise ValidationError(f"{name} must be between {lo} and {hi}, got {value}")


def validate_year(year: int) -> None:
    """Validate that a year is within MIN_YEAR to MAX_YEAR."""
    validate_range("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12."""
    validate_range("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_time(hour: int, minute: int, second: int, millisecond: int) -> None:
    """Validate the time-of-day components of a DateTime."""
    validate_range("hour", hour, 0, 23)
    validate_range("minute", minute, 0, 59)
    validate_range("second", second, 0, 59)
    validate_range("millisecond", millisecond, 0, 999)


__all__ = [
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_time",
]
