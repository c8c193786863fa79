"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
in the proleptic Gregorian calendar.
"""

from __future__ import annotations

from isochron._internal.calendar import (
    is_leap_year,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from isochron._internal.constants import UNIX_EPOCH_ORDINAL
from isochron._internal.validation import (
    validate_day,
    validate_month,
    validate_year,
)


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date is immutable. Its constructor validates every component, so an
    existing Date always names a real calendar day.

    Internal representation is the number of days since 1970-01-01,
    which keeps date arithmetic a single integer addition.

    Attributes:
        year: The year (0-9999; from_epoch_days may reach beyond).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2018, 5, 27)
        >>> d.year, d.month, d.day
        (2018, 5, 27)

        >>> Date(2020, 2, 29)  # Valid leap year date
        Date(2020, 2, 29)

        >>> Date(2019, 2, 29)
        Traceback (most recent call last):
        ...
        ValidationError: day must be between 1 and 28 for 2019-02, got 29
    """

    __slots__ = ("_days",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Raises:
            ValidationError: If any component is out of range.
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._days: int = ymd_to_ordinal(year, month, day) - UNIX_EPOCH_ORDINAL

    @classmethod
    def from_epoch_days(cls, days: int) -> Date:
        """Create a Date from a count of days since 1970-01-01.

        No year limit is applied, so dates produced by rolling a
        date-time past year 9999 remain representable.

        Examples:
            >>> Date.from_epoch_days(0)
            Date(1970, 1, 1)

            >>> Date.from_epoch_days(-1)
            Date(1969, 12, 31)
        """
        instance = object.__new__(cls)
        instance._days = days
        return instance

    @classmethod
    def from_iso_format(cls, s: str) -> Date:
        """Parse a date in ISO 8601 basic or extended form.

        Raises:
            ParseError: If the string is not a valid date.

        Examples:
            >>> Date.from_iso_format("2018-05-27")
            Date(2018, 5, 27)

            >>> Date.from_iso_format("20180527")
            Date(2018, 5, 27)
        """
        from isochron.format.iso8601 import parse_date

        return parse_date(s)

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._ymd()[0]

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return self._ymd()[1]

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        return self._ymd()[2]

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date falls in a leap year."""
        return is_leap_year(self.year)

    def _ymd(self) -> tuple[int, int, int]:
        return ordinal_to_ymd(self._days + UNIX_EPOCH_ORDINAL)

    def to_epoch_days(self) -> int:
        """Return the number of days since 1970-01-01 (negative before it)."""
        return self._days

    def add_days(self, days: int) -> Date:
        """Return a new Date shifted by a signed number of days.

        Examples:
            >>> Date(2019, 12, 31).add_days(1)
            Date(2020, 1, 1)
        """
        return Date.from_epoch_days(self._days + days)

    def to_iso_format(self) -> str:
        """Return the date in extended ISO 8601 form (YYYY-MM-DD).

        Examples:
            >>> Date(987, 6, 5).to_iso_format()
            '0987-06-05'
        """
        from isochron.format.iso8601 import format_date

        return format_date(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days == other._days

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(("Date", self._days))

    def __repr__(self) -> str:
        year, month, day = self._ymd()
        return f"Date({year}, {month}, {day})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()


__all__ = ["Date"]
