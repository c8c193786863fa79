"""DateTime class for naive date-times.

This module provides the DateTime class: a calendar date plus a time of
day with millisecond precision and no timezone. By convention a DateTime
is read as UTC.
"""

from __future__ import annotations

from isochron._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from isochron._internal.validation import validate_time
from isochron.core.date import Date


class DateTime:
    """A naive date-time with millisecond precision.

    The internal representation is a single integer: milliseconds since
    1970-01-01T00:00:00. Any integer is a valid value, so arithmetic such
    as add_millis never needs to re-validate; crossing midnight, month or
    year boundaries falls out of the floor division in the accessors.

    Attributes:
        year: The year component.
        month: The month component (1-12).
        day: The day component (1-31).
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        millisecond: The millisecond component (0-999).

    Examples:
        >>> dt = DateTime(2018, 5, 27, 14, 30, 45, millisecond=123)
        >>> dt.hour, dt.millisecond
        (14, 123)

        >>> DateTime.from_unix_millis(61_000)
        DateTime(1970, 1, 1, 0, 1, 1, millisecond=0)

        >>> DateTime(1970, 1, 1).add_millis(-1)
        DateTime(1969, 12, 31, 23, 59, 59, millisecond=999)
    """

    __slots__ = ("_millis",)

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        millisecond: int = 0,
    ) -> None:
        """Create a DateTime from component parts.

        Raises:
            ValidationError: If any component is out of range.
        """
        date = Date(year, month, day)
        validate_time(hour, minute, second, millisecond)

        self._millis: int = (
            date.to_epoch_days() * MILLIS_PER_DAY
            + hour * MILLIS_PER_HOUR
            + minute * MILLIS_PER_MINUTE
            + second * MILLIS_PER_SECOND
            + millisecond
        )

    @classmethod
    def from_unix_millis(cls, millis: int) -> DateTime:
        """Create a DateTime from milliseconds since the Unix epoch."""
        instance = object.__new__(cls)
        instance._millis = millis
        return instance

    @classmethod
    def from_date_and_millis(cls, date: Date, millis: int) -> DateTime:
        """Create a DateTime from a date and milliseconds since its midnight.

        millis may fall outside a single day; the date rolls accordingly.

        Examples:
            >>> DateTime.from_date_and_millis(Date(2018, 5, 27), 3_600_000)
            DateTime(2018, 5, 27, 1, 0, 0, millisecond=0)

            >>> DateTime.from_date_and_millis(Date(2018, 5, 27), 86_400_000)
            DateTime(2018, 5, 28, 0, 0, 0, millisecond=0)
        """
        return cls.from_unix_millis(date.to_epoch_days() * MILLIS_PER_DAY + millis)

    @classmethod
    def from_iso_format(cls, s: str) -> DateTime:
        """Parse an ISO 8601 date-time, normalizing any offset to UTC.

        Raises:
            ParseError: If the string is not a valid date-time.

        Examples:
            >>> DateTime.from_iso_format("2018-05-27T10:00:00+05:00")
            DateTime(2018, 5, 27, 5, 0, 0, millisecond=0)
        """
        from isochron.format.iso8601 import parse_datetime

        return parse_datetime(s)

    # Date components

    @property
    def year(self) -> int:
        """Return the year component."""
        return self.date().year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return self.date().month

    @property
    def day(self) -> int:
        """Return the day component (1-31)."""
        return self.date().day

    # Time components

    @property
    def millis_of_day(self) -> int:
        """Return milliseconds since midnight (0 to 86_399_999)."""
        return self._millis % MILLIS_PER_DAY

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self.millis_of_day // MILLIS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return self.millis_of_day % MILLIS_PER_HOUR // MILLIS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return self.millis_of_day % MILLIS_PER_MINUTE // MILLIS_PER_SECOND

    @property
    def millisecond(self) -> int:
        """Return the millisecond component (0-999)."""
        return self.millis_of_day % MILLIS_PER_SECOND

    def date(self) -> Date:
        """Return the calendar date of this date-time."""
        return Date.from_epoch_days(self._millis // MILLIS_PER_DAY)

    def to_unix_millis(self) -> int:
        """Return milliseconds since the Unix epoch."""
        return self._millis

    def add_millis(self, millis: int) -> DateTime:
        """Return a new DateTime shifted by a signed number of milliseconds.

        Examples:
            >>> DateTime(2018, 12, 31, 23, 0, 0).add_millis(3_600_000)
            DateTime(2019, 1, 1, 0, 0, 0, millisecond=0)
        """
        return DateTime.from_unix_millis(self._millis + millis)

    def to_iso_format(self) -> str:
        """Return the date-time as an ISO 8601 UTC string.

        Examples:
            >>> DateTime(2018, 5, 27, 14, 30, 45).to_iso_format()
            '2018-05-27T14:30:45.000Z'
        """
        from isochron.format.iso8601 import format_datetime

        return format_datetime(self)

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._millis == other._millis

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._millis < other._millis

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._millis <= other._millis

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._millis > other._millis

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._millis >= other._millis

    def __hash__(self) -> int:
        return hash(("DateTime", self._millis))

    def __repr__(self) -> str:
        """Return a detailed string representation."""
        date = self.date()
        return (
            f"DateTime({date.year}, {date.month}, {date.day}, {self.hour}, "
            f"{self.minute}, {self.second}, millisecond={self.millisecond})"
        )

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()


__all__ = ["DateTime"]
