"""ZonedDateTime class binding a UTC instant to a timezone.

This module provides the ZonedDateTime class. The instant is stored as a
naive UTC DateTime; local field values and the offset string come from
the timezone rules in force at that instant.
"""

from __future__ import annotations

from isochron._internal.constants import MILLIS_PER_SECOND
from isochron.core.datetime import DateTime
from isochron.units.timezone import Timezone, format_offset


class ZonedDateTime:
    """A UTC instant viewed through a timezone.

    The zone is held by reference and never modified. Field accessors
    (year through millisecond) report local, zone-adjusted values.

    Attributes:
        instant: The UTC instant as a naive DateTime.
        zone: The timezone.
        offset_seconds: UTC offset in force at the instant.
        offset_string: The offset rendered as +HH:MM.

    Examples:
        >>> ny = Timezone.named("America/New_York")
        >>> z = ZonedDateTime(DateTime(1970, 1, 1), ny)
        >>> z.hour, z.offset_string
        (19, '-05:00')
        >>> z.local()
        DateTime(1969, 12, 31, 19, 0, 0, millisecond=0)
    """

    __slots__ = ("_instant", "_zone", "_offset_seconds")

    def __init__(self, instant: DateTime, zone: Timezone) -> None:
        """Bind instant (read as UTC) to zone.

        Raises:
            TimezoneError: If the zone rules cannot be evaluated at instant.
        """
        self._instant: DateTime = instant
        self._zone: Timezone = zone
        self._offset_seconds: int = zone.utc_offset_seconds(instant)

    @classmethod
    def from_iso_format(cls, zone: Timezone, s: str) -> ZonedDateTime:
        """Parse an ISO 8601 date-time and view it in zone.

        Examples:
            >>> ny = Timezone.named("America/New_York")
            >>> ZonedDateTime.from_iso_format(ny, "1970-01-01T00:00:00Z").hour
            19
        """
        from isochron.format.iso8601 import parse_zoned_datetime

        return parse_zoned_datetime(zone, s)

    @property
    def instant(self) -> DateTime:
        """Return the UTC instant."""
        return self._instant

    @property
    def zone(self) -> Timezone:
        """Return the timezone."""
        return self._zone

    @property
    def offset_seconds(self) -> int:
        """Return the UTC offset in force at the instant, in seconds."""
        return self._offset_seconds

    @property
    def offset_string(self) -> str:
        """Return the canonical offset string, e.g. "-05:00" or "+00:00"."""
        return format_offset(self._offset_seconds)

    def local(self) -> DateTime:
        """Return the wall-clock date-time in the zone."""
        return self._instant.add_millis(self._offset_seconds * MILLIS_PER_SECOND)

    # Local components

    @property
    def year(self) -> int:
        return self.local().year

    @property
    def month(self) -> int:
        return self.local().month

    @property
    def day(self) -> int:
        return self.local().day

    @property
    def hour(self) -> int:
        return self.local().hour

    @property
    def minute(self) -> int:
        return self.local().minute

    @property
    def second(self) -> int:
        return self.local().second

    @property
    def millisecond(self) -> int:
        return self.local().millisecond

    def to_iso_format(self) -> str:
        """Return the local date-time followed by the zone offset.

        Examples:
            >>> ny = Timezone.named("America/New_York")
            >>> ZonedDateTime(DateTime(1970, 1, 1), ny).to_iso_format()
            '1969-12-31T19:00:00.000-05:00'
        """
        from isochron.format.iso8601 import format_zoned_datetime

        return format_zoned_datetime(self)

    def __eq__(self, other: object) -> bool:
        """Two zoned values are equal when instant and zone both match."""
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._instant == other._instant and self._zone == other._zone

    def __hash__(self) -> int:
        return hash((self._instant, self._zone))

    def __repr__(self) -> str:
        return f"ZonedDateTime({self._instant!r}, {self._zone!r})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()


__all__ = ["ZonedDateTime"]
