"""Timezone representation.

This module provides the Timezone class. A Timezone is either a fixed
UTC offset or an IANA rule set loaded through the standard zoneinfo
module (backed by the tzdata distribution where the host has no zone
database).
"""

from __future__ import annotations

import datetime as _datetime
import logging
import zoneinfo
from typing import TYPE_CHECKING, ClassVar

from isochron._internal.constants import (
    MAX_UTC_OFFSET_SECONDS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from isochron.errors import TimezoneError

if TYPE_CHECKING:
    from isochron.core.datetime import DateTime

logger = logging.getLogger(__name__)

_UNIX_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)


def format_offset(offset_seconds: int) -> str:
    """Render a UTC offset as +HH:MM, or +HH:MM:SS when seconds are present.

    Examples:
        >>> format_offset(0)
        '+00:00'
        >>> format_offset(-18000)
        '-05:00'
        >>> format_offset(19800)
        '+05:30'
    """
    sign = "-" if offset_seconds < 0 else "+"
    hours, rest = divmod(abs(offset_seconds), SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text


class Timezone:
    """A timezone: a fixed UTC offset or a named IANA rule set.

    Offsets are in seconds from UTC, positive east of UTC (ahead in time)
    and negative west of UTC.

    Attributes:
        key: The IANA key for named zones, None for fixed offsets.
        name: Optional human-readable name.

    Examples:
        >>> Timezone.utc().is_utc
        True

        >>> Timezone.from_hours(5, 30).fixed_offset_seconds
        19800

        >>> ny = Timezone.named("America/New_York")
        >>> ny.key
        'America/New_York'
    """

    __slots__ = ("_offset_seconds", "_zone", "_name")

    _utc_instance: ClassVar[Timezone | None] = None

    def __init__(self, offset_seconds: int, name: str | None = None) -> None:
        """Create a fixed-offset Timezone.

        Args:
            offset_seconds: UTC offset in seconds.
            name: Optional name for the timezone (e.g., "EST").

        Raises:
            TimezoneError: If offset_seconds is not an int or is outside
                +/- 14 hours.
        """
        if not isinstance(offset_seconds, int):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )

        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )

        self._offset_seconds: int | None = offset_seconds
        self._zone: zoneinfo.ZoneInfo | None = None
        self._name: str | None = name

    @classmethod
    def utc(cls) -> Timezone:
        """Return the shared UTC timezone."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0, "UTC")
        return cls._utc_instance

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Timezone:
        """Create a fixed-offset Timezone from hours and minutes.

        For negative offsets, pass a negative hours value; minutes take
        the same sign as hours.

        Examples:
            >>> Timezone.from_hours(-5).fixed_offset_seconds
            -18000
            >>> Timezone.from_hours(-3, 30).fixed_offset_seconds
            -12600
        """
        if not 0 <= minutes <= 59:
            raise TimezoneError(f"minutes must be between 0 and 59, got {minutes}")
        sign = -1 if hours < 0 else 1
        return cls(hours * SECONDS_PER_HOUR + sign * minutes * SECONDS_PER_MINUTE)

    @classmethod
    def named(cls, key: str) -> Timezone:
        """Load the IANA rule set for key.

        Raises:
            TimezoneError: If key is not a known zone.
        """
        try:
            zone = zoneinfo.ZoneInfo(key)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError) as e:
            raise TimezoneError(f"unknown timezone {key!r}") from e

        logger.debug("loaded timezone rules for %s", key)
        instance = object.__new__(cls)
        instance._offset_seconds = None
        instance._zone = zone
        instance._name = key
        return instance

    @property
    def key(self) -> str | None:
        """Return the IANA key, or None for a fixed offset."""
        if self._zone is None:
            return None
        return self._zone.key

    @property
    def name(self) -> str | None:
        """Return the timezone name, if set."""
        return self._name

    @property
    def fixed_offset_seconds(self) -> int | None:
        """Return the offset of a fixed-offset zone, None for named zones."""
        return self._offset_seconds

    @property
    def is_utc(self) -> bool:
        """Return True for a fixed zero offset."""
        return self._offset_seconds == 0

    def utc_offset_seconds(self, instant: DateTime) -> int:
        """Return the offset in force at a UTC instant.

        Instants the datetime module cannot hold (before year 1 or
        after 9999) take the offset in force at the nearest end of its
        range, where a rule set no longer changes.

        Args:
            instant: A naive DateTime read as UTC.

        Returns:
            Offset from UTC in seconds.
        """
        if self._zone is None:
            return self._offset_seconds

        millis = instant.to_unix_millis()
        try:
            moment = _UNIX_EPOCH + _datetime.timedelta(milliseconds=millis)
            offset = moment.astimezone(self._zone).utcoffset()
        except OverflowError:
            edge = _datetime.datetime.min if millis < 0 else _datetime.datetime.max
            logger.debug(
                "%r is outside datetime's range, using offset at %s", instant, edge
            )
            offset = self._zone.utcoffset(edge)
        return int(offset.total_seconds())

    def __eq__(self, other: object) -> bool:
        """Fixed zones are equal by offset, named zones by key."""
        if not isinstance(other, Timezone):
            return NotImplemented
        if self._zone is not None or other._zone is not None:
            return self.key == other.key
        return self._offset_seconds == other._offset_seconds

    def __hash__(self) -> int:
        if self._zone is not None:
            return hash(("Timezone", self._zone.key))
        return hash(("Timezone", self._offset_seconds))

    def __repr__(self) -> str:
        if self._zone is not None:
            return f"Timezone.named({self._zone.key!r})"
        if self._name:
            return f"Timezone(offset_seconds={self._offset_seconds}, name={self._name!r})"
        return f"Timezone(offset_seconds={self._offset_seconds})"

    def __str__(self) -> str:
        """Return the key, the name, or the offset such as "+05:30"."""
        if self._zone is not None:
            return self._zone.key
        if self._offset_seconds == 0:
            return self._name if self._name else "UTC"
        return format_offset(self._offset_seconds)


__all__ = ["Timezone", "format_offset"]
