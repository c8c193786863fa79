"""ISO 8601 parsing and formatting.

This module converts between ISO 8601 text and Date, DateTime and
ZonedDateTime values.

Functions:
    parse_date: Parse a calendar date.
    parse_datetime: Parse a date-time and normalize it to UTC.
    parse_zoned_datetime: Parse a date-time and view it in a timezone.
    format_date: Render a Date as YYYY-MM-DD.
    format_datetime: Render a DateTime as YYYY-MM-DDTHH:MM:SS.sssZ.
    format_zoned_datetime: Render a ZonedDateTime with its local offset.

Accepted input:

Dates:
    - YYYY-MM-DD (extended format)
    - YYYYMMDD (basic format)

Date-times (the T, ':' and '-' separators are all optional):
    - YYYY-MM-DDTHH:MM:SS
    - YYYY-MM-DDTHH:MM:SS.f (any number of fraction digits)
    - YYYY-MM-DDTHH:MM:SSZ
    - YYYY-MM-DDTHH:MM:SS+HH:MM, +HHMM, +HH or +HH:MM:SS
    - YYYY-MM-DDTHH:MM:SS-HH:MM (ASCII hyphen or U+2212 minus)
    - YYYYMMDDTHHMMSS

A date-time without an offset is read as UTC. Fractional seconds are
rounded to the nearest millisecond.

Parse failures raise ParseError. Its dead_ends attribute lists where
parsing stopped, what was expected and which part of the grammar was
being read:

    >>> try:
    ...     parse_date("2018-13-01")
    ... except ParseError as e:
    ...     print(e)
    offset 7 (month): expected a value between 1 and 12, got 13

Examples:
    >>> parse_date("20180527")
    Date(2018, 5, 27)

    >>> parse_datetime("2018-05-27T10:00:00+05:00")
    DateTime(2018, 5, 27, 5, 0, 0, millisecond=0)

    >>> format_datetime(DateTime(2018, 5, 27, 5))
    '2018-05-27T05:00:00.000Z'
"""

from __future__ import annotations

import logging
from typing import TypeVar

from isochron._internal.calendar import days_in_month
from isochron._internal.constants import (
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from isochron._internal.parser import Parser, Rule, is_ascii_digit, succeed
from isochron.core.date import Date
from isochron.core.datetime import DateTime
from isochron.core.zoned import ZonedDateTime
from isochron.errors import ParseError
from isochron.problems import (
    BadInt,
    ExpectingDigit,
    ExpectingDot,
    ExpectingNDigits,
    ExpectingRange,
    ExpectingSign,
    ExpectingZ,
    InvalidDate,
)
from isochron.units.timezone import Timezone

logger = logging.getLogger(__name__)

T = TypeVar("T")

# U+2212 MINUS SIGN is accepted wherever an ASCII '-' offset sign is
UNICODE_MINUS = "−"


# Numeric fields


def digits(p: Parser, count: int) -> int:
    """Read exactly count ASCII digits as a non-negative integer."""
    start = p.offset
    for _ in range(count):
        p.chomp_if(is_ascii_digit, ExpectingDigit())

    chomped = p.source[start : p.offset]
    if len(chomped) != count:
        p.fail(ExpectingNDigits(count, chomped))
    try:
        return int(chomped)
    except ValueError:
        p.fail(BadInt())


def bounded(p: Parser, lo: int, hi: int) -> int:
    """Read a two-digit field and require lo <= value <= hi."""
    value = digits(p, 2)
    if value < lo or value > hi:
        p.fail(ExpectingRange(value, lo, hi))
    return value


def _field(name: str, lo: int, hi: int) -> Rule[int]:
    def rule(p: Parser) -> int:
        with p.in_context(name):
            return bounded(p, lo, hi)

    return rule


month = _field("month", 1, 12)
day_in_month = _field("day-in-month", 1, 31)
hour = _field("hour", 0, 23)
minute = _field("minute", 0, 59)
second = _field("second", 0, 59)


# Dates


def year(p: Parser) -> int:
    with p.in_context("year"):
        return digits(p, 4)


def _skip_dashes(p: Parser) -> None:
    p.chomp_while(lambda char: char == "-")


def calendar_date(p: Parser) -> Date:
    """Read YYYY[-]MM[-]DD and check it names a real day."""
    y = year(p)
    _skip_dashes(p)
    m = month(p)
    _skip_dashes(p)
    d = day_in_month(p)

    with p.in_context("leap-year"):
        max_day = days_in_month(y, m)
        if d > max_day:
            p.fail(InvalidDate(y, m, d, max_day))
    return Date(y, m, d)


# Time of day


def fraction_to_millis(fraction_digits: str) -> int:
    """Round a run of fraction digits to whole milliseconds, half up.

    Examples:
        >>> fraction_to_millis("5")
        500
        >>> fraction_to_millis("123456")
        123
        >>> fraction_to_millis("9996")
        1000
    """
    # Digits past the fourth cannot change a half-up rounding to millis.
    fraction_digits = fraction_digits[:4]
    numerator = int(fraction_digits) * MILLIS_PER_SECOND
    denominator = 10 ** len(fraction_digits)
    return (2 * numerator + denominator) // (2 * denominator)


def fraction(p: Parser) -> int:
    """Read .d+ and return it in milliseconds (may be 1000 after rounding)."""
    with p.in_context("fraction"):
        p.symbol(".", ExpectingDot())
        start = p.offset
        p.chomp_if(is_ascii_digit, ExpectingDigit())
        p.chomp_while(is_ascii_digit)
        return fraction_to_millis(p.source[start : p.offset])


def time_of_day(p: Parser) -> int:
    """Read HH[:]MM[:]SS[.f] and return milliseconds since midnight."""
    h = hour(p)
    p.optional(":")
    m = minute(p)
    p.optional(":")
    s = second(p)
    ms = p.one_of(fraction, succeed(0))
    return h * MILLIS_PER_HOUR + m * MILLIS_PER_MINUTE + s * MILLIS_PER_SECOND + ms


# Offsets
#
# An offset is returned as the adjustment that turns local time into UTC,
# which is the stated offset with its sign flipped: "+05:00" means local
# time is five hours ahead of UTC, so five hours must be subtracted.
# timezone_polarity does the flip, mapping '+' to -1 and '-' to +1.


def timezone_polarity(p: Parser) -> int:
    with p.in_context("timezone polarity"):
        char = p.chomp_if(
            lambda c: c in ("+", "-", UNICODE_MINUS),
            ExpectingSign(),
        )
    return -1 if char == "+" else 1


def utc_marker(p: Parser) -> int:
    p.symbol("Z", ExpectingZ())
    return 0


def signed_offset(p: Parser) -> int:
    """Read (+|-|U+2212)HH[[:]MM[[:]SS]] and return the UTC adjustment in millis.

    The seconds field only appears in offsets such as local mean time
    (-04:56:02), which format_offset writes out in full.
    """
    polarity = timezone_polarity(p)
    h = hour(p)
    if p.optional(":"):
        m = minute(p)
    else:
        m = p.one_of(minute, succeed(0))
    if p.optional(":"):
        s = second(p)
    else:
        s = p.one_of(second, succeed(0))
    magnitude = h * MILLIS_PER_HOUR + m * MILLIS_PER_MINUTE + s * MILLIS_PER_SECOND
    return polarity * magnitude


def utc_adjustment(p: Parser) -> int:
    """Read Z, a signed offset, or nothing; return millis to add for UTC."""
    with p.in_context("offset"):
        return p.one_of(utc_marker, signed_offset, succeed(0))


# Date-times


def utc_datetime(p: Parser) -> DateTime:
    """Read a full date-time and normalize it to UTC."""
    date = calendar_date(p)
    p.optional("T")
    millis = time_of_day(p)
    adjustment = utc_adjustment(p)
    return DateTime.from_date_and_millis(date, millis).add_millis(adjustment)


# Entry points


def _run(rule: Rule[T], text: str) -> T:
    try:
        return Parser(text).run(rule)
    except ParseError as e:
        logger.debug("could not parse %r: %s", text, e.first)
        raise


def parse_date(text: str) -> Date:
    """Parse an ISO 8601 calendar date.

    Args:
        text: A date in extended (2018-05-27) or basic (20180527) form.

    Returns:
        The parsed Date.

    Raises:
        ParseError: If text is not a valid date. The dead ends name the
            failing field, e.g. ExpectingRange(13, 1, 12) in context
            ("month",) or InvalidDate(2019, 2, 29, 28) in ("leap-year",).

    Examples:
        >>> parse_date("2020-02-29")
        Date(2020, 2, 29)
    """
    return _run(calendar_date, text)


def parse_datetime(text: str) -> DateTime:
    """Parse an ISO 8601 date-time and normalize it to UTC.

    Args:
        text: A date, optional T, a time with optional fraction, and an
            optional Z or signed offset. A missing offset means UTC.

    Returns:
        A DateTime holding the UTC instant.

    Raises:
        ParseError: If text is not a valid date-time.

    Examples:
        >>> parse_datetime("1970-01-01T00:01:01.000Z")
        DateTime(1970, 1, 1, 0, 1, 1, millisecond=0)

        >>> parse_datetime("1969-12-31T19:00:00-05:00")
        DateTime(1970, 1, 1, 0, 0, 0, millisecond=0)
    """
    return _run(utc_datetime, text)


def parse_zoned_datetime(zone: Timezone, text: str) -> ZonedDateTime:
    """Parse an ISO 8601 date-time and view the instant in zone.

    The offset in text only locates the instant; the result's offset
    comes from zone's rules at that instant.

    Raises:
        ParseError: If text is not a valid date-time.
        TimezoneError: If zone's rules cannot be evaluated at the instant.

    Examples:
        >>> ny = Timezone.named("America/New_York")
        >>> str(parse_zoned_datetime(ny, "1970-01-01T00:00:00Z"))
        '1969-12-31T19:00:00.000-05:00'
    """
    return ZonedDateTime(parse_datetime(text), zone)


# Rendering


def _pad_year(value: int) -> str:
    # At least four digits, never truncated
    if value < 0:
        return f"-{-value:04d}"
    return f"{value:04d}"


def _pad(value: int, width: int = 2) -> str:
    return f"{value:0{width}d}"


def _render_fields(value: DateTime) -> str:
    return (
        f"{_pad_year(value.year)}-{_pad(value.month)}-{_pad(value.day)}"
        f"T{_pad(value.hour)}:{_pad(value.minute)}:{_pad(value.second)}"
        f".{_pad(value.millisecond, 3)}"
    )


def format_date(date: Date) -> str:
    """Render a Date as YYYY-MM-DD.

    Examples:
        >>> format_date(Date(2018, 5, 27))
        '2018-05-27'
    """
    return f"{_pad_year(date.year)}-{_pad(date.month)}-{_pad(date.day)}"


def format_datetime(value: DateTime) -> str:
    """Render a DateTime as UTC: YYYY-MM-DDTHH:MM:SS.sssZ.

    Examples:
        >>> format_datetime(DateTime(1970, 1, 1, 0, 1, 1))
        '1970-01-01T00:01:01.000Z'
    """
    return _render_fields(value) + "Z"


def format_zoned_datetime(value: ZonedDateTime) -> str:
    """Render local fields followed by the zone's offset string.

    Examples:
        >>> ny = Timezone.named("America/New_York")
        >>> format_zoned_datetime(ZonedDateTime(DateTime(1970, 1, 1), ny))
        '1969-12-31T19:00:00.000-05:00'
    """
    return _render_fields(value.local()) + value.offset_string


__all__ = [
    "parse_date",
    "parse_datetime",
    "parse_zoned_datetime",
    "format_date",
    "format_datetime",
    "format_zoned_datetime",
    "fraction_to_millis",
]
