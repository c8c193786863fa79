"""Tests for ISO 8601 parsing."""

import logging

import pytest

from isochron import Date, DateTime, ParseError, Timezone
from isochron.format import parse_date, parse_datetime, parse_zoned_datetime
from isochron.format.iso8601 import fraction_to_millis
from isochron.problems import (
    DeadEnd,
    ExpectingDigit,
    ExpectingEnd,
    ExpectingRange,
    InvalidDate,
)


def dead_ends_of(parse, text):
    with pytest.raises(ParseError) as exc_info:
        parse(text)
    return exc_info.value.dead_ends


class TestParseDate:
    """Tests for parse_date."""

    def test_parse_extended(self):
        """Parse YYYY-MM-DD."""
        result = parse_date("2018-05-27")
        assert isinstance(result, Date)
        assert result.year == 2018
        assert result.month == 5
        assert result.day == 27

    def test_basic_and_extended_are_equivalent(self):
        """YYYYMMDD and YYYY-MM-DD produce the same date."""
        assert parse_date("19701201") == parse_date("1970-12-01") == Date(1970, 12, 1)

    def test_mixed_separators(self):
        """Each separator is optional on its own."""
        assert parse_date("1970-1201") == Date(1970, 12, 1)
        assert parse_date("197012-01") == Date(1970, 12, 1)

    def test_repeated_dashes_tolerated(self):
        """Any number of dashes may separate components."""
        assert parse_date("2018--05--27") == Date(2018, 5, 27)

    def test_year_zero(self):
        """Parse year 0000."""
        assert parse_date("0000-06-15") == Date(0, 6, 15)

    def test_last_day_of_year(self):
        """Parse 9999-12-31."""
        assert parse_date("9999-12-31") == Date(9999, 12, 31)

    def test_thirty_day_month(self):
        """April has 30 days."""
        assert parse_date("2018-04-30") == Date(2018, 4, 30)


class TestParseDateLeapYears:
    """Tests for leap-year aware day validation."""

    def test_leap_day_in_leap_year(self):
        """2020-02-29 is a real date."""
        assert parse_date("2020-02-29") == Date(2020, 2, 29)

    def test_leap_day_in_common_year(self):
        """2019-02-29 fails with InvalidDate in the leap-year context."""
        assert dead_ends_of(parse_date, "2019-02-29") == (
            DeadEnd(10, InvalidDate(2019, 2, 29, 28), ("leap-year",)),
        )

    def test_century_is_not_leap(self):
        """1900 is divisible by 100 but not 400."""
        (dead_end,) = dead_ends_of(parse_date, "1900-02-29")
        assert dead_end.problem == InvalidDate(1900, 2, 29, 28)

    def test_four_hundredth_year_is_leap(self):
        """2000 is divisible by 400."""
        assert parse_date("2000-02-29") == Date(2000, 2, 29)

    def test_day_31_in_30_day_month(self):
        """April 31 fails with the month's real length."""
        (dead_end,) = dead_ends_of(parse_date, "2018-04-31")
        assert dead_end.problem == InvalidDate(2018, 4, 31, 30)


class TestParseDateErrors:
    """Tests for parse_date diagnostics."""

    def test_month_13(self):
        """Month 13 is out of range."""
        assert dead_ends_of(parse_date, "2018-13-01") == (
            DeadEnd(7, ExpectingRange(13, 1, 12), ("month",)),
        )

    def test_month_zero(self):
        """Month 00 is out of range."""
        (dead_end,) = dead_ends_of(parse_date, "2018-00-01")
        assert dead_end.problem == ExpectingRange(0, 1, 12)

    def test_day_32(self):
        """Day 32 is out of range before calendar checks run."""
        assert dead_ends_of(parse_date, "2018-05-32") == (
            DeadEnd(10, ExpectingRange(32, 1, 31), ("day-in-month",)),
        )

    def test_short_year(self):
        """A three-digit year fails at the first non-digit."""
        assert dead_ends_of(parse_date, "201-05-27") == (
            DeadEnd(3, ExpectingDigit(), ("year",)),
        )

    def test_single_digit_month(self):
        """Months need two digits."""
        assert dead_ends_of(parse_date, "2018-5-27") == (
            DeadEnd(6, ExpectingDigit(), ("month",)),
        )

    def test_empty_string(self):
        """Empty input fails in the year."""
        assert dead_ends_of(parse_date, "") == (DeadEnd(0, ExpectingDigit(), ("year",)),)

    def test_trailing_input(self):
        """Anything after the day fails with ExpectingEnd."""
        assert dead_ends_of(parse_date, "2018-05-27T10:00:00Z") == (
            DeadEnd(10, ExpectingEnd(), ()),
        )

    def test_whitespace_not_stripped(self):
        """Surrounding whitespace is not part of the grammar."""
        assert dead_ends_of(parse_date, " 2018-05-27")[0].problem == ExpectingDigit()
        assert dead_ends_of(parse_date, "2018-05-27 ")[0].problem == ExpectingEnd()

    def test_non_ascii_digits_rejected(self):
        """Fullwidth digits are not ASCII digits."""
        (dead_end,) = dead_ends_of(parse_date, "２０１８-05-27")
        assert dead_end == DeadEnd(0, ExpectingDigit(), ("year",))

    def test_error_message(self):
        """str(ParseError) names the offset, context and problem."""
        with pytest.raises(ParseError) as exc_info:
            parse_date("2018-13-01")
        assert str(exc_info.value) == (
            "offset 7 (month): expected a value between 1 and 12, got 13"
        )

    def test_invalid_date_message(self):
        """InvalidDate explains the month length."""
        with pytest.raises(ParseError, match="2019-02 has 28 days, got day 29"):
            parse_date("2019-02-29")


class TestParseDateTime:
    """Tests for parse_datetime."""

    def test_utc_suffix(self):
        """Z means the fields are already UTC."""
        result = parse_datetime("1970-01-01T00:01:01.000Z")
        assert result == DateTime.from_unix_millis(0).add_millis(61_000)

    def test_missing_offset_means_utc(self):
        """No offset is the same as Z."""
        assert parse_datetime("2018-05-27T10:00:00") == parse_datetime(
            "2018-05-27T10:00:00Z"
        )

    def test_positive_offset_is_subtracted(self):
        """10:00 at +05:00 is 05:00 UTC."""
        assert parse_datetime("2018-05-27T10:00:00+05:00") == DateTime(2018, 5, 27, 5)

    def test_negative_offset_is_added(self):
        """19:00 at -05:00 is midnight UTC the next day."""
        assert parse_datetime("1969-12-31T19:00:00-05:00") == DateTime(1970, 1, 1)

    def test_unicode_minus(self):
        """U+2212 MINUS SIGN behaves like '-'."""
        assert parse_datetime("1969-12-31T19:00:00−05:00") == DateTime(1970, 1, 1)

    def test_offset_with_minutes(self):
        """Offset minutes are applied with the hours."""
        assert parse_datetime("2018-05-27T10:00:00+05:30") == DateTime(2018, 5, 27, 4, 30)

    def test_offset_without_colon(self):
        """+HHMM is accepted."""
        assert parse_datetime("2018-05-27T10:00:00+0530") == DateTime(2018, 5, 27, 4, 30)

    def test_offset_hours_only(self):
        """+HH is accepted with zero minutes."""
        assert parse_datetime("2018-05-27T10:00:00+05") == DateTime(2018, 5, 27, 5)

    def test_offset_with_seconds(self):
        """+HH:MM:SS and +HHMMSS carry a seconds field."""
        expected = DateTime(2018, 5, 27, 14)
        assert parse_datetime("2018-05-27T19:30:01+05:30:01") == expected
        assert parse_datetime("2018-05-27T19:30:01+053001") == expected
        assert parse_datetime("1850-01-01T07:03:58-04:56:02") == DateTime(1850, 1, 1, 12)

    def test_basic_format(self):
        """Every separator may be left out."""
        assert parse_datetime("20180527T100000Z") == DateTime(2018, 5, 27, 10)
        assert parse_datetime("20180527100000") == DateTime(2018, 5, 27, 10)

    def test_end_of_day(self):
        """23:59:59 parses."""
        assert parse_datetime("2018-05-27T23:59:59Z") == DateTime(2018, 5, 27, 23, 59, 59)


class TestParseDateTimeFraction:
    """Tests for fractional seconds."""

    def test_half_second(self):
        """.5 is 500 ms."""
        assert parse_datetime("2018-05-27T10:00:00.5Z").millisecond == 500

    def test_microseconds_round_to_millis(self):
        """.123456 rounds to 123 ms."""
        assert parse_datetime("2018-05-27T10:00:00.123456Z").millisecond == 123

    def test_rounds_half_up(self):
        """.1235 rounds up to 124 ms rather than truncating."""
        assert parse_datetime("2018-05-27T10:00:00.1235Z").millisecond == 124

    def test_fraction_to_millis(self):
        """Rounding happens before any carry into seconds."""
        assert fraction_to_millis("9996") == 1000
        assert fraction_to_millis("9994") == 999
        assert fraction_to_millis("0005") == 1
        assert fraction_to_millis("000000000000000000001") == 0

    def test_very_long_fraction(self):
        """Fractions of any length parse; only leading digits matter."""
        result = parse_datetime("2018-05-27T10:00:00." + "1" * 5000 + "Z")
        assert result == DateTime(2018, 5, 27, 10, 0, 0, millisecond=111)
        assert fraction_to_millis("9995" + "0" * 5000) == 1000

    def test_rounding_carries_into_next_day(self):
        """1000 ms after rounding rolls the date-time forward."""
        assert parse_datetime("2018-05-27T23:59:59.9996Z") == DateTime(2018, 5, 28)

    def test_fraction_before_offset(self):
        """The fraction is read before the offset."""
        result = parse_datetime("2018-05-27T10:00:00.250+01:00")
        assert result == DateTime(2018, 5, 27, 9, 0, 0, millisecond=250)


class TestParseDateTimeRollover:
    """Tests for offsets crossing calendar boundaries."""

    def test_forward_across_year(self):
        """A negative offset can move into the next year."""
        assert parse_datetime("2018-12-31T23:30:00-01:00") == DateTime(2019, 1, 1, 0, 30)

    def test_backward_across_year(self):
        """A positive offset can move into the previous year."""
        assert parse_datetime("2019-01-01T00:30:00+01:00") == DateTime(2018, 12, 31, 23, 30)

    def test_forward_into_leap_day(self):
        """Rolling forward from Feb 28 in a leap year lands on Feb 29."""
        assert parse_datetime("2020-02-28T23:00:00-02:00") == DateTime(2020, 2, 29, 1)

    def test_forward_past_common_february(self):
        """Rolling forward from Feb 28 in a common year lands on Mar 1."""
        assert parse_datetime("2019-02-28T23:00:00-02:00") == DateTime(2019, 3, 1, 1)


class TestParseDateTimeErrors:
    """Tests for parse_datetime diagnostics."""

    def test_hour_24(self):
        """Hour 24 is out of range."""
        assert dead_ends_of(parse_datetime, "2018-05-27T24:00:00Z") == (
            DeadEnd(13, ExpectingRange(24, 0, 23), ("hour",)),
        )

    def test_minute_60(self):
        """Minute 60 is out of range."""
        assert dead_ends_of(parse_datetime, "2018-05-27T10:60:00Z") == (
            DeadEnd(16, ExpectingRange(60, 0, 59), ("minute",)),
        )

    def test_second_60(self):
        """Leap seconds are not accepted."""
        assert dead_ends_of(parse_datetime, "2018-05-27T10:00:60Z") == (
            DeadEnd(19, ExpectingRange(60, 0, 59), ("second",)),
        )

    def test_missing_seconds(self):
        """Seconds are required."""
        assert dead_ends_of(parse_datetime, "2018-05-27T10:00Z") == (
            DeadEnd(16, ExpectingDigit(), ("second",)),
        )

    def test_dot_without_digits(self):
        """A '.' commits to a fraction, which needs a digit."""
        assert dead_ends_of(parse_datetime, "2018-05-27T10:00:00.Z") == (
            DeadEnd(20, ExpectingDigit(), ("fraction",)),
        )

    def test_sign_without_hours(self):
        """A sign commits to an offset, which needs hour digits."""
        assert dead_ends_of(parse_datetime, "2018-05-27T10:00:00+xx") == (
            DeadEnd(20, ExpectingDigit(), ("offset", "hour")),
        )

    def test_offset_hour_out_of_range(self):
        """Offset hours are bounded like clock hours."""
        assert dead_ends_of(parse_datetime, "2018-05-27T10:00:00+24:00") == (
            DeadEnd(22, ExpectingRange(24, 0, 23), ("offset", "hour")),
        )

    def test_colon_requires_offset_minutes(self):
        """+HH: must be followed by two minute digits."""
        assert dead_ends_of(parse_datetime, "2018-05-27T10:00:00+05:7") == (
            DeadEnd(24, ExpectingDigit(), ("offset", "minute")),
        )

    def test_offset_seconds_out_of_range(self):
        """Offset seconds are bounded like clock seconds."""
        assert dead_ends_of(parse_datetime, "2018-05-27T10:00:00+05:30:60") == (
            DeadEnd(28, ExpectingRange(60, 0, 59), ("offset", "second")),
        )

    def test_unknown_offset_character(self):
        """An unrecognized character after the time is trailing input."""
        assert dead_ends_of(parse_datetime, "2018-05-27T10:00:00#") == (
            DeadEnd(19, ExpectingEnd(), ()),
        )

    def test_invalid_calendar_date(self):
        """Date validation applies inside date-times."""
        assert dead_ends_of(parse_datetime, "2019-02-29T00:00:00Z") == (
            DeadEnd(10, InvalidDate(2019, 2, 29, 28), ("leap-year",)),
        )

    def test_date_only(self):
        """A date-time needs a time."""
        assert dead_ends_of(parse_datetime, "2018-05-27") == (
            DeadEnd(10, ExpectingDigit(), ("hour",)),
        )


class TestParseZonedDateTime:
    """Tests for parse_zoned_datetime."""

    def test_epoch_in_new_york(self, new_york):
        """The Unix epoch is 19:00 the previous evening in New York."""
        result = parse_zoned_datetime(new_york, "1970-01-01T00:00:00Z")
        assert result.instant == DateTime(1970, 1, 1)
        assert (result.year, result.month, result.day, result.hour) == (1969, 12, 31, 19)
        assert result.offset_string == "-05:00"

    def test_zone_is_forwarded(self, new_york):
        """The result holds the zone it was given."""
        result = parse_zoned_datetime(new_york, "2018-05-27T10:00:00Z")
        assert result.zone is new_york

    def test_text_offset_only_locates_instant(self):
        """The zone's offset, not the text's, is used for the result."""
        result = parse_zoned_datetime(Timezone.utc(), "2018-05-27T10:00:00+05:00")
        assert result.hour == 5
        assert result.offset_seconds == 0

    def test_instant_before_year_one(self, new_york):
        """Instants earlier than datetime can hold use local mean time."""
        result = parse_zoned_datetime(new_york, "0000-06-01T00:00:00Z")
        assert result.offset_seconds == -(4 * 3600 + 56 * 60 + 2)
        rolled = parse_zoned_datetime(new_york, "0001-01-01T00:00:00+01:00")
        assert rolled.instant == DateTime(0, 12, 31, 23)
        assert rolled.offset_string == "-04:56:02"

    def test_instant_after_year_9999(self, new_york):
        """Instants past datetime's range use the final rules."""
        result = parse_zoned_datetime(new_york, "9999-12-31T23:00:00-05:00")
        assert result.instant.year == 10000
        assert result.offset_seconds == -5 * 3600

    def test_parse_errors_propagate(self, new_york):
        """Invalid text raises ParseError before the zone is consulted."""
        with pytest.raises(ParseError):
            parse_zoned_datetime(new_york, "2018-13-01T00:00:00Z")


class TestParseLogging:
    """Tests for debug logging of parse failures."""

    def test_failure_logged_at_debug(self, caplog):
        """A failed parse logs the input and first dead end."""
        with caplog.at_level(logging.DEBUG, logger="isochron"):
            with pytest.raises(ParseError):
                parse_date("2018-13-01")
        assert "could not parse '2018-13-01'" in caplog.text
        assert "offset 7 (month)" in caplog.text

    def test_success_not_logged(self, caplog):
        """Successful parses stay quiet."""
        with caplog.at_level(logging.DEBUG, logger="isochron"):
            parse_date("2018-05-27")
        assert caplog.text == ""
