"""Parse diagnostics.

A failed parse is described by one or more dead ends. Each dead end pairs
a Problem (what went wrong) with the character offset where it happened
and the stack of grammar contexts that were open at that point.

The Problem variants form a closed set. Callers can match on them
exhaustively:

    >>> match error.first.problem:
    ...     case ExpectingRange(value, lo, hi):
    ...         ...
    ...     case InvalidDate(year, month, day, max_day):
    ...         ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ExpectingDigit:
    """A required ASCII digit was missing."""

    def describe(self) -> str:
        return "expected a digit"


@dataclass(frozen=True)
class ExpectingRange:
    """A parsed integer fell outside an inclusive bound."""

    value: int
    lo: int
    hi: int

    def describe(self) -> str:
        return f"expected a value between {self.lo} and {self.hi}, got {self.value}"


@dataclass(frozen=True)
class ExpectingDot:
    """A fractional-second suffix did not start with '.'."""

    def describe(self) -> str:
        return "expected '.'"


@dataclass(frozen=True)
class ExpectingZ:
    """The UTC marker 'Z' was not found."""

    def describe(self) -> str:
        return "expected 'Z'"


@dataclass(frozen=True)
class ExpectingSign:
    """An offset sign was not one of '+', '-' or U+2212."""

    def describe(self) -> str:
        return "expected '+', '-' or '−'"


@dataclass(frozen=True)
class ExpectingEnd:
    """Input continued after a complete value."""

    def describe(self) -> str:
        return "expected end of input"


@dataclass(frozen=True)
class BadInt:
    """A digit run could not be converted to an integer."""

    def describe(self) -> str:
        return "could not convert digits to an integer"


@dataclass(frozen=True)
class InvalidDate:
    """A (year, month, day) triple is not a real calendar date.

    Attributes:
        year: The parsed year.
        month: The parsed month (already within 1-12).
        day: The parsed day (already within 1-31).
        max_day: Number of days the month actually has in that year.
    """

    year: int
    month: int
    day: int
    max_day: int

    def describe(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d} has {self.max_day} days, "
            f"got day {self.day}"
        )


@dataclass(frozen=True)
class ExpectingNDigits:
    """A digit run had the wrong length."""

    n: int
    got: str

    def describe(self) -> str:
        return f"expected {self.n} digits, got {self.got!r}"


@dataclass(frozen=True)
class Other:
    """A failure outside the other variants."""

    message: str

    def describe(self) -> str:
        return self.message


Problem = Union[
    ExpectingDigit,
    ExpectingRange,
    ExpectingDot,
    ExpectingZ,
    ExpectingSign,
    ExpectingEnd,
    BadInt,
    InvalidDate,
    ExpectingNDigits,
    Other,
]


@dataclass(frozen=True)
class DeadEnd:
    """One recorded parse failure.

    Attributes:
        offset: Character index into the input where the failure occurred.
        problem: What went wrong.
        context_stack: Names of the grammar contexts open at the failure,
            outermost first (e.g. ("offset", "timezone polarity")).
    """

    offset: int
    problem: Problem
    context_stack: tuple[str, ...] = ()

    def __str__(self) -> str:
        where = f"offset {self.offset}"
        if self.context_stack:
            where += f" ({' > '.join(self.context_stack)})"
        return f"{where}: {self.problem.describe()}"


__all__ = [
    "ExpectingDigit",
    "ExpectingRange",
    "ExpectingDot",
    "ExpectingZ",
    "ExpectingSign",
    "ExpectingEnd",
    "BadInt",
    "InvalidDate",
    "ExpectingNDigits",
    "Other",
    "Problem",
    "DeadEnd",
]
