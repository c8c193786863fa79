"""Isochron exception hierarchy.

All Isochron-specific exceptions inherit from IsochronError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from isochron.problems import DeadEnd


class IsochronError(Exception):
    """Base exception for all Isochron errors."""

    pass


class ValidationError(IsochronError):
    """Invalid input values.

    Raised when a temporal value is constructed from out-of-range
    components.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Hour value outside 0-23
    """

    pass


class ParseError(IsochronError):
    """Failed to parse an ISO 8601 string.

    Carries every dead end recorded at the point where parsing stopped,
    in the order the alternatives were tried. There is always at least
    one.

    Attributes:
        dead_ends: Tuple of DeadEnd records (offset, problem, context stack).

    Examples:
        >>> from isochron import parse_date
        >>> try:
        ...     parse_date("2019-02-29")
        ... except ParseError as e:
        ...     print(e.dead_ends[0].problem)
        InvalidDate(year=2019, month=2, day=29, max_day=28)
    """

    def __init__(self, dead_ends: Iterable[DeadEnd]) -> None:
        self.dead_ends: tuple[DeadEnd, ...] = tuple(dead_ends)
        if not self.dead_ends:
            raise ValueError("ParseError requires at least one dead end")
        super().__init__(self._summary())

    @property
    def first(self) -> DeadEnd:
        """Return the first recorded dead end."""
        return self.dead_ends[0]

    def _summary(self) -> str:
        if len(self.dead_ends) == 1:
            return str(self.dead_ends[0])
        lines = [f"{len(self.dead_ends)} alternatives failed:"]
        lines.extend(f"  {dead_end}" for dead_end in self.dead_ends)
        return "\n".join(lines)


class TimezoneError(IsochronError):
    """Invalid or unknown timezone.

    Raised when a timezone specification is invalid.

    Examples:
        - Unknown IANA key such as "Mars/Olympus_Mons"
        - Fixed offset outside -14h to +14h
    """

    pass


__all__ = [
    "IsochronError",
    "ValidationError",
    "ParseError",
    "TimezoneError",
]
