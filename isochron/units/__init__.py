"""Temporal units.

This module provides:
    - Timezone: fixed UTC offset or IANA rule set
    - format_offset: canonical +HH:MM rendering of an offset in seconds
"""

from __future__ import annotations

from isochron.units.timezone import Timezone, format_offset

__all__: list[str] = [
    "Timezone",
    "format_offset",
]
