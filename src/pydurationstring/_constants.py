"""Unit conversion constants and range limits for duration strings."""

from types import MappingProxyType

NANOSECOND = 1
MICROSECOND = 1_000
MILLISECOND = 1_000_000
SECOND = 1_000_000_000
MINUTE = 60 * SECOND
HOUR = 3_600 * SECOND
DAY = 86_400 * SECOND
WEEK = 604_800 * SECOND
YEAR = 31_556_926 * SECOND
"""365.2425 days. Fixed approximation, no leap-year tracking."""

MAX_U64 = 2**64 - 1
"""Largest value accepted for a single numeric field."""

U64_DIGITS = len(str(MAX_U64))
"""Digits in MAX_U64; longer fields overflow once leading zeros are stripped."""

MAX_DURATION_NANOS = MAX_U64 * SECOND + (SECOND - 1)
"""Largest representable duration: u64 seconds plus a sub-second part."""

# Unit suffix -> nanoseconds per unit, largest first
UNITS: MappingProxyType[str, int] = MappingProxyType({
    "y": YEAR,
    "w": WEEK,
    "d": DAY,
    "h": HOUR,
    "m": MINUTE,
    "s": SECOND,
    "ms": MILLISECOND,
    "us": MICROSECOND,
    "ns": NANOSECOND,
})

DURATION_PATTERN = r"^\s*(\d[\d\s]*(n\s*s|u\s*s|m\s*s|[smhdwy])\s*)+$"
"""Regex for well-formed input, used for JSON schema output.

Whitespace may appear anywhere, as the parser skips it. Range limits are
not expressed.
"""
