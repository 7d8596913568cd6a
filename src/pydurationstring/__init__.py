"""pydurationstring - Convert compact duration strings to durations and back."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pydurationstring")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from datetime import timedelta

from pydurationstring._constants import MAX_DURATION_NANOS, UNITS
from pydurationstring._errors import (
    DurationOverflowError,
    DurationStringError,
    FormatError,
    IntegerParseError,
)
from pydurationstring._formatter import format_nanoseconds
from pydurationstring._parser import parse_nanoseconds
from pydurationstring.duration import DurationString, timedelta_to_nanoseconds

__all__ = [
    "parse",
    "format",
    "DurationString",
    "DurationStringError",
    "DurationOverflowError",
    "FormatError",
    "IntegerParseError",
    "MAX_DURATION_NANOS",
    "UNITS",
]


def parse(text: str) -> DurationString:
    """Parse a compact duration string such as ``"1h30m"`` or ``"5m 30s"``.

    Each ``<number><unit>`` group is converted and the groups are summed,
    so ``"1h128m"`` is 3 hours 8 minutes. Whitespace is ignored.

    Args:
        text: The duration string. Units are ``ns``, ``us``, ``ms``, ``s``,
            ``m``, ``h``, ``d``, ``w`` and ``y`` (365.2425 days).

    Returns:
        The parsed DurationString.

    Raises:
        FormatError: If the text is empty, or a number or unit is missing
            or unknown.
        IntegerParseError: If a numeric field is not a valid u64.
        DurationOverflowError: If the duration exceeds the representable range.
    """
    return DurationString(parse_nanoseconds(text))


def format(value: DurationString | timedelta | int) -> str:
    """Format a duration using the largest unit that represents it exactly.

    Args:
        value: A DurationString, a ``timedelta``, or a nanosecond count.

    Returns:
        The canonical string, e.g. ``"1s"`` for 1000 milliseconds and
        ``"61s"`` for 61000 milliseconds.

    Raises:
        DurationOverflowError: If ``value`` is negative or out of range.
        TypeError: If ``value`` is not a supported type.
    """
    if isinstance(value, timedelta):
        value = DurationString(timedelta_to_nanoseconds(value))
    elif not isinstance(value, DurationString):
        value = DurationString(value)
    return format_nanoseconds(value.nanoseconds)
