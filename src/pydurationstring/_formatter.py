"""Canonical formatting of nanosecond counts."""

from pydurationstring._constants import UNITS


def format_nanoseconds(nanos: int) -> str:
    """Format a nanosecond count using the largest unit that divides it exactly."""
    for unit, ns_per_unit in UNITS.items():
        if nanos % ns_per_unit == 0:
            return f"{nanos // ns_per_unit}{unit}"
    return f"{nanos}ns"
