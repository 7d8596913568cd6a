"""DurationString value type."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import timedelta
from functools import total_ordering
from typing import Any

from pydurationstring._constants import MAX_DURATION_NANOS, MICROSECOND
from pydurationstring._errors import ERR_MSG_NEGATIVE, ERR_MSG_OVERFLOW, DurationOverflowError
from pydurationstring._formatter import format_nanoseconds
from pydurationstring._parser import parse_nanoseconds


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def timedelta_to_nanoseconds(td: timedelta) -> int:
    """Exact nanosecond count of a ``timedelta`` (negative if ``td`` is)."""
    return ((td.days * 86_400 + td.seconds) * 1_000_000 + td.microseconds) * MICROSECOND


def _nanoseconds_of(other: Any) -> int | None:
    """Nanosecond count of a comparable operand, or None if unsupported."""
    if isinstance(other, DurationString):
        return other.nanoseconds
    if isinstance(other, timedelta):
        return timedelta_to_nanoseconds(other)
    if _is_int(other):
        return other
    return None


@total_ordering
@dataclass(frozen=True, eq=False)
class DurationString:
    """A non-negative duration with nanosecond resolution.

    ``str()`` gives the canonical compact form (``"1h30m"`` parses to a
    value that prints as ``"90m"``). Compares equal to ``timedelta`` and
    to ``int`` nanosecond counts of the same length.

    The hash is that of the nanosecond count, so it agrees with equal
    ``DurationString`` and ``int`` values but not with an equal
    ``timedelta``. Don't mix ``DurationString`` and ``timedelta`` keys in
    one set or dict.
    """

    nanoseconds: int = 0

    def __post_init__(self) -> None:
        if not _is_int(self.nanoseconds):
            raise TypeError(
                f"nanoseconds must be an int, not {type(self.nanoseconds).__name__}"
            )
        if self.nanoseconds < 0:
            raise DurationOverflowError(
                ERR_MSG_NEGATIVE,
                f"negative duration: {self.nanoseconds}ns",
            )
        if self.nanoseconds > MAX_DURATION_NANOS:
            raise DurationOverflowError(
                ERR_MSG_OVERFLOW,
                f"{self.nanoseconds}ns exceeds maximum duration {MAX_DURATION_NANOS}ns",
            )

    @classmethod
    def from_string(cls, text: str) -> DurationString:
        return cls(parse_nanoseconds(text))

    @classmethod
    def from_timedelta(cls, td: timedelta) -> DurationString:
        return cls(timedelta_to_nanoseconds(td))

    @classmethod
    def sum(cls, durations: Iterable[DurationString]) -> DurationString:
        """Total of ``durations``; an empty iterable sums to zero."""
        total = cls()
        for d in durations:
            total = total + d
        return total

    def to_timedelta(self) -> timedelta:
        """Convert to ``timedelta``, truncating below one microsecond.

        Raises ``OverflowError`` beyond ``timedelta.max``.
        """
        return timedelta(microseconds=self.nanoseconds // MICROSECOND)

    def total_seconds(self) -> float:
        return self.nanoseconds / 1_000_000_000

    def __str__(self) -> str:
        return format_nanoseconds(self.nanoseconds)

    def __repr__(self) -> str:
        return f"DurationString({str(self)!r})"

    def __int__(self) -> int:
        return self.nanoseconds

    def __bool__(self) -> bool:
        return self.nanoseconds != 0

    def __hash__(self) -> int:
        return hash(self.nanoseconds)

    # ---- Comparison ----

    def __eq__(self, other: object) -> bool:
        nanos = _nanoseconds_of(other)
        if nanos is None:
            return NotImplemented
        return self.nanoseconds == nanos

    def __lt__(self, other: object) -> bool:
        nanos = _nanoseconds_of(other)
        if nanos is None:
            return NotImplemented
        return self.nanoseconds < nanos

    # ---- Arithmetic ----

    def __add__(self, other: DurationString | timedelta) -> DurationString:
        if isinstance(other, (DurationString, timedelta)):
            return DurationString(self.nanoseconds + _nanoseconds_of(other))
        return NotImplemented

    def __radd__(self, other: Any) -> Any:
        if isinstance(other, timedelta):
            return other + self.to_timedelta()
        # sum() starts from 0
        if _is_int(other) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: DurationString | timedelta) -> DurationString:
        if isinstance(other, (DurationString, timedelta)):
            return DurationString(self.nanoseconds - _nanoseconds_of(other))
        return NotImplemented

    def __rsub__(self, other: Any) -> Any:
        if isinstance(other, timedelta):
            if timedelta_to_nanoseconds(other) < self.nanoseconds:
                raise DurationOverflowError(
                    ERR_MSG_NEGATIVE,
                    f"{other!r} - {self!r} is negative",
                )
            return other - self.to_timedelta()
        return NotImplemented

    def __mul__(self, factor: int) -> DurationString:
        if _is_int(factor):
            return DurationString(self.nanoseconds * factor)
        return NotImplemented

    __rmul__ = __mul__

    def __floordiv__(self, divisor: int) -> DurationString:
        if _is_int(divisor):
            return DurationString(self.nanoseconds // divisor)
        return NotImplemented

    # Integer nanosecond division, same as //
    __truediv__ = __floordiv__
