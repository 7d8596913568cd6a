"""Tokenizer and parser for compact duration strings such as ``1h30m``."""

from __future__ import annotations

import logging

from pydurationstring._constants import MAX_DURATION_NANOS, MAX_U64, U64_DIGITS, UNITS
from pydurationstring._errors import (
    ERR_MSG_FORMAT,
    ERR_MSG_INT_TOO_LARGE,
    ERR_MSG_INVALID_DIGIT,
    ERR_MSG_OVERFLOW,
    DurationOverflowError,
    DurationStringError,
    FormatError,
    IntegerParseError,
)

logger = logging.getLogger(__name__)

# ASCII information separators: str.isspace() is true for them, but they are not skipped
_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def _is_whitespace(ch: str) -> bool:
    return ch.isspace() and ch not in _SEPARATORS


def _group(text: str) -> list[tuple[str, str]]:
    """Split whitespace-free input into ``(number, unit)`` text pairs.

    A new group starts on every unit -> digit transition. The first group
    always exists, so empty input yields ``[("", "")]``.
    """
    groups: list[tuple[list[str], list[str]]] = [([], [])]
    prev_numeric = True
    for ch in text:
        numeric = ch.isnumeric()
        if numeric and not prev_numeric:
            groups.append(([], []))
        digits, unit = groups[-1]
        if numeric:
            digits.append(ch)
        else:
            unit.append(ch)
        prev_numeric = numeric
    return [("".join(digits), "".join(unit)) for digits, unit in groups]


def _parse_u64(digits: str, source: str) -> int:
    if not digits:
        raise FormatError(ERR_MSG_FORMAT, f"missing number in duration: {source!r}")
    if not (digits.isascii() and digits.isdecimal()):
        cause = ValueError(f"invalid digit in {digits!r}")
        raise IntegerParseError(
            ERR_MSG_INVALID_DIGIT,
            f"cannot parse {digits!r} as an integer in duration: {source!r}",
            wrapped=cause,
        ) from cause
    significant = digits.lstrip("0") or "0"
    if len(significant) > U64_DIGITS or int(significant) > MAX_U64:
        cause = OverflowError(f"{len(significant)}-digit value exceeds {MAX_U64}")
        raise IntegerParseError(
            ERR_MSG_INT_TOO_LARGE,
            f"field {digits[:40]!r} does not fit in 64 bits in duration: {source[:80]!r}",
            wrapped=cause,
        ) from cause
    return int(significant)


def _to_nanoseconds(period: int, unit: str, source: str) -> int:
    ns_per_unit = UNITS.get(unit)
    if ns_per_unit is None:
        raise FormatError(ERR_MSG_FORMAT, f"unknown unit {unit!r} in duration: {source!r}")
    nanos = period * ns_per_unit
    if nanos > MAX_DURATION_NANOS:
        raise DurationOverflowError(
            ERR_MSG_OVERFLOW,
            f"{period}{unit} exceeds maximum duration in: {source!r}",
        )
    return nanos


def parse_nanoseconds(text: str) -> int:
    """Parse a duration string into a nanosecond count.

    Whitespace anywhere in the input is ignored. Groups are validated
    left to right, and the first failing group decides the error.

    Raises:
        FormatError: If the input is empty, a number is missing, or a unit
            is missing or unknown.
        IntegerParseError: If a numeric field is not a valid u64.
        DurationOverflowError: If a group or the total exceeds the
            representable range.
        TypeError: If ``text`` is not a ``str``.
    """
    if not isinstance(text, str):
        raise TypeError(f"duration must be a str, not {type(text).__name__}")

    compact = "".join(ch for ch in text if not _is_whitespace(ch))
    try:
        if not compact:
            raise FormatError(ERR_MSG_FORMAT, f"empty duration: {text!r}")

        total = 0
        for digits, unit in _group(compact):
            period = _parse_u64(digits, text)
            total += _to_nanoseconds(period, unit, text)
            if total > MAX_DURATION_NANOS:
                raise DurationOverflowError(
                    ERR_MSG_OVERFLOW,
                    f"sum exceeds maximum duration in: {text!r}",
                )
    except DurationStringError as e:
        logger.debug("Rejected duration %r: %s", text, e.internal())
        raise
    return total
