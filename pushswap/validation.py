"""Validation and parsing of command-line integer arguments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_INT_MAX_DIGITS = "2147483647"
_INT_MIN_DIGITS = "2147483648"
_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_WHITESPACE = " \f\n\r\t\v"
_DIGITS = "0123456789"


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct 32-bit integers."""


def _split_sign(text: str) -> tuple[int, str]:
    if text.startswith(("-", "+")):
        return (-1 if text[0] == "-" else 1), text[1:]
    return 1, text


def is_digit_str(text: str) -> bool:
    """Return True if text is an optional sign followed by one or more ASCII digits."""
    _, body = _split_sign(text)
    return bool(body) and all(ch in _DIGITS for ch in body)


def is_int_range(text: str) -> bool:
    """Return True if the signed decimal text fits in a 32-bit signed integer."""
    sign, body = _split_sign(text)
    body = body.lstrip("0")
    if len(body) >= 11:
        return False
    if len(body) <= 9:
        return True
    limit = _INT_MAX_DIGITS if sign == 1 else _INT_MIN_DIGITS
    return body <= limit


def has_duplicates(values: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if the values are in non-decreasing order."""
    return all(left <= right for left, right in zip(values, values[1:]))


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def to_int(text: str) -> int:
    """Convert text to a 32-bit int the way atoi does.

    Leading whitespace and one sign are accepted, parsing stops at the first
    non-digit, and a value overflowing a 64-bit long is clamped before the
    result is truncated to 32 bits.
    """
    sign, body = _split_sign(text.lstrip(_WHITESPACE))
    number = 0
    for ch in body:
        if ch not in _DIGITS:
            break
        digit = ord(ch) - ord("0")
        if sign == 1 and number > (_LONG_MAX - digit) // 10:
            return _wrap_int32(_LONG_MAX)
        if sign == -1 and -number < -((-(_LONG_MIN + digit)) // 10):
            return _wrap_int32(_LONG_MIN)
        number = number * 10 + digit
    return _wrap_int32(number * sign)


def parse_args(args: Iterable[str]) -> list[int]:
    """Parse the arguments into distinct integers, raising InputError if invalid."""
    values = []
    for arg in args:
        if not is_digit_str(arg) or not is_int_range(arg):
            raise InputError(f"invalid integer argument: {arg!r}")
        values.append(to_int(arg))
    if has_duplicates(values):
        raise InputError("duplicate values in arguments")
    return values