"""Reading and validating the integers given to push_swap."""

from __future__ import annotations

from typing import Iterable, List

from pushswap.stacks import Number

INT_MIN = -2147483648
INT_MAX = 2147483647

_DIGITS = frozenset("0123456789")
_ATOI_SPACE = frozenset(" \t\n\v\f\r")


class ParseError(ValueError):
    """Raised when the arguments are not a valid list of integers."""


def is_integer_token(text: str) -> bool:
    """Tell whether ``text`` is an optional sign followed by ASCII digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return bool(body) and all(ch in _DIGITS for ch in body)


def parse_integer(text: str) -> int:
    """Convert a token accepted by :func:`is_integer_token` to an int."""
    if not is_integer_token(text):
        raise ParseError(f"not an integer: {text!r}")
    sign = -1 if text[0] == "-" else 1
    digits = text[1:] if text[0] in "+-" else text
    number = 0
    for ch in digits:
        number = number * 10 + (ord(ch) - ord("0"))
    return sign * number


def split(text: str, separator: str) -> List[str]:
    """Split on a single character, dropping empty pieces."""
    return [piece for piece in text.split(separator) if piece]


def _wrap_int32(number: int) -> int:
    number &= 0xFFFFFFFF
    return number - 0x100000000 if number > INT_MAX else number


def atoi(text: str) -> int:
    """Lenient conversion: skip leading whitespace, one sign, then digits.

    Two signs in a row give 0; the result wraps like a 32-bit int.
    """
    pos = 0
    while pos < len(text) and text[pos] in _ATOI_SPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if pos + 1 < len(text) and text[pos + 1] in "+-":
            return 0
        if text[pos] == "-":
            sign = -1
        pos += 1
    number = 0
    while pos < len(text) and text[pos] in _DIGITS:
        number = number * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return _wrap_int32(sign * number)


def has_duplicates(numbers: Iterable[Number]) -> bool:
    """Tell whether two numbers share the same value."""
    seen = set()
    for number in numbers:
        if number.value in seen:
            return True
        seen.add(number.value)
    return False


def parse_args(args: Iterable[str]) -> List[Number]:
    """Turn command-line arguments into numbers for stack ``a``.

    Each argument may hold several space-separated integers. Raises
    :class:`ParseError` on a malformed token, a value outside the 32-bit
    range, or when no integer is given at all.
    """
    numbers: List[Number] = []
    for arg in args:
        for token in split(arg, " "):
            if not is_integer_token(token):
                raise ParseError(f"not an integer: {token!r}")
            value = parse_integer(token)
            if value > INT_MAX or value < INT_MIN:
                raise ParseError(f"out of range: {token!r}")
            numbers.append(Number(value, 0))
    if not numbers:
        raise ParseError("no integers given")
    return numbers