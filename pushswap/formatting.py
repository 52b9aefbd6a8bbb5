"""A small printf: %c %s %p %d %i %u %x %X and %%, without flags or widths."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, Union

_UPPER_LETTERS = "ABCDE"
_LOWER_LETTERS = "abcde"
_INT32_MAX = 0x7FFFFFFF
_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def _wrap_int32(number: int) -> int:
    number &= _UINT32_MASK
    return number - 0x100000000 if number > _INT32_MAX else number


def hex_letter(digit: int, upper: bool) -> str:
    """Letter for a hexadecimal digit from 10 upwards; anything past 14 gives F."""
    letters = _UPPER_LETTERS if upper else _LOWER_LETTERS
    if 10 <= digit <= 14:
        return letters[digit - 10]
    return "F" if upper else "f"


def utoa(number: int) -> str:
    """Decimal text of ``number`` taken as a 32-bit unsigned integer."""
    return str(number & _UINT32_MASK)


def itoa(number: int) -> str:
    """Decimal text of ``number`` taken as a 32-bit signed integer."""
    return str(_wrap_int32(number))


def format_char(char: Union[str, int]) -> str:
    """One character, given either as a string or as a code point."""
    if isinstance(char, int):
        return chr(char & 0xFF)
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def format_string(text: Optional[str]) -> str:
    """The text itself, or ``(null)`` for a missing string."""
    return "(null)" if text is None else text


def format_integer(number: int) -> str:
    """Signed decimal form, as for ``%d`` and ``%i``."""
    return itoa(number)


def format_unsigned(number: int) -> str:
    """Unsigned decimal form, as for ``%u``."""
    return utoa(number)


def format_hex(number: int, upper: bool) -> str:
    """Hexadecimal digits of ``number`` as a 64-bit unsigned value."""
    number &= _UINT64_MASK
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 16)
        digits.append(str(remainder) if remainder < 10 else hex_letter(remainder, upper))
    return "".join(reversed(digits))


def format_pointer(address: Optional[int]) -> str:
    """``0x`` followed by lower-case hex, or ``(nil)`` for a null address."""
    if not address:
        return "(nil)"
    return "0x" + format_hex(address, False)


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_integer,
    "i": format_integer,
    "u": format_unsigned,
    "x": lambda number: format_hex(number & _UINT32_MASK, False),
    "X": lambda number: format_hex(number & _UINT32_MASK, True),
}


def _render(template: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        conversion = next(chars, "")
        if conversion == "%":
            yield "%"
            continue
        handler = _CONVERSIONS.get(conversion)
        if handler is None:
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise ValueError(
                f"not enough arguments for %{conversion} in {template!r}"
            ) from None
        yield handler(arg)


def sprintf(template: str, *args: Any) -> str:
    """Format ``template`` with ``args`` and return the result.

    Unknown conversions produce nothing and consume no argument; a lone
    trailing ``%`` is dropped. Raises :class:`ValueError` when the
    template asks for more arguments than were given.
    """
    return "".join(_render(template, args))


def printf(template: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = sprintf(template, *args)
    sys.stdout.write(text)
    return len(text)