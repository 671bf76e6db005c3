"""A small printf supporting the %c %s %d %i %u %p %x %X and %% conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"
NULL_STRING = "(null)"
POINTER_PREFIX = "0x"

_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1


def number_in_base(n: int, base: str) -> str:
    """Write the non-negative integer ``n`` with the digits of ``base``.

    Raises ``ValueError`` if ``n`` is negative or ``base`` has fewer than two
    digits.
    """
    if n < 0:
        raise ValueError("number must not be negative")
    radix = len(base)
    if radix < 2:
        raise ValueError(f"base needs at least two digits: {base!r}")
    digits = [base[n % radix]]
    n //= radix
    while n:
        digits.append(base[n % radix])
        n //= radix
    return "".join(reversed(digits))


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c needs a single character")
        return value
    return chr(int(value) & 0xFF)


def _format_string(value: Any) -> str:
    return NULL_STRING if value is None else str(value)


def _format_int(value: Any) -> str:
    number = _to_int32(int(value))
    if number < 0:
        return "-" + number_in_base(-number, DECIMAL)
    return number_in_base(number, DECIMAL)


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _POINTER_MASK
    return POINTER_PREFIX + number_in_base(address, HEX_LOWER)


_CONVERSIONS = {
    "c": _format_char,
    "s": _format_string,
    "d": _format_int,
    "i": _format_int,
    "u": lambda value: number_in_base(int(value) & _UINT_MASK, DECIMAL),
    "p": _format_pointer,
    "x": lambda value: number_in_base(int(value) & _UINT_MASK, HEX_LOWER),
    "X": lambda value: number_in_base(int(value) & _UINT_MASK, HEX_UPPER),
}


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is None:
            return
        converter = _CONVERSIONS.get(spec)
        if converter is None:
            # "%%" and unknown conversions print the character itself.
            yield spec
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        yield converter(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled from ``args``.

    A lone ``%`` at the end of ``fmt`` is dropped, and an unknown conversion
    character is copied as it is. Integers wrap to 32 bits. Raises
    ``TypeError`` when there are fewer arguments than conversions.
    """
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)