"""Integer parsing and formatting with fixed-width wrap-around."""

from __future__ import annotations

from itertools import pairwise

_ATOI_SPACE = " \t\n\r\f\v"
_DIGITS = "0123456789"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed integer of ``bits`` bits."""
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _parse_decimal(text: str) -> int:
    """Parse leading whitespace, an optional sign and decimal digits."""
    rest = text.lstrip(_ATOI_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = value * 10 + _DIGITS.index(char)
    return sign * value


def atoi(text: str) -> int:
    """Parse a decimal integer prefix of ``text`` as a 32-bit signed int.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text without digits gives 0. Out-of-range values wrap.
    """
    return _wrap(_parse_decimal(text), 32)


def atol(text: str) -> int:
    """Parse a decimal integer prefix of ``text`` as a 64-bit signed long."""
    return _wrap(_parse_decimal(text), 64)


def _base_length(base: str) -> int:
    """Return the radix described by ``base`` or raise ``ValueError``.

    A base is at least two characters long, holds no sign after its first
    character, and each character follows the previous one in code order,
    except that a digit may be followed by ``a`` or ``A``.
    """
    if len(base) < 2:
        raise ValueError(f"base too short: {base!r}")
    for previous, char in pairwise(base):
        if char in "+-":
            raise ValueError(f"sign in base: {base!r}")
        if ord(char) - ord(previous) != 1 and not (
            previous in _DIGITS and char in "aA"
        ):
            raise ValueError(f"base characters not consecutive: {base!r}")
    return len(base)


def _digit_value(char: str) -> int | None:
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 10
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    return None


def atoi_base(text: str, base: str) -> int:
    """Parse ``text`` as a signed number in the radix given by ``base``.

    Only the length of ``base`` matters once it is valid: digits are read as
    ``0-9`` then ``a-z`` (either case). Parsing stops at the first character
    that is not a digit of the radix. Raises ``ValueError`` for an invalid
    base. The result wraps to a 32-bit signed int.
    """
    radix = _base_length(base)
    if not text:
        return 0
    rest = text.lstrip("\t\n\v\f\r ")
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    total = 0
    for char in rest:
        value = _digit_value(char)
        if value is None or value >= radix:
            break
        total = total * radix + value
    return _wrap(sign * total, 32)


def itoa(n: int) -> str:
    """Format ``n`` as a decimal string."""
    return str(n)