"""Number helpers: hexadecimal conversion, integer roots and powers."""

from __future__ import annotations

import math

_HEX_VALUES = {char: value for value, char in enumerate("0123456789abcdef")}
_HEX_VALUES.update({char: value for value, char in enumerate("ABCDEF", start=10)})


def hex_to_int(hex_text: str) -> int:
    """Parse hexadecimal digits (either case, no prefix); empty text is 0."""
    number = 0
    for char in hex_text:
        try:
            digit = _HEX_VALUES[char]
        except KeyError:
            raise ValueError(f"invalid hexadecimal digit {char!r}") from None
        number = number * 16 + digit
    return number


def int_to_hex(number: int) -> str:
    """Write a non-negative number in lower-case hexadecimal.

    Zero has no significant digits and gives the empty string.
    """
    if number < 0:
        raise ValueError("number must not be negative")
    if number == 0:
        return ""
    return format(number, "x")


def int_sqrt(x: int) -> int:
    """Return the exact integer square root of ``x``, or 0 if there is none."""
    if x < 0:
        return 0
    root = math.isqrt(x)
    return root if root * root == x else 0


def power(base: float, exponent: int) -> float:
    """Raise ``base`` to a non-negative integer ``exponent`` by repeated multiplication."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1.0
    for _ in range(exponent):
        result *= base
    return result