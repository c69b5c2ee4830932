"""Conversions between integers and their decimal or hexadecimal text."""

from __future__ import annotations

_INT_BITS = 32
_LONG_BITS = 64
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _wrap_signed(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str, *, skip_space: bool, bits: int) -> int:
    pos = 0
    if skip_space:
        while pos < len(text) and text[pos] in _WHITESPACE:
            pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    total = 0
    while pos < len(text) and text[pos] in _DIGITS:
        total = total * 10 + int(text[pos])
        pos += 1
    return _wrap_signed(sign * total, bits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; text without digits gives 0.
    The result wraps like a 32-bit signed integer.
    """
    return _parse(text, skip_space=True, bits=_INT_BITS)


def atol(text: str) -> int:
    """Parse a leading decimal integer with an optional sign.

    Unlike :func:`atoi`, leading whitespace is not skipped. The result
    wraps like a 64-bit signed integer.
    """
    return _parse(text, skip_space=False, bits=_LONG_BITS)


def itoa(n: int) -> str:
    """Decimal text of a signed integer."""
    return str(int(n))


def uitoa(n: int) -> str:
    """Decimal text of ``n`` taken as a 32-bit unsigned integer."""
    return str(int(n) & 0xFFFFFFFF)


def _hex(n: int, alphabet: str, *, zero: str) -> str:
    if n == 0:
        return zero
    out = []
    while n:
        n, rem = divmod(n, 16)
        out.append(alphabet[rem])
    return "".join(reversed(out))


_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"


def xtoa(n: int) -> str:
    """Lower-case hexadecimal text of ``n`` as a 32-bit unsigned integer."""
    return _hex(int(n) & 0xFFFFFFFF, _LOWER_HEX, zero="0")


def upper_xtoa(n: int) -> str:
    """Upper-case hexadecimal text of ``n`` as a 32-bit unsigned integer."""
    return _hex(int(n) & 0xFFFFFFFF, _UPPER_HEX, zero="0")


def ptoa(n: int) -> str:
    """Lower-case hexadecimal text of an address-sized unsigned value.

    Zero gives an empty string, since there are no digits to emit.
    """
    return _hex(int(n) & ((1 << _LONG_BITS) - 1), _LOWER_HEX, zero="")