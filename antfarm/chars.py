"""ASCII character classification and small byte helpers."""

from __future__ import annotations


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII code, 32..126."""
    return 32 <= _code(c) <= 126


def _convert(c: int | str, low: str, high: str, shift: int) -> int | str:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; other input is returned as is."""
    return _convert(c, "A", "Z", ord("a") - ord("A"))


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; other input is returned as is."""
    return _convert(c, "a", "z", ord("A") - ord("a"))


def reverse_bits(octet: int) -> int:
    """Reverse the order of the eight bits of a byte."""
    if not 0 <= octet <= 0xFF:
        raise ValueError("octet must be in range 0..255")
    octet = (octet & 0xF0) >> 4 | (octet & 0x0F) << 4
    octet = (octet & 0xCC) >> 2 | (octet & 0x33) << 2
    octet = (octet & 0xAA) >> 1 | (octet & 0x55) << 1
    return octet