"""Integer parsing and formatting with 32-bit C-style semantics."""

from __future__ import annotations

_INT_BITS = 32
_LLONG_MAX = 2**63 - 1
_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"


def _to_int32(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def _sign_and_digits(text: str, pos: int) -> tuple[int, int]:
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    return sign, pos


def parse_int(text: str) -> int:
    """Read a leading integer like ``atoi``.

    Leading whitespace and one sign are skipped; reading stops at the first
    non-digit. The result wraps to a 32-bit int. A value too large for a
    64-bit accumulator gives -1, or 0 when negative.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign, pos = _sign_and_digits(text, pos)
    result = 0
    while pos < len(text) and text[pos] in _DIGITS:
        result = result * 10 + int(text[pos])
        if result > _LLONG_MAX:
            return 0 if sign < 0 else -1
        pos += 1
    return _to_int32(_to_int32(result) * sign)


def get_number(text: str) -> int:
    """Read an optional sign and digits from the very start of ``text``."""
    key, pos = _sign_and_digits(text, 0)
    number = 0
    while pos < len(text) and text[pos] in _DIGITS:
        number = _to_int32(number * 10 + int(text[pos]))
        pos += 1
    return _to_int32(key * number)


def format_int(n: int) -> str:
    """Decimal text of ``n``."""
    return str(n)


def check_number(text: str) -> tuple[int, int]:
    """Validate the number at the start of ``text``.

    Returns ``(value, length)`` where ``length`` is how many characters the
    number occupies. Leading zeros are allowed and characters after the
    number are ignored. Raises ValueError when the text does not start with
    a sign or digit, when the number overflows a 32-bit int, or for
    a negative zero.
    """
    if not text or not (text[0] in _DIGITS or text[0] in "+-"):
        raise ValueError(f"not a number: {text!r}")
    value = parse_int(text)
    negative = text[0] == "-"
    pos = 1 if text[0] in "+-" else 0
    while pos < len(text) and text[pos] == "0":
        pos += 1
    digits = format_int(value)
    if negative:
        width = len(digits) - 1
        matches = value != 0 and digits[1:] == text[pos:pos + width]
    else:
        begin = pos if value else pos - 1
        matches = begin >= 0 and digits == text[begin:begin + len(digits)]
    if not matches:
        raise ValueError(f"not a valid int: {text!r}")
    length = pos + (len(digits) if value else 0) - (1 if negative else 0)
    return value, length