import string

import pytest

from antfarm.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    reverse_bits,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_and_not_digit(c):
    assert is_alpha(c) is True
    assert is_digit(c) is False


@pytest.mark.parametrize("c", list(string.digits))
def test_digits_are_digit_and_not_alpha(c):
    assert is_digit(c) is True
    assert is_alpha(c) is False


def test_alnum_is_union_of_alpha_and_digit():
    for code in range(256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_bounds():
    assert is_print(31) is False
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(127) is False


def test_case_conversion_pinned():
    assert to_upper("a") == "A"
    assert to_lower("Z") == "z"


def test_case_round_trip_for_letters():
    for c in string.ascii_lowercase:
        assert to_lower(to_upper(c)) == c
        assert is_alpha(to_upper(c))


def test_non_letters_unchanged():
    for c in string.digits + string.punctuation + " ":
        assert to_upper(c) == c
        assert to_lower(c) == c


def test_int_input_returns_int():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(200) == 200


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_reverse_bits_pinned():
    assert reverse_bits(0x01) == 0x80
    assert reverse_bits(0xF0) == 0x0F


def test_reverse_bits_is_involution_and_keeps_popcount():
    for octet in range(256):
        flipped = reverse_bits(octet)
        assert reverse_bits(flipped) == octet
        assert bin(flipped).count("1") == bin(octet).count("1")


def test_reverse_bits_rejects_out_of_range():
    with pytest.raises(ValueError):
        reverse_bits(256)