import pytest

from libft.charclass import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = range(128)


@pytest.mark.parametrize("code", ASCII)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in "0123456789")


@pytest.mark.parametrize("code", ASCII)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == chr(code).isalpha()


@pytest.mark.parametrize("code", ASCII)
def test_is_alnum_is_union(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))
    assert is_alnum(code) == chr(code).isalnum()


@pytest.mark.parametrize("code", ASCII)
def test_is_print_matches_printable(code):
    assert is_print(code) == chr(code).isprintable()


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_alnum("é") is False
    assert is_digit("٣") is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_string_and_int_agree():
    for code in ASCII:
        ch = chr(code)
        assert is_alpha(ch) == is_alpha(code)
        assert is_digit(ch) == is_digit(code)


@pytest.mark.parametrize("code", ASCII)
def test_to_lower_matches_str_lower(code):
    assert to_lower(code) == ord(chr(code).lower())
    assert to_lower(chr(code)) == chr(code).lower()


@pytest.mark.parametrize("code", ASCII)
def test_to_upper_matches_str_upper(code):
    assert to_upper(code) == ord(chr(code).upper())
    assert to_upper(chr(code)) == chr(code).upper()


def test_case_conversion_leaves_non_ascii_alone():
    assert to_lower("É") == "É"
    assert to_upper("é") == "é"
    assert to_upper(-5) == -5


def test_case_round_trip_on_letters():
    for ch in "abcxyzABCXYZ":
        assert to_lower(to_upper(ch)) == ch.lower()
        assert to_upper(to_lower(ch)) == ch.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_lower("")


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)