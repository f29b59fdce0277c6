import string

import pytest

from basekit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    to_lower,
    to_upper,
)

ASCII = [chr(i) for i in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_alpha_matches_ascii_letters(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)


@pytest.mark.parametrize("ch", ASCII)
def test_digit_matches_ascii_digits(ch):
    assert is_digit(ch) == (ch in string.digits)


@pytest.mark.parametrize("ch", ASCII)
def test_alnum_is_alpha_or_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))


@pytest.mark.parametrize("ch", ASCII)
def test_print_matches_visible_range(ch):
    assert is_print(ch) == (ch.isprintable() and ch.isascii())


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_alnum("٣") is False
    assert is_digit("٣") is False


def test_ascii_range_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)
    assert not is_ascii("é")


@pytest.mark.parametrize("ch", " \t\n\v\f\r")
def test_space_characters(ch):
    assert is_space(ch) is True


@pytest.mark.parametrize("ch", ["a", "0", "\0", "\x1c", "_"])
def test_not_space(ch):
    assert is_space(ch) is False


def test_int_arguments_accepted():
    assert is_alpha(ord("q"))
    assert is_digit(ord("7"))
    assert not is_print(ord("\n"))


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_to_upper_letters(ch):
    assert to_upper(ch) == ch.upper()


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_to_lower_letters(ch):
    assert to_lower(ch) == ch.lower()


@pytest.mark.parametrize("ch", string.digits + string.punctuation + "é ")
def test_case_conversion_leaves_others_alone(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_conversion_with_ints():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")
    assert to_upper(-5) == -5


@pytest.mark.parametrize("ch", ASCII)
def test_case_round_trip(ch):
    if is_alpha(ch):
        assert to_lower(to_upper(ch)) == ch.lower()
    else:
        assert to_lower(to_upper(ch)) == ch


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_empty_string_rejected():
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(3.0)