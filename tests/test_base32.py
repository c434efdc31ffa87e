"""Tests for the base32 alphabet table."""

import pytest

from geohash import InvalidHashCharacter
from geohash.base32 import BASE32, char_of, value_of


def test_alphabet_skips_ambiguous_letters():
    assert len(BASE32) == 32
    assert len(set(BASE32)) == 32
    for letter in "ailo":
        assert letter not in BASE32


def test_value_of_matches_table_order():
    for value, char in enumerate(BASE32):
        assert value_of(char) == value
        assert char_of(value) == char


@pytest.mark.parametrize(
    "char, value",
    [("0", 0), ("9", 9), ("b", 10), ("h", 16), ("j", 17), ("k", 18), ("m", 19), ("n", 20), ("p", 21), ("z", 31)],
)
def test_range_boundaries(char, value):
    assert value_of(char) == value


@pytest.mark.parametrize("char", ["a", "i", "l", "o", "A", "Z", "/", ":", "{", " ", "é"])
def test_invalid_character(char):
    with pytest.raises(InvalidHashCharacter) as excinfo:
        value_of(char)
    assert excinfo.value.character == char
