"""Tests for base83 digit encoding."""

import random

import pytest
from blurhash_codec.engines.base83 import decode_digits, encode_digits
from blurhash_codec.errors import InvalidCharacterError
from blurhash_codec.utils.constants import BASE83_ALPHABET


def test_decodes_size_flag():
    """Single digits decode to their alphabet index."""
    assert decode_digits("L") == 21
    assert decode_digits("0") == 0
    assert decode_digits("~") == 82


def test_out_of_alphabet_character_decodes_to_zero():
    """A lone unknown character contributes nothing."""
    assert decode_digits("/") == 0


def test_unknown_characters_are_skipped():
    """Decoding ignores characters outside the alphabet."""
    assert decode_digits("O2?U") == decode_digits("O/2 ?U!")
    assert decode_digits("éL") == decode_digits("L")


def test_strict_mode_rejects_unknown_characters():
    """strict=True raises with the offending position."""
    with pytest.raises(InvalidCharacterError) as exc_info:
        decode_digits("ab/c", strict=True)
    assert exc_info.value.position == 2
    assert exc_info.value.character == "/"


def test_known_dc_value():
    """Four-digit DC of the demo hash."""
    assert decode_digits("O2?U") == 13742755


def test_encode_fixed_width():
    """Values are zero padded on the left."""
    assert encode_digits(0, 4) == "0000"
    assert encode_digits(21, 1) == "L"
    assert encode_digits(6858, 2) == "~q"
    assert encode_digits(0xFF0000, 4) == "TI:j"


def test_string_round_trip():
    """encode_digits(decode_digits(s), len(s)) == s for alphabet strings."""
    rng = random.Random(0)
    for length in range(1, 7):
        for _ in range(50):
            s = "".join(rng.choice(BASE83_ALPHABET) for _ in range(length))
            assert encode_digits(decode_digits(s), length) == s


def test_every_digit_round_trips():
    """Each alphabet character maps to its own digit value."""
    for index, char in enumerate(BASE83_ALPHABET):
        assert decode_digits(char) == index
        assert encode_digits(index, 1) == char
