"""Base83 digit encoding used by the hash string."""

from blurhash_codec.errors import InvalidCharacterError
from blurhash_codec.utils.constants import BASE83_ALPHABET, BASE83_DIGITS, BASE83_RADIX


def decode_digits(string: str, strict: bool = False) -> int:
    """Interpret a string as a base83 numeral.

    Characters outside the alphabet are skipped and contribute nothing to the
    value, so corrupted input decodes silently. Pass ``strict=True`` to raise
    InvalidCharacterError instead.
    """
    value = 0
    for position, char in enumerate(string):
        digit = BASE83_DIGITS.get(char)
        if digit is None:
            if strict:
                raise InvalidCharacterError(char, position)
            continue
        value = value * BASE83_RADIX + digit
    return value


def encode_digits(value: int, length: int) -> str:
    """Encode a non-negative integer as exactly `length` base83 digits."""
    digits = []
    for k in range(1, length + 1):
        digit = (value // BASE83_RADIX ** (length - k)) % BASE83_RADIX
        digits.append(BASE83_ALPHABET[digit])
    return "".join(digits)
