"""
blurhash-codec
Compact image placeholders: RGBA pixels <-> short BlurHash strings.
"""

from .engines.pipeline import (
    encode,
    decode,
    encode_image,
    decode_image,
    components_of,
    average_color,
    is_valid_blurhash,
    parse_components,
    serialize_components,
)
from .errors import (
    BlurhashError,
    LengthInvalidError,
    LengthMismatchError,
    ComponentsNumberInvalidError,
    BytesPerPixelMismatchError,
    DimensionsInvalidError,
    InvalidCharacterError,
)
from .models import ComponentGrid, EncodeParams, DecodeParams

__version__ = "0.1.0"

__all__ = [
    'encode',
    'decode',
    'encode_image',
    'decode_image',
    'components_of',
    'average_color',
    'is_valid_blurhash',
    'parse_components',
    'serialize_components',
    'BlurhashError',
    'LengthInvalidError',
    'LengthMismatchError',
    'ComponentsNumberInvalidError',
    'BytesPerPixelMismatchError',
    'DimensionsInvalidError',
    'InvalidCharacterError',
    'ComponentGrid',
    'EncodeParams',
    'DecodeParams',
    '__version__',
]
