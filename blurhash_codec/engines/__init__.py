"""Codec engines - pure computation, no I/O."""

from .base83 import decode_digits, encode_digits
from .color_space import srgb_to_linear, linear_to_srgb, image_to_linear
from .pixel_buffer import unpack_rgba, pack_rgba, to_rgba_array
from .quantizer import sign_pow, encode_dc, decode_dc, encode_ac, decode_ac, quantize_max_ac, dequantize_max_ac
from .dct_engine import cosine_basis, analyze, synthesize
from .pipeline import (
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

__all__ = [
    'decode_digits',
    'encode_digits',
    'srgb_to_linear',
    'linear_to_srgb',
    'image_to_linear',
    'unpack_rgba',
    'pack_rgba',
    'to_rgba_array',
    'sign_pow',
    'encode_dc',
    'decode_dc',
    'encode_ac',
    'decode_ac',
    'quantize_max_ac',
    'dequantize_max_ac',
    'cosine_basis',
    'analyze',
    'synthesize',
    'encode',
    'decode',
    'encode_image',
    'decode_image',
    'components_of',
    'average_color',
    'is_valid_blurhash',
    'parse_components',
    'serialize_components',
]
