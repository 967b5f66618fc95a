"""Encode/decode pipelines between pixel buffers and hash strings."""

from typing import Tuple

import numpy as np

from blurhash_codec.engines.base83 import decode_digits, encode_digits
from blurhash_codec.engines.color_space import image_to_linear, linear_to_srgb
from blurhash_codec.engines.dct_engine import analyze, synthesize
from blurhash_codec.engines.pixel_buffer import pack_rgba, to_rgba_array, unpack_rgba
from blurhash_codec.engines.quantizer import (
    decode_ac,
    decode_dc,
    dequantize_max_ac,
    encode_ac,
    encode_dc,
    quantize_max_ac,
)
from blurhash_codec.errors import (
    BlurhashError,
    BytesPerPixelMismatchError,
    DimensionsInvalidError,
    LengthInvalidError,
    LengthMismatchError,
)
from blurhash_codec.models.codec_params import DecodeParams, EncodeParams
from blurhash_codec.models.component_grid import ComponentGrid
from blurhash_codec.utils.constants import (
    AC_DIGITS,
    BYTES_PER_PIXEL,
    DC_DIGITS,
    HEADER_LENGTH,
    MAX_AC_DIGITS,
    MAX_COMPONENTS,
    MIN_HASH_LENGTH,
    SIZE_FLAG_DIGITS,
)


def expected_length(num_x: int, num_y: int) -> int:
    """Hash length for a num_x by num_y grid."""
    return HEADER_LENGTH + AC_DIGITS * (num_x * num_y - 1)


def components_of(blurhash: str) -> Tuple[int, int]:
    """Validate the hash length and return its (num_x, num_y)."""
    if not isinstance(blurhash, str):
        raise TypeError(f"Expected str, got {type(blurhash)}")
    if len(blurhash) < MIN_HASH_LENGTH:
        raise LengthInvalidError(len(blurhash), MIN_HASH_LENGTH)

    size_flag = decode_digits(blurhash[0])
    num_y = size_flag // MAX_COMPONENTS + 1
    num_x = size_flag % MAX_COMPONENTS + 1

    expected = expected_length(num_x, num_y)
    if len(blurhash) != expected:
        raise LengthMismatchError(len(blurhash), expected, num_x, num_y)
    return num_x, num_y


def is_valid_blurhash(blurhash: str) -> bool:
    """True when the hash passes length validation."""
    try:
        components_of(blurhash)
    except (BlurhashError, TypeError):
        return False
    return True


def parse_components(blurhash: str, punch: float = 1.0) -> ComponentGrid:
    """Dequantize a hash into its component grid."""
    num_x, num_y = components_of(blurhash)

    pos = SIZE_FLAG_DIGITS
    max_ac_digit = decode_digits(blurhash[pos:pos + MAX_AC_DIGITS])
    maximum_value = dequantize_max_ac(max_ac_digit) * punch
    pos += MAX_AC_DIGITS

    colors = np.empty((num_x * num_y, 3), dtype=np.float64)
    colors[0] = decode_dc(decode_digits(blurhash[pos:pos + DC_DIGITS]))
    pos += DC_DIGITS

    for k in range(1, num_x * num_y):
        colors[k] = decode_ac(decode_digits(blurhash[pos:pos + AC_DIGITS]), maximum_value)
        pos += AC_DIGITS

    return ComponentGrid(num_x, num_y, colors, maximum_value)


def serialize_components(grid: ComponentGrid) -> str:
    """Quantize a component grid and emit the hash string."""
    params = EncodeParams(grid.num_x, grid.num_y)
    parts = [encode_digits(params.size_flag, SIZE_FLAG_DIGITS)]

    if len(grid.ac):
        max_ac_digit, maximum_value = quantize_max_ac(grid.ac)
    else:
        max_ac_digit, maximum_value = 0, 1.0
    parts.append(encode_digits(max_ac_digit, MAX_AC_DIGITS))

    parts.append(encode_digits(encode_dc(grid.dc), DC_DIGITS))
    for triple in grid.ac:
        parts.append(encode_digits(encode_ac(triple, maximum_value), AC_DIGITS))
    return "".join(parts)


def average_color(blurhash: str) -> Tuple[int, int, int]:
    """DC term of the hash as sRGB bytes."""
    components_of(blurhash)
    value = decode_digits(blurhash[HEADER_LENGTH - DC_DIGITS:HEADER_LENGTH])
    return value >> 16, (value >> 8) & 255, value & 255


def encode(pixels, components_x: int, components_y: int, width: int, height: int) -> str:
    """Encode a row-major RGBA8 buffer into a hash string."""
    params = EncodeParams(components_x, components_y)
    if len(pixels) != width * height * BYTES_PER_PIXEL:
        raise BytesPerPixelMismatchError(len(pixels), width, height)
    if width <= 0 or height <= 0:
        raise DimensionsInvalidError(width, height)

    rgba = unpack_rgba(pixels, width, height)
    linear = image_to_linear(rgba[:, :, :3])
    colors = analyze(linear, params.components_x, params.components_y)
    return serialize_components(ComponentGrid(params.components_x, params.components_y, colors))


def decode(blurhash: str, width: int, height: int, punch: float = 1.0) -> bytes:
    """Decode a hash into a width x height RGBA8 buffer (alpha 255)."""
    grid = parse_components(blurhash, punch)
    params = DecodeParams(width, height, punch)
    linear = synthesize(grid.colors, grid.num_x, grid.num_y, params.width, params.height)
    return pack_rgba(linear_to_srgb(linear))


def encode_image(image: np.ndarray, components_x: int = 4, components_y: int = 3) -> str:
    """Encode a (H, W, 3) or (H, W, 4) uint8 array."""
    rgba = to_rgba_array(image)
    h, w = rgba.shape[:2]
    return encode(rgba.tobytes(), components_x, components_y, w, h)


def decode_image(blurhash: str, width: int, height: int, punch: float = 1.0) -> np.ndarray:
    """Decode a hash into a (height, width, 4) uint8 array."""
    pixels = decode(blurhash, width, height, punch)
    return unpack_rgba(pixels, width, height).copy()
