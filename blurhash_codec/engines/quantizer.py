"""DC/AC component quantization."""

from typing import Tuple

import numpy as np

from blurhash_codec.engines.color_space import linear_to_srgb, srgb_to_linear
from blurhash_codec.utils.constants import (
    AC_QUANT_CENTER,
    AC_QUANT_LEVELS,
    MAX_AC_QUANT,
    MAX_AC_SCALE,
)


def sign_pow(value, exponent: float) -> np.ndarray:
    """|value|^exponent carrying the sign of value."""
    v = np.asarray(value, dtype=np.float64)
    return np.where(v < 0, -1.0, 1.0) * np.abs(v) ** exponent


def encode_dc(dc: np.ndarray) -> int:
    """Pack a linear RGB triple into a 24-bit sRGB integer."""
    r, g, b = (int(c) for c in linear_to_srgb(dc))
    return (r << 16) + (g << 8) + b


def decode_dc(value: int) -> np.ndarray:
    """Unpack a 24-bit sRGB integer to a linear RGB triple."""
    return srgb_to_linear([value >> 16, (value >> 8) & 255, value & 255])


def encode_ac(ac: np.ndarray, maximum_value: float) -> int:
    """Quantize one AC triple to 19 levels per channel."""
    scaled = sign_pow(np.asarray(ac, dtype=np.float64) / maximum_value, 0.5)
    q = np.clip(np.floor(scaled * AC_QUANT_CENTER + AC_QUANT_CENTER + 0.5), 0, AC_QUANT_LEVELS - 1)
    qr, qg, qb = (int(c) for c in q)
    return qr * AC_QUANT_LEVELS ** 2 + qg * AC_QUANT_LEVELS + qb


def decode_ac(value: int, maximum_value: float) -> np.ndarray:
    """Inverse of encode_ac."""
    q = np.array([
        value // (AC_QUANT_LEVELS ** 2),
        (value // AC_QUANT_LEVELS) % AC_QUANT_LEVELS,
        value % AC_QUANT_LEVELS,
    ], dtype=np.float64)
    return sign_pow((q - AC_QUANT_CENTER) / AC_QUANT_CENTER, 2.0) * maximum_value


def quantize_max_ac(ac: np.ndarray) -> Tuple[int, float]:
    """Quantized max-AC digit and the effective scale derived from it.

    `ac` is an (N, 3) array of raw AC triples; the largest absolute channel
    value over all of them sets the shared scale.
    """
    ac = np.asarray(ac, dtype=np.float64)
    actual_max = float(np.abs(ac).max()) if ac.size else 0.0
    digit = int(np.clip(np.floor(actual_max * MAX_AC_SCALE - 0.5), 0, MAX_AC_QUANT))
    return digit, dequantize_max_ac(digit)


def dequantize_max_ac(digit: int) -> float:
    """Header digit to maximum AC magnitude."""
    return (digit + 1) / MAX_AC_SCALE
