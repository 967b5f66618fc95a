"""sRGB <-> linear light conversion."""

import numpy as np

from blurhash_codec.utils.constants import (
    LINEAR_SRGB_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
    SRGB_LINEAR_THRESHOLD,
    SRGB_OFFSET,
)


def srgb_to_linear(value) -> np.ndarray:
    """8-bit sRGB value(s) to linear float in [0, 1]."""
    v = np.asarray(value, dtype=np.float64) / 255.0
    return np.where(
        v <= SRGB_LINEAR_THRESHOLD,
        v / SRGB_LINEAR_SLOPE,
        ((v + SRGB_OFFSET) / (1.0 + SRGB_OFFSET)) ** SRGB_GAMMA,
    )


def linear_to_srgb(value) -> np.ndarray:
    """Linear float(s) to 8-bit sRGB, rounding half up."""
    v = np.clip(np.asarray(value, dtype=np.float64), 0.0, 1.0)
    srgb = np.where(
        v <= LINEAR_SRGB_THRESHOLD,
        v * SRGB_LINEAR_SLOPE * 255.0,
        ((1.0 + SRGB_OFFSET) * v ** (1.0 / SRGB_GAMMA) - SRGB_OFFSET) * 255.0,
    )
    return np.clip(np.floor(srgb + 0.5), 0, 255).astype(np.uint8)


# Every possible input byte, precomputed
SRGB_TO_LINEAR_LUT = srgb_to_linear(np.arange(256))


def image_to_linear(rgb: np.ndarray) -> np.ndarray:
    """uint8 (H, W, 3) sRGB image to float64 linear via lookup table."""
    return SRGB_TO_LINEAR_LUT[rgb]
