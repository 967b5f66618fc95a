"""Flat RGBA8 buffers <-> numpy images."""

import numpy as np

from blurhash_codec.utils.constants import BYTES_PER_PIXEL, OPAQUE_ALPHA


def unpack_rgba(pixels, width: int, height: int) -> np.ndarray:
    """View a row-major RGBA8 buffer as a (H, W, 4) uint8 array."""
    return np.frombuffer(pixels, dtype=np.uint8).reshape(height, width, BYTES_PER_PIXEL)


def pack_rgba(rgb: np.ndarray) -> bytes:
    """(H, W, 3) uint8 image to an RGBA8 buffer with opaque alpha."""
    h, w = rgb.shape[:2]
    rgba = np.full((h, w, BYTES_PER_PIXEL), OPAQUE_ALPHA, dtype=np.uint8)
    rgba[:, :, :3] = rgb
    return rgba.tobytes()


def to_rgba_array(image: np.ndarray) -> np.ndarray:
    """Accept (H, W, 3) or (H, W, 4) uint8 and return contiguous RGBA."""
    if image.ndim != 3 or image.shape[2] not in (3, 4):
        raise ValueError(f"Expected shape (H, W, 3) or (H, W, 4), got {image.shape}")
    if image.dtype != np.uint8:
        raise ValueError(f"Expected uint8 dtype, got {image.dtype}")
    if image.shape[2] == 4:
        return np.ascontiguousarray(image)
    h, w = image.shape[:2]
    rgba = np.full((h, w, BYTES_PER_PIXEL), OPAQUE_ALPHA, dtype=np.uint8)
    rgba[:, :, :3] = image
    return rgba
