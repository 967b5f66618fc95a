"""Image I/O using OpenCV."""

import cv2
import numpy as np

from blurhash_codec.engines.pipeline import encode_image


def load_image(path: str) -> np.ndarray:
    """Load image as RGBA uint8."""
    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)


def save_image(image: np.ndarray, path: str) -> None:
    """Save RGB or RGBA image."""
    if image.shape[2] == 4:
        ok = cv2.imwrite(path, cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA))
    else:
        ok = cv2.imwrite(path, cv2.cvtColor(image, cv2.COLOR_RGB2BGR))
    if not ok:
        raise ValueError(f"Could not save image to {path}")


def encode_file(path: str, components_x: int = 4, components_y: int = 3) -> str:
    """Load an image file and encode it."""
    return encode_image(load_image(path), components_x, components_y)
