"""Metrics: how closely a decoded placeholder follows its source."""

from typing import Dict

import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity


def quadrant_means(image: np.ndarray) -> np.ndarray:
    """Mean RGB of each quadrant, shape (2, 2, 3), rows top to bottom."""
    h, w = image.shape[:2]
    rgb = image[:, :, :3].astype(np.float64)
    half_h, half_w = h // 2, w // 2
    means = np.empty((2, 2, 3))
    for row, (y0, y1) in enumerate([(0, half_h), (half_h, h)]):
        for col, (x0, x1) in enumerate([(0, half_w), (half_w, w)]):
            means[row, col] = rgb[y0:y1, x0:x1].mean(axis=(0, 1))
    return means


def compare_placeholder(original: np.ndarray, decoded: np.ndarray) -> Dict[str, float]:
    """PSNR/SSIM on RGB and worst per-quadrant mean colour error.

    Identical images give an infinite PSNR.
    """
    if original.shape[:2] != decoded.shape[:2]:
        raise ValueError(f"Shape mismatch: {original.shape} vs {decoded.shape}")
    original_rgb = np.ascontiguousarray(original[:, :, :3])
    decoded_rgb = np.ascontiguousarray(decoded[:, :, :3])

    with np.errstate(divide='ignore'):
        psnr_rgb = peak_signal_noise_ratio(original_rgb, decoded_rgb, data_range=255)
    # SSIM needs a 7x7 window at least
    win_size = min(7, *original_rgb.shape[:2])
    if win_size % 2 == 0:
        win_size -= 1
    if win_size >= 3:
        ssim_rgb = structural_similarity(
            original_rgb, decoded_rgb, channel_axis=2, data_range=255, win_size=win_size
        )
    else:
        ssim_rgb = float('nan')

    quadrant_error = np.abs(quadrant_means(original_rgb) - quadrant_means(decoded_rgb)).max()

    return {
        'psnr_rgb': float(psnr_rgb),
        'ssim_rgb': float(ssim_rgb),
        'max_quadrant_error': float(quadrant_error),
    }
