"""Cosine-basis analysis and synthesis over a small component grid."""

import numpy as np


def cosine_basis(count: int, size: int) -> np.ndarray:
    """Basis rows cos(pi * k * n / size) for k < count, n < size."""
    return np.cos(np.pi * np.outer(np.arange(count), np.arange(size)) / size)


def normalization_grid(components_x: int, components_y: int) -> np.ndarray:
    """Weight 1 for the DC term, 2 for every AC term."""
    norm = np.full((components_y, components_x), 2.0)
    norm[0, 0] = 1.0
    return norm


def analyze(linear: np.ndarray, components_x: int, components_y: int) -> np.ndarray:
    """Forward projection of a linear (H, W, 3) image.

    Returns (components_y * components_x, 3) triples, row-major with the x
    index varying fastest; row 0 is DC.
    """
    h, w = linear.shape[:2]
    basis_x = cosine_basis(components_x, w)
    basis_y = cosine_basis(components_y, h)
    grid = np.einsum('jy,ix,yxc->jic', basis_y, basis_x, linear, optimize=True)
    grid *= normalization_grid(components_x, components_y)[:, :, None] / (w * h)
    return grid.reshape(components_y * components_x, 3)


def synthesize(colors: np.ndarray, num_x: int, num_y: int, width: int, height: int) -> np.ndarray:
    """Inverse basis summation to a linear (height, width, 3) image."""
    grid = np.asarray(colors, dtype=np.float64).reshape(num_y, num_x, 3)
    basis_x = cosine_basis(num_x, width)
    basis_y = cosine_basis(num_y, height)
    return np.einsum('jy,ix,jic->yxc', basis_y, basis_x, grid, optimize=True)
