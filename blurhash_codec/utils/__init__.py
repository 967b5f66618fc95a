"""Shared utilities.

Metrics (scikit-image) and image I/O (OpenCV) are not imported here; use
``blurhash_codec.utils.metrics`` and ``blurhash_codec.utils.image_io``.
"""

from .constants import BASE83_ALPHABET, MAX_COMPONENTS, MIN_COMPONENTS
from .test_images import generate_solid, generate_quadrants, generate_gradient, generate_stripes

__all__ = [
    'BASE83_ALPHABET',
    'MAX_COMPONENTS',
    'MIN_COMPONENTS',
    'generate_solid',
    'generate_quadrants',
    'generate_gradient',
    'generate_stripes',
]
