"""Decoded/analysed component grid."""

from dataclasses import dataclass

import numpy as np


@dataclass
class ComponentGrid:
    """Linear colour triples for one image, flat and row-major.

    Row ``i + j * num_x`` holds basis pair (i, j); row 0 is the DC term.
    ``maximum_value`` is the AC scale the triples were quantized against.
    """

    num_x: int
    num_y: int
    colors: np.ndarray
    maximum_value: float = 1.0

    def __post_init__(self):
        self.colors = np.asarray(self.colors, dtype=np.float64)
        expected = (self.num_x * self.num_y, 3)
        if self.colors.shape != expected:
            raise ValueError(f"Expected colors of shape {expected}, got {self.colors.shape}")

    @property
    def dc(self) -> np.ndarray:
        return self.colors[0]

    @property
    def ac(self) -> np.ndarray:
        return self.colors[1:]
