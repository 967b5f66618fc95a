"""Encode/decode parameters."""

from dataclasses import dataclass

from blurhash_codec.errors import ComponentsNumberInvalidError
from blurhash_codec.utils.constants import MAX_COMPONENTS, MIN_COMPONENTS


@dataclass(frozen=True)
class EncodeParams:
    """Component grid requested from the encoder."""

    components_x: int = 4
    components_y: int = 3

    def __post_init__(self):
        if not (MIN_COMPONENTS <= self.components_x <= MAX_COMPONENTS
                and MIN_COMPONENTS <= self.components_y <= MAX_COMPONENTS):
            raise ComponentsNumberInvalidError(self.components_x, self.components_y)

    @property
    def size_flag(self) -> int:
        return (self.components_x - 1) + (self.components_y - 1) * MAX_COMPONENTS


@dataclass(frozen=True)
class DecodeParams:
    """Output resolution and contrast for the decoder."""

    width: int
    height: int
    punch: float = 1.0

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Width and height must be non-negative, got {self.width}x{self.height}")
        if not self.punch > 0:
            raise ValueError(f"Punch must be positive, got {self.punch}")
