"""Exceptions raised by the encode/decode entry points."""


class BlurhashError(ValueError):
    """Base class for every codec failure."""


class LengthInvalidError(BlurhashError):
    """Hash is shorter than the fixed header."""

    def __init__(self, length: int, minimum: int):
        super().__init__(f"Hash must be at least {minimum} characters, got {length}")
        self.length = length
        self.minimum = minimum


class LengthMismatchError(BlurhashError):
    """Hash length disagrees with the component count in its size flag."""

    def __init__(self, length: int, expected: int, num_x: int, num_y: int):
        super().__init__(
            f"Hash with {num_x}x{num_y} components must be {expected} characters, got {length}"
        )
        self.length = length
        self.expected = expected
        self.num_x = num_x
        self.num_y = num_y


class ComponentsNumberInvalidError(BlurhashError):
    """Requested component count outside 1..9."""

    def __init__(self, components_x: int, components_y: int):
        super().__init__(
            f"Component counts must be in [1, 9], got {components_x}x{components_y}"
        )
        self.components_x = components_x
        self.components_y = components_y


class BytesPerPixelMismatchError(BlurhashError):
    """Pixel buffer length is not width * height * 4."""

    def __init__(self, length: int, width: int, height: int):
        super().__init__(
            f"Expected {width * height * 4} bytes for {width}x{height} RGBA, got {length}"
        )
        self.length = length
        self.width = width
        self.height = height


class DimensionsInvalidError(BlurhashError):
    """Image to encode has no pixels."""

    def __init__(self, width: int, height: int):
        super().__init__(f"Width and height must be positive, got {width}x{height}")
        self.width = width
        self.height = height


class InvalidCharacterError(BlurhashError):
    """Character outside the base83 alphabet (strict decoding only)."""

    def __init__(self, character: str, position: int):
        super().__init__(f"Invalid base83 character {character!r} at position {position}")
        self.character = character
        self.position = position
