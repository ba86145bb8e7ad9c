"""
Frame Data Model
=================

In-memory decoded image handed to the video assembler.

Design Rules:
    - Pixels are already decoded (decoding happens upstream of this package)
    - Buffer is row-major uint8, shape (height, width, 3), BGR channel order
    - Declared width/height must match the buffer exactly
    - The assembler borrows a frame only for the duration of one append
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np


CHANNELS = 3


class ImageFormat(str, Enum):
    """Source format the pixels were decoded from."""

    JPEG = "jpeg"
    PNG = "png"


@dataclass(frozen=True, eq=False)
class Frame:
    """
    Decoded image with declared dimensions.

    Immutable (frozen) so the declared size cannot drift from the buffer
    after validation.

    Attributes:
        pixels: Decoded image, np.ndarray (H, W, 3), dtype=uint8
        image_type: Format the image was decoded from
        width: Declared width in pixels
        height: Declared height in pixels

    Raises:
        ValueError: If the buffer, image type or declared size is invalid
    """

    pixels: np.ndarray
    image_type: ImageFormat
    width: int
    height: int

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "image_type", ImageFormat(self.image_type))
        except ValueError:
            raise ValueError(
                f"Frame image_type must be one of "
                f"{[fmt.value for fmt in ImageFormat]}, got {self.image_type!r}"
            ) from None
        if not isinstance(self.pixels, np.ndarray):
            raise ValueError(
                f"Frame pixels must be a numpy array, got {type(self.pixels).__name__}"
            )
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Frame pixels must be uint8, got {self.pixels.dtype}")
        if self.pixels.ndim != 3 or self.pixels.shape[2] != CHANNELS:
            raise ValueError(
                f"Frame pixels must have shape (H, W, {CHANNELS}), got {self.pixels.shape}"
            )
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Frame dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.pixels.shape[:2] != (self.height, self.width):
            raise ValueError(
                f"Declared size {self.width}x{self.height} does not match "
                f"buffer shape {self.pixels.shape}"
            )

    @classmethod
    def from_array(
        cls,
        pixels: np.ndarray,
        image_type: ImageFormat = ImageFormat.PNG,
    ) -> "Frame":
        """
        Build a frame whose declared size is taken from the buffer.

        Args:
            pixels: Decoded BGR image (H, W, 3), dtype=uint8
            image_type: Format the image was decoded from

        Returns:
            Validated Frame
        """
        height, width = pixels.shape[:2]
        return cls(
            pixels=pixels,
            image_type=image_type,
            width=int(width),
            height=int(height),
        )

    @property
    def size(self) -> tuple:
        """(width, height) in pixels."""
        return (self.width, self.height)

    def __repr__(self) -> str:
        """Compact repr that doesn't dump the pixel buffer."""
        return (
            f"Frame(image_type={self.image_type.value}, "
            f"width={self.width}, height={self.height})"
        )
