"""
Raw RGB(A) pixel buffer for Pixel Picker.

A PixelBuffer owns a mutable byte sequence laid out row by row. Pixel (x, y)
lives at byte offset ``y * rowstride + x * channels``; the first three bytes
are red, green and blue and the optional fourth is alpha. Rows may carry
padding (rowstride > width * channels), as some decoders align rows.

Classes:
    PixelBuffer: Bounds-checked pixel access with deep-copy snapshots

Type Aliases:
    RgbColor: A tuple of 3 integers representing RGB color values (0-255)
"""

from typing import Any, Optional, Tuple

import numpy as np
from PIL import Image

from PP_Libs.constants import (
    MAX_COLOR_VALUE,
    RGB_CHANNELS,
    RGBA_CHANNELS,
    SUPPORTED_CHANNEL_COUNTS,
)
from PP_Libs.PaintCoreLib.errors import PixelIndexError

RgbColor = Tuple[int, int, int]

_MODE_BY_CHANNELS = {RGB_CHANNELS: "RGB", RGBA_CHANNELS: "RGBA"}


def validate_color(color: Any) -> RgbColor:
    """
    Check and normalize an RGB triple.

    Args:
        color: Any 3-item sequence of integers

    Returns:
        The color as a tuple of ints

    Raises:
        ValueError: If the color does not have 3 components in 0-255
    """
    components = tuple(int(c) for c in color)
    if len(components) != 3:
        raise ValueError(f"Color must have 3 components, got {len(components)}")
    for component in components:
        if not 0 <= component <= MAX_COLOR_VALUE:
            raise ValueError(f"Color components must be 0-{MAX_COLOR_VALUE}, got {components}")
    return components


class PixelBuffer:
    """
    Mutable raster of 8-bit RGB or RGBA pixels.

    Example:
        >>> buffer = PixelBuffer.blank(10, 10)
        >>> buffer.set(2, 3, (255, 0, 0))
        >>> buffer.get(2, 3)
        (255, 0, 0)
    """

    def __init__(
        self,
        width: int,
        height: int,
        channels: int = RGB_CHANNELS,
        data: Optional[bytes] = None,
        rowstride: Optional[int] = None,
    ) -> None:
        """
        Create a buffer, either zero-filled or copied from existing bytes.

        Args:
            width: Image width in pixels (> 0)
            height: Image height in pixels (> 0)
            channels: 3 for RGB, 4 for RGBA
            data: Optional initial bytes; copied, never aliased
            rowstride: Bytes per row, defaults to width * channels

        Raises:
            ValueError: On non-positive dimensions, unsupported channel
                count, a rowstride shorter than a row, or too little data
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Buffer dimensions must be positive, got {width} x {height}")
        if channels not in SUPPORTED_CHANNEL_COUNTS:
            raise ValueError(f"channels must be 3 or 4, got {channels}")

        if rowstride is None:
            rowstride = width * channels
        if rowstride < width * channels:
            raise ValueError(
                f"rowstride {rowstride} is shorter than a row of {width * channels} bytes"
            )

        required = height * rowstride
        if data is None:
            self._data = bytearray(required)
        else:
            if len(data) < required:
                raise ValueError(f"Expected at least {required} bytes, got {len(data)}")
            self._data = bytearray(data)

        self._width = width
        self._height = height
        self._channels = channels
        self._rowstride = rowstride

    @classmethod
    def blank(cls, width: int, height: int, channels: int = RGB_CHANNELS, color: RgbColor = (0, 0, 0)) -> "PixelBuffer":
        """Create a buffer filled with a single color (alpha set opaque)."""
        buffer = cls(width, height, channels)
        view = buffer.as_array()
        view[:, :, :RGB_CHANNELS] = validate_color(color)
        if channels == RGBA_CHANNELS:
            view[:, :, 3] = MAX_COLOR_VALUE
        return buffer

    @classmethod
    def from_image(cls, image: Any) -> "PixelBuffer":
        """
        Build a buffer from a PIL Image in RGB or RGBA mode.

        Raises:
            ValueError: If the image is in any other mode
        """
        channels = {"RGB": RGB_CHANNELS, "RGBA": RGBA_CHANNELS}.get(image.mode)
        if channels is None:
            raise ValueError(f"Unsupported image mode: {image.mode}")
        width, height = image.size
        return cls(width, height, channels, image.tobytes())

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def channels(self) -> int:
        return self._channels

    @property
    def rowstride(self) -> int:
        return self._rowstride

    @property
    def mode(self) -> str:
        """PIL mode string matching the channel count."""
        return _MODE_BY_CHANNELS[self._channels]

    def dimensions(self) -> Tuple[int, int]:
        """Return (width, height)."""
        return self._width, self._height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def offset(self, x: int, y: int) -> int:
        """Byte offset of pixel (x, y); no bounds check."""
        return y * self._rowstride + x * self._channels

    def _check_index(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise PixelIndexError(
                f"Pixel ({x}, {y}) outside image of size {self._width} x {self._height}"
            )

    def get(self, x: int, y: int) -> RgbColor:
        """
        Read the RGB color of a pixel.

        Raises:
            PixelIndexError: If x is not in [0, W) or y is not in [0, H)
        """
        self._check_index(x, y)
        start = self.offset(x, y)
        r, g, b = self._data[start:start + RGB_CHANNELS]
        return r, g, b

    def set(self, x: int, y: int, color: RgbColor) -> None:
        """
        Write the RGB color of a pixel, leaving any alpha byte untouched.

        Raises:
            PixelIndexError: If x is not in [0, W) or y is not in [0, H)
            ValueError: If the color is not a valid RGB triple
        """
        self._check_index(x, y)
        start = self.offset(x, y)
        self._data[start:start + RGB_CHANNELS] = bytes(validate_color(color))

    def get_alpha(self, x: int, y: int) -> Optional[int]:
        """Alpha byte of a pixel, or None for RGB buffers."""
        self._check_index(x, y)
        if self._channels != RGBA_CHANNELS:
            return None
        return self._data[self.offset(x, y) + 3]

    def clone(self) -> "PixelBuffer":
        """Return a deep, fully independent copy (row padding included)."""
        return PixelBuffer(
            self._width,
            self._height,
            self._channels,
            self._data,
            self._rowstride,
        )

    def as_array(self) -> np.ndarray:
        """
        Writable numpy view of shape (H, W, channels) over the live bytes.

        Row padding is skipped via strides, so writes through the view land
        directly in this buffer.
        """
        return np.ndarray(
            shape=(self._height, self._width, self._channels),
            dtype=np.uint8,
            buffer=self._data,
            strides=(self._rowstride, self._channels, 1),
        )

    def tobytes(self) -> bytes:
        """Raw bytes including row padding."""
        return bytes(self._data)

    def to_image(self) -> Any:
        """Return a new PIL Image with a copy of the pixels."""
        return Image.frombytes(
            self.mode,
            (self._width, self._height),
            bytes(self._data),
            "raw",
            self.mode,
            self._rowstride,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        if self.dimensions() != other.dimensions() or self._channels != other._channels:
            return False
        return bool(np.array_equal(self.as_array(), other.as_array()))

    def __repr__(self) -> str:
        return (
            f"PixelBuffer(width={self._width}, height={self._height}, "
            f"channels={self._channels}, rowstride={self._rowstride})"
        )
