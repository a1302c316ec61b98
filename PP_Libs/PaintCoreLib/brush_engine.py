"""
Circular brush stamping for Pixel Picker.

A stamp writes one solid color into every pixel whose integer offset from
the center lies within the brush radius (inclusive), clipped to the buffer.
There is no anti-aliasing or blending; alpha bytes are left as they are.

Functions:
    disc_mask: Boolean disc of diameter 2 * radius + 1
    stamp: Paint a filled circle into a PixelBuffer
"""

import logging

import numpy as np

from PP_Libs.constants import MIN_BRUSH_RADIUS, RGB_CHANNELS
from PP_Libs.PaintCoreLib.pixel_buffer import PixelBuffer, RgbColor, validate_color

logger = logging.getLogger(__name__)


def disc_mask(radius: int) -> np.ndarray:
    """
    Return a boolean (2r+1, 2r+1) array marking offsets with dx^2 + dy^2 <= r^2.

    Comparing squared integers is exact and equivalent to sqrt(dx^2 + dy^2) <= r,
    so pixels exactly ``radius`` away are included.
    """
    if radius < 0:
        raise ValueError(f"radius must be >= 0, got {radius}")
    size = 2 * radius + 1
    y, x = np.ogrid[:size, :size]
    return (x - radius) ** 2 + (y - radius) ** 2 <= radius ** 2


def stamp(
    buffer: PixelBuffer,
    center_x: int,
    center_y: int,
    radius: int,
    color: RgbColor,
) -> int:
    """
    Paint a filled circle into ``buffer`` in place.

    Offsets that fall outside the buffer are skipped; a stamp centered off
    the image, or only partially on it, is not an error.

    Args:
        buffer: Target pixel buffer (modified in place)
        center_x: Circle center column in image coordinates
        center_y: Circle center row in image coordinates
        radius: Brush radius in pixels (>= 1)
        color: RGB triple to write

    Returns:
        Number of pixels written

    Raises:
        ValueError: If radius < 1 or color is not a valid RGB triple
    """
    if radius < MIN_BRUSH_RADIUS:
        raise ValueError(f"radius must be >= {MIN_BRUSH_RADIUS}, got {radius}")
    color = validate_color(color)

    width, height = buffer.dimensions()
    mask = disc_mask(radius)
    size = 2 * radius + 1
    top = center_y - radius
    left = center_x - radius

    # clip mask window to buffer bounds
    mask_top = max(0, -top)
    mask_left = max(0, -left)
    mask_bottom = min(size, height - top)
    mask_right = min(size, width - left)

    if mask_top >= mask_bottom or mask_left >= mask_right:
        return 0

    clipped = mask[mask_top:mask_bottom, mask_left:mask_right]
    pixels = buffer.as_array()
    region = pixels[top + mask_top:top + mask_bottom, left + mask_left:left + mask_right, :RGB_CHANNELS]
    region[clipped] = color

    written = int(clipped.sum())
    logger.debug(f"Stamped {written} pixels at ({center_x}, {center_y}) radius {radius} with RGB{color}")
    return written
