"""
Viewport to image coordinate mapping for Pixel Picker.

The picture widget scales the image to fit one axis and centers it on the
other, leaving empty bars (letterboxing). This module translates a pointer
position inside the widget into the image pixel beneath it.

Integer divisions truncate toward zero. A click less than one image pixel
into a letterbox bar therefore still lands on row/column 0. Existing click
targets depend on this, so rounding is not used.

Functions:
    letterbox_rect: Compute offset and scaled size of the image in the viewport
    map_to_image: Map a viewport point to an image pixel coordinate
    is_inside_image: Check image coordinates against image dimensions
"""

from typing import Tuple

from PP_Libs.PaintCoreLib.errors import InvalidGeometryError, OutOfBoundsError

ImagePoint = Tuple[int, int]
LetterboxRect = Tuple[int, int, int, int]


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def _check_geometry(view_width: int, view_height: int, image_width: int, image_height: int) -> None:
    if view_width <= 0 or view_height <= 0:
        raise InvalidGeometryError(
            f"Viewport must have positive size, got {view_width} x {view_height}"
        )
    if image_width <= 0 or image_height <= 0:
        raise InvalidGeometryError(
            f"Image must have positive size, got {image_width} x {image_height}"
        )


def letterbox_rect(view_width: int, view_height: int, image_width: int, image_height: int) -> LetterboxRect:
    """
    Compute where the letterboxed image sits inside the viewport.

    Args:
        view_width: Widget width in pixels
        view_height: Widget height in pixels
        image_width: Image width in pixels
        image_height: Image height in pixels

    Returns:
        (x_offset, y_offset, scaled_width, scaled_height). Exactly one of the
        offsets is used; the other axis spans the full viewport.

    Raises:
        InvalidGeometryError: If any dimension is not positive, or the image
            scales down to nothing on its short axis
    """
    _check_geometry(view_width, view_height, image_width, image_height)

    image_aspect = image_width / image_height
    view_aspect = view_width / view_height

    if image_aspect > view_aspect:
        # Image relatively wider: bars at top and bottom
        scale = view_width / image_width
        scaled_height = _round_half_up(image_height * scale)
        if scaled_height <= 0:
            raise InvalidGeometryError("Image scales to zero height in viewport")
        y_offset = _trunc_div(view_height - scaled_height, 2)
        return 0, y_offset, view_width, scaled_height

    # Image relatively taller (or equal): bars at left and right
    scale = view_height / image_height
    scaled_width = _round_half_up(image_width * scale)
    if scaled_width <= 0:
        raise InvalidGeometryError("Image scales to zero width in viewport")
    x_offset = _trunc_div(view_width - scaled_width, 2)
    return x_offset, 0, scaled_width, view_height


def is_inside_image(x: int, y: int, image_width: int, image_height: int) -> bool:
    """Return True when (x, y) addresses a pixel of a W x H image."""
    return 0 <= x < image_width and 0 <= y < image_height


def map_to_image(
    view_x: float,
    view_y: float,
    view_width: int,
    view_height: int,
    image_width: int,
    image_height: int,
) -> ImagePoint:
    """
    Map a viewport point to the image pixel underneath it.

    Pointer positions may be fractional; they are truncated to whole widget
    pixels before mapping.

    Args:
        view_x: Pointer x inside the widget
        view_y: Pointer y inside the widget
        view_width: Widget width (may differ between calls)
        view_height: Widget height
        image_width: Image width
        image_height: Image height

    Returns:
        (ix, iy) image pixel coordinates

    Raises:
        InvalidGeometryError: If the viewport or image has no area
        OutOfBoundsError: If the point falls outside the image, including
            inside the letterbox bars
    """
    x_offset, y_offset, scaled_width, scaled_height = letterbox_rect(
        view_width, view_height, image_width, image_height
    )

    px = int(view_x)
    py = int(view_y)
    ix = _trunc_div((px - x_offset) * image_width, scaled_width)
    iy = _trunc_div((py - y_offset) * image_height, scaled_height)

    if not is_inside_image(ix, iy, image_width, image_height):
        raise OutOfBoundsError(ix, iy, image_width, image_height)

    return ix, iy
