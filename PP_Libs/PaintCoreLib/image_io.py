"""
Image loading and saving for Pixel Picker.

Images are decoded with Pillow into a PixelBuffer of the file's native size.
Saving always writes a PNG named ``painted_image.png`` next to the source
image, overwriting any earlier result.

Functions:
    load_image: Decode an image file into a PixelBuffer
    output_path_for: Where the painted result for a source image is written
    save_image: Encode a PixelBuffer as PNG next to its source image
"""

import logging
from pathlib import Path
from typing import Any, Union

from PIL import Image, UnidentifiedImageError

from PP_Libs.constants import DEFAULT_OUTPUT_FORMAT, OUTPUT_FILE_NAME
from PP_Libs.PaintCoreLib.errors import (
    ImageDecodeError,
    ImageEncodeError,
    ImageIOError,
    ImageNotFoundError,
)
from PP_Libs.PaintCoreLib.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_ALPHA_MODES = {"RGBA", "LA", "PA", "RGBa", "La"}


def _normalize_mode(image: Any) -> Any:
    """Convert an image to RGB or RGBA, keeping transparency when present."""
    if image.mode in ("RGB", "RGBA"):
        return image
    if image.mode in _ALPHA_MODES or "transparency" in image.info:
        return image.convert("RGBA")
    return image.convert("RGB")


def load_image(path: PathLike) -> PixelBuffer:
    """
    Decode an image file into a PixelBuffer.

    Args:
        path: Path to any image Pillow can read

    Returns:
        A PixelBuffer with the image's native dimensions; 4 channels when the
        image has transparency, 3 otherwise

    Raises:
        ImageNotFoundError: If the path does not exist
        ImageDecodeError: If the file cannot be decoded
    """
    image_path = Path(path)
    if not image_path.is_file():
        raise ImageNotFoundError(f"Image file not found: {image_path}")

    try:
        with Image.open(image_path) as image:
            image.load()
            buffer = PixelBuffer.from_image(_normalize_mode(image))
    except FileNotFoundError as exc:
        raise ImageNotFoundError(f"Image file not found: {image_path}") from exc
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        logger.error(f"Failed to load image: {exc}")
        raise ImageDecodeError(str(exc)) from exc

    logger.info(f"Loaded {image_path} ({buffer.width} x {buffer.height}, {buffer.channels} channels)")
    return buffer


def output_path_for(source_path: PathLike) -> Path:
    """Path of ``painted_image.png`` in the source image's directory."""
    return Path(source_path).parent / OUTPUT_FILE_NAME


def save_image(buffer: PixelBuffer, source_path: PathLike) -> Path:
    """
    Save ``buffer`` as a PNG next to the original image.

    Args:
        buffer: Pixels to encode
        source_path: Path the image was loaded from

    Returns:
        The path written to

    Raises:
        ImageEncodeError: If the pixels cannot be encoded
        ImageIOError: If the file cannot be written
    """
    save_path = output_path_for(source_path)

    try:
        image = buffer.to_image()
    except ValueError as exc:
        logger.error(f"Failed to save image: {exc}")
        raise ImageEncodeError(str(exc)) from exc

    try:
        image.save(save_path, format=DEFAULT_OUTPUT_FORMAT)
    except OSError as exc:
        logger.error(f"Failed to save image: {exc}")
        raise ImageIOError(str(exc)) from exc
    except (KeyError, ValueError) as exc:
        logger.error(f"Failed to save image: {exc}")
        raise ImageEncodeError(str(exc)) from exc

    logger.info(f"Image saved successfully: {save_path}")
    return save_path
