"""
Error taxonomy for the paint core.

Each error mixes in the closest builtin exception so callers can catch
either the project-specific class or the familiar builtin.
"""


class PaintCoreError(Exception):
    """Base class for all paint core failures."""


class OutOfBoundsError(PaintCoreError, IndexError):
    """Mapped or manually entered coordinates fall outside the image."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"Coordinates out of bounds ({x}, {y}). Image size: {width} x {height}"
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class PixelIndexError(PaintCoreError, IndexError):
    """Pixel buffer access outside [0, W) x [0, H)."""


class InvalidGeometryError(PaintCoreError, ValueError):
    """Viewport or image has a zero or negative dimension."""


class EmptyHistoryError(PaintCoreError):
    """Undo or redo was requested with nothing to restore."""


class ImageNotFoundError(PaintCoreError, FileNotFoundError):
    """The image path to load does not exist."""


class ImageDecodeError(PaintCoreError):
    """The image file could not be decoded."""


class ImageEncodeError(PaintCoreError):
    """The pixel buffer could not be encoded."""


class ImageIOError(PaintCoreError, OSError):
    """Writing the encoded image to disk failed."""
