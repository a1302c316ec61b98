"""
PaintCoreLib - Core pixel inspection and painting functionality

This module provides coordinate mapping, pixel buffers, brush stamping,
undo/redo history and the editor session for the Pixel Picker project.
"""

from PP_Libs.PaintCoreLib.errors import (
    PaintCoreError,
    OutOfBoundsError,
    PixelIndexError,
    InvalidGeometryError,
    EmptyHistoryError,
    ImageNotFoundError,
    ImageDecodeError,
    ImageEncodeError,
    ImageIOError,
)
from PP_Libs.PaintCoreLib.coordinate_mapper import letterbox_rect, map_to_image
from PP_Libs.PaintCoreLib.pixel_buffer import PixelBuffer, RgbColor
from PP_Libs.PaintCoreLib.brush_engine import disc_mask, stamp
from PP_Libs.PaintCoreLib.history_manager import HistoryManager
from PP_Libs.PaintCoreLib.image_io import load_image, save_image, output_path_for
from PP_Libs.PaintCoreLib.editor_session import EditorSession, EditResult, SessionState

__all__ = [
    "PaintCoreError",
    "OutOfBoundsError",
    "PixelIndexError",
    "InvalidGeometryError",
    "EmptyHistoryError",
    "ImageNotFoundError",
    "ImageDecodeError",
    "ImageEncodeError",
    "ImageIOError",
    "letterbox_rect",
    "map_to_image",
    "PixelBuffer",
    "RgbColor",
    "disc_mask",
    "stamp",
    "HistoryManager",
    "load_image",
    "save_image",
    "output_path_for",
    "EditorSession",
    "EditResult",
    "SessionState",
]
