"""
Editor session: the single owner of the image being inspected and painted.

The UI host forwards each input event as one method call and receives an
EditResult describing what happened: whether the buffer must be re-rendered,
whether the color display changed, and a status message. Runtime failures
(out of bounds, empty history, load/save errors) come back as results with
``ok=False`` and leave the session in its previous state. Invalid arguments,
such as a brush radius below 1, raise ValueError.

States:
    IDLE: No stroke in progress
    STROKING: Pointer held down while paint mode is on. Every motion sample
        stamps the brush; only the press takes a history snapshot.

Classes:
    EditResult: Outcome of one session command
    SessionState: Stroke state machine states
    EditorSession: Orchestrates mapping, painting, sampling and history
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from PP_Libs.constants import (
    COLOR_LABEL_FORMAT,
    DEFAULT_BRUSH_SIZE,
    DEFAULT_SELECTED_COLOR,
    INVALID_INPUT_TEXT,
    MAX_BRUSH_SIZE,
    MIN_BRUSH_RADIUS,
    MIN_BRUSH_SIZE,
    NO_IMAGE_TEXT,
    OUT_OF_BOUNDS_TEXT,
    PAINT_BUTTON_TEXT,
    REDO_EMPTY_TEXT,
    STOP_PAINTING_BUTTON_TEXT,
    UNDO_EMPTY_TEXT,
)
from PP_Libs.PaintCoreLib.brush_engine import stamp
from PP_Libs.PaintCoreLib.coordinate_mapper import ImagePoint, map_to_image
from PP_Libs.PaintCoreLib.errors import (
    EmptyHistoryError,
    InvalidGeometryError,
    OutOfBoundsError,
    PaintCoreError,
    PixelIndexError,
)
from PP_Libs.PaintCoreLib.history_manager import HistoryManager
from PP_Libs.PaintCoreLib.image_io import load_image, save_image
from PP_Libs.PaintCoreLib.pixel_buffer import PixelBuffer, RgbColor

logger = logging.getLogger(__name__)

_LEADING_DIGITS = re.compile(r"\d+", re.ASCII)


def format_color_label(color: RgbColor) -> str:
    """Text shown in the color label for a sampled color."""
    r, g, b = color
    return COLOR_LABEL_FORMAT.format(r=r, g=g, b=b)


def brush_radius_for_size(size: int) -> int:
    """Radius painted by a brush slider value (diameter), never below 1."""
    return max(MIN_BRUSH_RADIUS, int(size) // 2)


@dataclass
class EditResult:
    """
    Outcome of a single session command.

    Attributes:
        ok: False when the command failed or was rejected
        buffer_changed: The UI should re-render the buffer
        color: Newly selected color after a successful sample
        color_label: New text for the color label, when it changes
        message: Human readable status
        error: Name of the error kind on failure
    """
    ok: bool = True
    buffer_changed: bool = False
    color: Optional[RgbColor] = None
    color_label: Optional[str] = None
    message: str = ""
    error: Optional[str] = None


class SessionState(Enum):
    IDLE = "idle"
    STROKING = "stroking"


def _failure(exc: Exception, color_label: Optional[str] = None) -> EditResult:
    return EditResult(
        ok=False,
        color_label=color_label,
        message=str(exc),
        error=type(exc).__name__,
    )


class EditorSession:
    """
    Holds the live image, selected color, brush and paint mode.

    Example:
        >>> session = EditorSession()
        >>> session.load("photo.png")
        >>> session.toggle_paint_mode()
        >>> session.on_pointer_press(120, 80, 800, 600)
        >>> session.on_pointer_move(125, 82, 800, 600)
        >>> session.on_pointer_release(125, 82)
        >>> session.undo()
    """

    def __init__(
        self,
        buffer: Optional[PixelBuffer] = None,
        image_path: Optional[Union[str, Path]] = None,
        brush_size: int = DEFAULT_BRUSH_SIZE,
    ) -> None:
        self._buffer = buffer
        self._image_path = Path(image_path) if image_path is not None else None
        self._history = HistoryManager()
        self._selected_color: RgbColor = DEFAULT_SELECTED_COLOR
        self._brush_radius = brush_radius_for_size(brush_size)
        self._paint_mode = False
        self._painting = False

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def buffer(self) -> Optional[PixelBuffer]:
        return self._buffer

    @property
    def image_path(self) -> Optional[Path]:
        return self._image_path

    @property
    def history(self) -> HistoryManager:
        return self._history

    @property
    def selected_color(self) -> RgbColor:
        return self._selected_color

    @property
    def brush_radius(self) -> int:
        return self._brush_radius

    @property
    def paint_mode(self) -> bool:
        return self._paint_mode

    @property
    def painting(self) -> bool:
        return self._painting

    @property
    def state(self) -> SessionState:
        if self._painting and self._paint_mode:
            return SessionState.STROKING
        return SessionState.IDLE

    @property
    def paint_button_text(self) -> str:
        return STOP_PAINTING_BUTTON_TEXT if self._paint_mode else PAINT_BUTTON_TEXT

    def has_image(self) -> bool:
        return self._buffer is not None

    # ------------------------------------------------------------------
    # Load / save
    # ------------------------------------------------------------------

    def load(self, path: Union[str, Path]) -> EditResult:
        """Load a new image, discarding history. Prior state is kept on failure."""
        try:
            buffer = load_image(path)
        except PaintCoreError as exc:
            return _failure(exc)

        self._buffer = buffer
        self._image_path = Path(path)
        self._history.clear()
        self._painting = False
        return EditResult(buffer_changed=True, message=f"Loaded {self._image_path.name}")

    def save(self) -> EditResult:
        """Write the live buffer to ``painted_image.png`` beside the source."""
        if self._buffer is None or self._image_path is None:
            logger.warning("No image loaded to save.")
            return EditResult(ok=False, message="No image loaded to save.")

        try:
            save_path = save_image(self._buffer, self._image_path)
        except PaintCoreError as exc:
            return _failure(exc)
        return EditResult(message=f"Image saved successfully: {save_path}")

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def set_brush_radius(self, radius: int) -> EditResult:
        """
        Set the brush radius directly.

        Raises:
            ValueError: If radius < 1
        """
        radius = int(radius)
        if radius < MIN_BRUSH_RADIUS:
            raise ValueError(f"Brush radius must be >= {MIN_BRUSH_RADIUS}, got {radius}")
        self._brush_radius = radius
        logger.debug(f"Brush radius: {radius}")
        return EditResult(message=f"Brush radius: {radius}")

    def set_brush_size(self, size: int) -> EditResult:
        """Set the brush from a slider diameter, clamped to the slider range."""
        size = min(MAX_BRUSH_SIZE, max(MIN_BRUSH_SIZE, int(size)))
        self._brush_radius = brush_radius_for_size(size)
        logger.info(f"Brush size: {size}")
        return EditResult(message=f"Brush size: {size}")

    def toggle_paint_mode(self) -> EditResult:
        """Flip paint mode; switching it off also ends any stroke."""
        self._paint_mode = not self._paint_mode
        if self._paint_mode:
            message = "Paint mode activated."
        else:
            self._painting = False
            message = "Paint mode deactivated."
        logger.info(message)
        return EditResult(message=message)

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------

    def _map(self, view_x: float, view_y: float, view_width: int, view_height: int) -> ImagePoint:
        width, height = self._buffer.dimensions()
        return map_to_image(view_x, view_y, view_width, view_height, width, height)

    def _stamp_at_view(self, view_x: float, view_y: float, view_width: int, view_height: int) -> EditResult:
        try:
            ix, iy = self._map(view_x, view_y, view_width, view_height)
        except InvalidGeometryError as exc:
            logger.debug(f"Ignoring paint with invalid geometry: {exc}")
            return _failure(exc)
        except OutOfBoundsError as exc:
            logger.debug(f"Paint outside image: {exc}")
            return _failure(exc)

        stamp(self._buffer, ix, iy, self._brush_radius, self._selected_color)
        logger.debug(
            f"Painted at (Widget: {int(view_x)}, {int(view_y)}) -> (Image: {ix}, {iy}) "
            f"with RGB{self._selected_color}"
        )
        return EditResult(buffer_changed=True)

    def on_pointer_press(self, view_x: float, view_y: float, view_width: int, view_height: int) -> EditResult:
        """
        Start a stroke in paint mode, otherwise sample the color under the pointer.

        A stroke takes exactly one snapshot here, before the first stamp,
        even if the press lands outside the image.
        """
        if self._buffer is None:
            return EditResult(ok=False, message=NO_IMAGE_TEXT)

        if not self._paint_mode:
            return self._sample_at_view(view_x, view_y, view_width, view_height)

        self._painting = True
        self._history.snapshot(self._buffer)
        return self._stamp_at_view(view_x, view_y, view_width, view_height)

    def on_pointer_move(self, view_x: float, view_y: float, view_width: int, view_height: int) -> EditResult:
        """Stamp once per motion sample while stroking; ignored otherwise."""
        if not self._painting:
            return EditResult()
        if not self._paint_mode:
            # mode was switched off mid-stroke
            self._painting = False
            return EditResult()
        if self._buffer is None:
            self._painting = False
            return EditResult(ok=False, message=NO_IMAGE_TEXT)
        return self._stamp_at_view(view_x, view_y, view_width, view_height)

    def on_pointer_release(self, view_x: float = 0, view_y: float = 0) -> EditResult:
        """End any stroke in progress."""
        self._painting = False
        return EditResult()

    # ------------------------------------------------------------------
    # Color sampling
    # ------------------------------------------------------------------

    def _select_color_at(self, ix: int, iy: int) -> EditResult:
        color = self._buffer.get(ix, iy)
        self._selected_color = color
        label = format_color_label(color)
        return EditResult(color=color, color_label=label, message=label)

    def _sample_at_view(self, view_x: float, view_y: float, view_width: int, view_height: int) -> EditResult:
        try:
            ix, iy = self._map(view_x, view_y, view_width, view_height)
        except InvalidGeometryError as exc:
            logger.debug(f"Ignoring click with invalid geometry: {exc}")
            return _failure(exc)
        except OutOfBoundsError as exc:
            logger.warning(f"Click: {exc}")
            return _failure(exc, color_label=OUT_OF_BOUNDS_TEXT)

        result = self._select_color_at(ix, iy)
        logger.info(
            f"Clicked on (Widget: {int(view_x)}, {int(view_y)}) -> (Image: {ix}, {iy}) "
            f"-> RGB{result.color}"
        )
        return result

    def sample_color_at(self, x: int, y: int) -> EditResult:
        """Sample the color at direct image coordinates (manual entry form)."""
        if self._buffer is None:
            return EditResult(ok=False, message=NO_IMAGE_TEXT)

        try:
            result = self._select_color_at(x, y)
        except PixelIndexError:
            width, height = self._buffer.dimensions()
            exc = OutOfBoundsError(x, y, width, height)
            logger.warning(f"Manual input: {exc}")
            return _failure(exc, color_label=OUT_OF_BOUNDS_TEXT)

        logger.info(f"Manual input ({x}, {y}) -> RGB{result.color}")
        return result

    def sample_color_from_text(self, x_text: str, y_text: str) -> EditResult:
        """
        Parse the X/Y entry fields and sample the color there.

        Each field must start with a digit; parsing stops at the first
        non-digit, so "12px" reads as 12.
        """
        x_match = _LEADING_DIGITS.match(x_text or "")
        y_match = _LEADING_DIGITS.match(y_text or "")
        if x_match is None or y_match is None:
            logger.warning(INVALID_INPUT_TEXT)
            return EditResult(ok=False, message=INVALID_INPUT_TEXT, error="ValueError")
        return self.sample_color_at(int(x_match.group()), int(y_match.group()))

    # ------------------------------------------------------------------
    # Direct edits and history
    # ------------------------------------------------------------------

    def paint_pixel_at(self, x: int, y: int) -> EditResult:
        """Paint one pixel at image coordinates with the selected color."""
        if self._buffer is None:
            logger.warning(NO_IMAGE_TEXT)
            return EditResult(ok=False, message=NO_IMAGE_TEXT)

        width, height = self._buffer.dimensions()
        if not self._buffer.contains(x, y):
            exc = OutOfBoundsError(x, y, width, height)
            logger.warning(str(exc))
            return _failure(exc)

        self._history.snapshot(self._buffer)
        self._buffer.set(x, y, self._selected_color)
        message = f"Painted pixel at ({x}, {y}) with RGB{self._selected_color}"
        logger.info(message)
        return EditResult(buffer_changed=True, message=message)

    def undo(self) -> EditResult:
        """Restore the previous snapshot; a no-op with a message when empty."""
        if self._buffer is None:
            return EditResult(ok=False, message=NO_IMAGE_TEXT)
        if not self._history.can_undo():
            logger.warning(UNDO_EMPTY_TEXT)
            return _failure(EmptyHistoryError(UNDO_EMPTY_TEXT))

        self._buffer = self._history.undo(self._buffer)
        return EditResult(buffer_changed=True, message="Undo applied.")

    def redo(self) -> EditResult:
        """Re-apply the last undone snapshot; a no-op with a message when empty."""
        if self._buffer is None:
            return EditResult(ok=False, message=NO_IMAGE_TEXT)
        if not self._history.can_redo():
            logger.warning(REDO_EMPTY_TEXT)
            return _failure(EmptyHistoryError(REDO_EMPTY_TEXT))

        self._buffer = self._history.redo(self._buffer)
        return EditResult(buffer_changed=True, message="Redo applied.")
