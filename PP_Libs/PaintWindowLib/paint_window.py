import logging
from pathlib import Path
from typing import Optional

from PyQt5.QtCore import QRect, Qt, pyqtSignal
from PyQt5.QtGui import QImage, QMouseEvent, QPainter, QPaintEvent, QPixmap
from PyQt5.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QSizePolicy,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from PP_Libs.constants import (
    BRUSH_SIZE_STEP,
    COLOR_DISPLAY_HEIGHT,
    COLOR_DISPLAY_WIDTH,
    CONTROLS_SPACING,
    DEFAULT_BRUSH_SIZE,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    INITIAL_HINT_TEXT,
    LAYOUT_SPACING,
    MAX_BRUSH_SIZE,
    MIN_BRUSH_SIZE,
    WINDOW_TITLE,
)
from PP_Libs.PaintCoreLib.coordinate_mapper import letterbox_rect
from PP_Libs.PaintCoreLib.editor_session import EditorSession, EditResult
from PP_Libs.PaintCoreLib.errors import InvalidGeometryError
from PP_Libs.PaintCoreLib.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

_QIMAGE_FORMATS = {3: QImage.Format_RGB888, 4: QImage.Format_RGBA8888}


def buffer_to_pixmap(buffer: PixelBuffer) -> QPixmap:
    data = buffer.tobytes()
    image = QImage(data, buffer.width, buffer.height, buffer.rowstride, _QIMAGE_FORMATS[buffer.channels])
    # QImage borrows ``data``; copy before it goes out of scope
    return QPixmap.fromImage(image.copy())


class PictureLabel(QWidget):
    """Draws the image letterboxed and reports pointer events in widget pixels."""

    pressed = pyqtSignal(float, float)
    moved = pyqtSignal(float, float)
    released = pyqtSignal(float, float)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._pixmap: Optional[QPixmap] = None
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

    def set_pixmap(self, pixmap: Optional[QPixmap]) -> None:
        self._pixmap = pixmap
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), Qt.black)
        if self._pixmap is not None and not self._pixmap.isNull():
            try:
                x, y, w, h = letterbox_rect(
                    self.width(), self.height(), self._pixmap.width(), self._pixmap.height()
                )
            except InvalidGeometryError:
                painter.end()
                return
            painter.drawPixmap(QRect(x, y, w, h), self._pixmap)
        painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.LeftButton:
            self.pressed.emit(event.localPos().x(), event.localPos().y())

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        self.moved.emit(event.localPos().x(), event.localPos().y())

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.LeftButton:
            self.released.emit(event.localPos().x(), event.localPos().y())


class PaintWindow(QMainWindow):
    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        self._build_ui()
        self._connect_signals()
        self.refresh_picture()

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        root = QVBoxLayout(central)
        root.setSpacing(LAYOUT_SPACING)

        self.picture = PictureLabel()
        root.addWidget(self.picture, stretch=1)

        coords_col = QVBoxLayout()
        coords_col.setSpacing(CONTROLS_SPACING)

        self.x_entry = QLineEdit()
        self.x_entry.setPlaceholderText("Enter X")
        self.y_entry = QLineEdit()
        self.y_entry.setPlaceholderText("Enter Y")

        self.btn_paint = QPushButton(self.session.paint_button_text)
        self.btn_redo = QPushButton("Redo")
        self.btn_undo = QPushButton("Undo")
        self.btn_save = QPushButton("Save")
        self.btn_get_color = QPushButton("Get Color")

        coords_col.addWidget(QLabel("X:"))
        coords_col.addWidget(self.x_entry)
        coords_col.addWidget(QLabel("Y:"))
        coords_col.addWidget(self.y_entry)

        buttons_row = QHBoxLayout()
        for button in (self.btn_paint, self.btn_redo, self.btn_undo, self.btn_save, self.btn_get_color):
            buttons_row.addWidget(button)
        coords_col.addLayout(buttons_row)
        root.addLayout(coords_col)

        self.brush_slider = QSlider(Qt.Horizontal)
        self.brush_slider.setRange(MIN_BRUSH_SIZE, MAX_BRUSH_SIZE)
        self.brush_slider.setSingleStep(BRUSH_SIZE_STEP)
        self.brush_slider.setValue(DEFAULT_BRUSH_SIZE)
        root.addWidget(self.brush_slider)

        self.color_label = QLabel(INITIAL_HINT_TEXT)
        root.addWidget(self.color_label)

        self.color_display = QFrame()
        self.color_display.setFrameShape(QFrame.Box)
        self.color_display.setFixedSize(COLOR_DISPLAY_WIDTH, COLOR_DISPLAY_HEIGHT)
        root.addWidget(self.color_display)

        self.statusBar()

    def _connect_signals(self) -> None:
        self.picture.pressed.connect(self.on_picture_pressed)
        self.picture.moved.connect(self.on_picture_moved)
        self.picture.released.connect(self.on_picture_released)
        self.btn_paint.clicked.connect(self.toggle_paint_mode)
        self.btn_undo.clicked.connect(lambda: self.apply_result(self.session.undo()))
        self.btn_redo.clicked.connect(lambda: self.apply_result(self.session.redo()))
        self.btn_save.clicked.connect(lambda: self.apply_result(self.session.save()))
        self.btn_get_color.clicked.connect(self.get_color_from_entries)
        self.brush_slider.valueChanged.connect(
            lambda value: self.apply_result(self.session.set_brush_size(value))
        )

    def on_picture_pressed(self, x: float, y: float) -> None:
        self.apply_result(self.session.on_pointer_press(x, y, self.picture.width(), self.picture.height()))

    def on_picture_moved(self, x: float, y: float) -> None:
        self.apply_result(self.session.on_pointer_move(x, y, self.picture.width(), self.picture.height()))

    def on_picture_released(self, x: float, y: float) -> None:
        self.apply_result(self.session.on_pointer_release(x, y))

    def toggle_paint_mode(self) -> None:
        self.apply_result(self.session.toggle_paint_mode())
        self.btn_paint.setText(self.session.paint_button_text)

    def get_color_from_entries(self) -> None:
        self.apply_result(self.session.sample_color_from_text(self.x_entry.text(), self.y_entry.text()))

    def apply_result(self, result: EditResult) -> None:
        if result.buffer_changed:
            self.refresh_picture()
        if result.color_label is not None:
            self.color_label.setText(result.color_label)
        if result.color is not None:
            self._update_color_display(result.color)
        if result.message:
            self.statusBar().showMessage(result.message)

    def refresh_picture(self) -> None:
        buffer = self.session.buffer
        self.picture.set_pixmap(buffer_to_pixmap(buffer) if buffer is not None else None)

    def _update_color_display(self, color) -> None:
        r, g, b = color
        self.color_display.setStyleSheet(f"background-color: rgb({r}, {g}, {b});")


def open_window(image_path: Path) -> PaintWindow:
    """Create a session for ``image_path`` and a window hosting it."""
    session = EditorSession()
    result = session.load(image_path)
    if not result.ok:
        logger.error(f"Failed to load image: {result.message}")
    window = PaintWindow(session)
    if not result.ok:
        window.statusBar().showMessage(result.message)
    return window
