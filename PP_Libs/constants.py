"""
Constants and configuration values for Pixel Picker.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Brush constants
MIN_BRUSH_SIZE = 1
MAX_BRUSH_SIZE = 50
BRUSH_SIZE_STEP = 1
DEFAULT_BRUSH_SIZE = 10
MIN_BRUSH_RADIUS = 1

# Pixel buffer constants
RGB_CHANNELS = 3
RGBA_CHANNELS = 4
SUPPORTED_CHANNEL_COUNTS = {RGB_CHANNELS, RGBA_CHANNELS}
MAX_COLOR_VALUE = 255

# Default selected color (black, as in a freshly zeroed session)
DEFAULT_SELECTED_COLOR = (0, 0, 0)

# File naming
OUTPUT_FILE_NAME = "painted_image.png"
DEFAULT_OUTPUT_FORMAT = "PNG"

# UI constants
WINDOW_TITLE = "Pixel Color Picker"
DEFAULT_WINDOW_WIDTH = 1000
DEFAULT_WINDOW_HEIGHT = 800
COLOR_DISPLAY_WIDTH = 200
COLOR_DISPLAY_HEIGHT = 50
LAYOUT_SPACING = 10
CONTROLS_SPACING = 5

# User facing text
INITIAL_HINT_TEXT = "Click on the image or enter coordinates."
OUT_OF_BOUNDS_TEXT = "Out of bounds"
COLOR_LABEL_FORMAT = "RGB: R={r}, G={g}, B={b}"
PAINT_BUTTON_TEXT = "Paint"
STOP_PAINTING_BUTTON_TEXT = "Stop Painting"
NO_IMAGE_TEXT = "No image loaded."
INVALID_INPUT_TEXT = "Invalid input. Please enter numeric values."
UNDO_EMPTY_TEXT = "Undo stack is empty."
REDO_EMPTY_TEXT = "Redo stack is empty."

# Logging
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
