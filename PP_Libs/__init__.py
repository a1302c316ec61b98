"""
PP_Libs - Pixel Picker Library Modules

This package contains core functionality for the Pixel Picker project,
organized into specialized sub-packages:

- PaintCoreLib: Coordinate mapping, pixel buffers, brushes, undo/redo history
  and the editor session that ties them together
- PaintWindowLib: PyQt5 window hosting the editor session
"""

__version__ = "0.1.0"
