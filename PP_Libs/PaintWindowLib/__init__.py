"""
PaintWindowLib - PyQt5 host for the editor session

This module provides the window that displays the image, forwards pointer
and button events to an EditorSession and renders its results.
"""

from PP_Libs.PaintWindowLib.paint_window import PaintWindow, PictureLabel, open_window

__all__ = [
    "PaintWindow",
    "PictureLabel",
    "open_window",
]
