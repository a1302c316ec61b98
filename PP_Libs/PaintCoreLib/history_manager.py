"""
Undo/redo history of full pixel buffer snapshots.

Each entry is a complete deep copy of the buffer. This keeps restores
trivial at the cost of O(depth x image size) memory, which is fine for the
small images an interactive picker works with.

Classes:
    HistoryManager: Paired undo and redo stacks of PixelBuffer snapshots
"""

import logging
from typing import List, Optional

from PP_Libs.constants import REDO_EMPTY_TEXT, UNDO_EMPTY_TEXT
from PP_Libs.PaintCoreLib.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


class HistoryManager:
    """
    Paired undo/redo stacks.

    The top of each stack is the end of its list. Any new snapshot
    invalidates the redo stack, so redo is only available directly after
    one or more undos.

    Example:
        >>> history = HistoryManager()
        >>> history.snapshot(buffer)       # before editing
        >>> restored = history.undo(buffer)
        >>> if restored is not None:
        ...     buffer = restored
    """

    def __init__(self) -> None:
        self._undo_stack: List[PixelBuffer] = []
        self._redo_stack: List[PixelBuffer] = []

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    @property
    def redo_depth(self) -> int:
        return len(self._redo_stack)

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def snapshot(self, buffer: PixelBuffer) -> None:
        """
        Save a copy of ``buffer`` before it is modified.

        Clears the redo stack, since redo is only valid after an undo.
        """
        self._undo_stack.append(buffer.clone())
        self._redo_stack.clear()
        logger.debug(f"Undo state saved. Stack size: {len(self._undo_stack)}")

    def undo(self, current: PixelBuffer) -> Optional[PixelBuffer]:
        """
        Step back one snapshot.

        Args:
            current: The live buffer, copied onto the redo stack

        Returns:
            The previous buffer for the caller to install as live, or None
            when there is nothing to undo (nothing is changed then)
        """
        if not self._undo_stack:
            logger.warning(UNDO_EMPTY_TEXT)
            return None

        self._redo_stack.append(current.clone())
        previous = self._undo_stack.pop()
        logger.info(f"Undo applied. Remaining stack size: {len(self._undo_stack)}")
        return previous

    def redo(self, current: PixelBuffer) -> Optional[PixelBuffer]:
        """
        Re-apply the most recently undone snapshot.

        Args:
            current: The live buffer, copied onto the undo stack

        Returns:
            The next buffer for the caller to install as live, or None when
            there is nothing to redo
        """
        if not self._redo_stack:
            logger.warning(REDO_EMPTY_TEXT)
            return None

        self._undo_stack.append(current.clone())
        following = self._redo_stack.pop()
        logger.info(f"Redo applied. Remaining redo stack size: {len(self._redo_stack)}")
        return following

    def clear(self) -> None:
        """Drop both stacks, e.g. when a different image is loaded."""
        self._undo_stack.clear()
        self._redo_stack.clear()
