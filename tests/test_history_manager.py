"""
Unit tests for history_manager module.

Tests snapshot isolation, undo/redo symmetry and redo invalidation.
"""

import logging

from PP_Libs.constants import REDO_EMPTY_TEXT, UNDO_EMPTY_TEXT
from PP_Libs.PaintCoreLib.history_manager import HistoryManager
from PP_Libs.PaintCoreLib.pixel_buffer import PixelBuffer

BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)


def make_buffer(color=BLACK):
    return PixelBuffer.blank(4, 4, color=color)


class TestEmptyHistory:
    """Tests for undo/redo with nothing stored."""

    def test_undo_empty_returns_none(self):
        history = HistoryManager()
        buffer = make_buffer()

        assert history.undo(buffer) is None
        assert history.redo_depth == 0

    def test_redo_empty_returns_none(self):
        history = HistoryManager()

        assert history.redo(make_buffer()) is None
        assert history.undo_depth == 0

    def test_flags(self):
        history = HistoryManager()

        assert not history.can_undo()
        assert not history.can_redo()

    def test_empty_undo_logs_warning(self, caplog):
        history = HistoryManager()

        with caplog.at_level(logging.WARNING):
            history.undo(make_buffer())

        assert [(r.levelname, r.getMessage()) for r in caplog.records] == [
            ("WARNING", UNDO_EMPTY_TEXT)
        ]

    def test_empty_redo_logs_warning(self, caplog):
        history = HistoryManager()

        with caplog.at_level(logging.WARNING):
            history.redo(make_buffer())

        assert [(r.levelname, r.getMessage()) for r in caplog.records] == [
            ("WARNING", REDO_EMPTY_TEXT)
        ]


class TestSnapshot:
    """Tests for snapshot behaviour."""

    def test_snapshot_is_deep_copy(self):
        history = HistoryManager()
        buffer = make_buffer()
        history.snapshot(buffer)

        buffer.set(0, 0, RED)
        restored = history.undo(buffer)

        assert restored.get(0, 0) == BLACK
        assert restored is not buffer

    def test_each_snapshot_is_separate(self):
        history = HistoryManager()
        buffer = make_buffer()
        history.snapshot(buffer)
        history.snapshot(buffer)

        first = history.undo(buffer)
        second = history.undo(first)

        assert first is not second
        assert first == second

    def test_snapshot_clears_redo(self):
        history = HistoryManager()
        buffer = make_buffer()
        history.snapshot(buffer)
        buffer = history.undo(buffer)
        assert history.can_redo()

        history.snapshot(buffer)

        assert history.redo(buffer) is None
        assert history.redo_depth == 0


class TestUndoRedo:
    """Tests for undo and redo."""

    def test_undo_beyond_depth_leaves_buffer(self):
        history = HistoryManager()
        buffer = make_buffer()
        history.snapshot(buffer)
        buffer.set(1, 1, RED)

        buffer = history.undo(buffer)
        live_before = buffer.clone()

        assert history.undo(buffer) is None
        assert buffer == live_before

    def test_undo_then_redo_round_trip(self):
        history = HistoryManager()
        buffer = make_buffer()
        history.snapshot(buffer)
        buffer.set(2, 2, GREEN)
        painted = buffer.clone()

        buffer = history.undo(buffer)
        assert buffer.get(2, 2) == BLACK

        buffer = history.redo(buffer)
        assert buffer == painted

    def test_depths_move_between_stacks(self):
        history = HistoryManager()
        buffer = make_buffer()
        history.snapshot(buffer)
        history.snapshot(buffer)

        buffer = history.undo(buffer)
        assert (history.undo_depth, history.redo_depth) == (1, 1)

        buffer = history.undo(buffer)
        assert (history.undo_depth, history.redo_depth) == (0, 2)

        history.redo(buffer)
        assert (history.undo_depth, history.redo_depth) == (1, 1)

    def test_multiple_undos_restore_in_reverse_order(self):
        history = HistoryManager()
        buffer = make_buffer()
        for color in (RED, GREEN):
            history.snapshot(buffer)
            buffer.set(0, 0, color)

        buffer = history.undo(buffer)
        assert buffer.get(0, 0) == RED
        buffer = history.undo(buffer)
        assert buffer.get(0, 0) == BLACK
        buffer = history.redo(buffer)
        assert buffer.get(0, 0) == RED
        buffer = history.redo(buffer)
        assert buffer.get(0, 0) == GREEN

    def test_clear(self):
        history = HistoryManager()
        buffer = make_buffer()
        history.snapshot(buffer)
        history.snapshot(buffer)
        history.undo(buffer)

        history.clear()

        assert history.undo_depth == 0
        assert history.redo_depth == 0
