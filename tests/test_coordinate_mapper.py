"""
Unit tests for coordinate_mapper module.

Tests mapping of widget pointer positions to image pixels under
letterboxing on either axis, including the truncating division quirk.
"""

import pytest

from PP_Libs.PaintCoreLib.coordinate_mapper import (
    is_inside_image,
    letterbox_rect,
    map_to_image,
)
from PP_Libs.PaintCoreLib.errors import InvalidGeometryError, OutOfBoundsError


class TestLetterboxRect:
    """Tests for letterbox_rect function."""

    def test_bars_left_and_right(self):
        """Square image in a wide viewport is centered horizontally."""
        assert letterbox_rect(200, 100, 100, 100) == (50, 0, 100, 100)

    def test_bars_top_and_bottom(self):
        """Wide image in a square viewport is centered vertically."""
        assert letterbox_rect(200, 200, 200, 100) == (0, 50, 200, 100)

    def test_equal_aspect_fills_viewport(self):
        assert letterbox_rect(400, 200, 200, 100) == (0, 0, 400, 200)

    @pytest.mark.parametrize("geometry", [
        (0, 100, 10, 10),
        (100, 0, 10, 10),
        (100, 100, 0, 10),
        (100, 100, 10, -5),
    ])
    def test_rejects_non_positive_dimensions(self, geometry):
        with pytest.raises(InvalidGeometryError):
            letterbox_rect(*geometry)


class TestMapToImage:
    """Tests for map_to_image function."""

    def test_equal_aspect_scales_both_axes(self):
        assert map_to_image(100, 50, 400, 200, 200, 100) == (50, 25)

    def test_left_bar_offset_applied(self):
        """Point just past the left bar maps to column 0."""
        assert map_to_image(50, 50, 200, 100, 100, 100) == (0, 50)

    def test_click_in_left_bar_is_out_of_bounds(self):
        with pytest.raises(OutOfBoundsError):
            map_to_image(25, 50, 200, 100, 100, 100)

    def test_click_in_right_bar_is_out_of_bounds(self):
        with pytest.raises(OutOfBoundsError):
            map_to_image(150, 50, 200, 100, 100, 100)

    def test_last_column_before_right_bar(self):
        assert map_to_image(149, 99, 200, 100, 100, 100) == (99, 99)

    def test_wide_image_in_wider_viewport_uses_side_bars(self):
        """200x100 image in a 400x100 viewport has 100px bars on each side."""
        assert map_to_image(100, 50, 400, 100, 200, 100) == (0, 50)
        assert map_to_image(299, 50, 400, 100, 200, 100) == (199, 50)
        with pytest.raises(OutOfBoundsError):
            map_to_image(99, 50, 400, 100, 200, 100)

    def test_top_bar_offset_applied(self):
        assert map_to_image(10, 50, 200, 200, 200, 100) == (10, 0)
        assert map_to_image(10, 149, 200, 200, 200, 100) == (10, 99)

    def test_clicks_in_top_and_bottom_bars_are_out_of_bounds(self):
        with pytest.raises(OutOfBoundsError):
            map_to_image(10, 49, 200, 200, 200, 100)
        with pytest.raises(OutOfBoundsError):
            map_to_image(10, 150, 200, 200, 200, 100)

    def test_truncates_toward_zero_inside_bar(self):
        """
        A 10x10 image scaled to 100x100 with a 50px bar: a click 5px into the
        bar truncates to column 0 instead of flooring to -1.
        """
        assert map_to_image(45, 50, 200, 100, 10, 10) == (0, 5)

    def test_deeper_into_bar_is_out_of_bounds(self):
        with pytest.raises(OutOfBoundsError):
            map_to_image(40, 50, 200, 100, 10, 10)

    def test_fractional_pointer_positions_are_truncated(self):
        assert map_to_image(50.9, 50.7, 200, 100, 100, 100) == (0, 50)

    def test_viewport_resize_changes_mapping(self):
        """Geometry is supplied per call, so a resize takes effect at once."""
        assert map_to_image(50, 50, 100, 100, 100, 100) == (50, 50)
        assert map_to_image(50, 50, 200, 200, 100, 100) == (25, 25)

    def test_out_of_bounds_error_carries_coordinates(self):
        with pytest.raises(OutOfBoundsError) as excinfo:
            map_to_image(25, 50, 200, 100, 100, 100)

        assert excinfo.value.x == -25
        assert excinfo.value.width == 100
        assert isinstance(excinfo.value, IndexError)

    def test_invalid_geometry(self):
        with pytest.raises(InvalidGeometryError):
            map_to_image(10, 10, 100, 0, 50, 50)
        with pytest.raises(ValueError):
            map_to_image(10, 10, 100, 100, 0, 50)


class TestIsInsideImage:
    """Tests for is_inside_image function."""

    def test_bounds(self):
        assert is_inside_image(0, 0, 5, 5)
        assert is_inside_image(4, 4, 5, 5)
        assert not is_inside_image(5, 0, 5, 5)
        assert not is_inside_image(0, -1, 5, 5)
