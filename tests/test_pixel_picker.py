"""
Unit tests for the pixel_picker launcher.

Tests command line parsing and the usage message shown when no image
is given. The Qt application is never started here.
"""

import pixel_picker


class TestBuildParser:
    """Tests for build_parser function."""

    def test_parses_image_and_log_level(self):
        args = pixel_picker.build_parser().parse_args(["x.png", "--log-level", "DEBUG"])

        assert args.image == "x.png"
        assert args.log_level == "DEBUG"

    def test_default_log_level(self):
        args = pixel_picker.build_parser().parse_args(["x.png"])

        assert args.log_level == "INFO"

    def test_image_is_optional(self):
        assert pixel_picker.build_parser().parse_args([]).image is None


class TestMain:
    """Tests for main function."""

    def test_no_image_prints_usage_and_fails(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["pixel-picker"])

        assert pixel_picker.main() == 1

        out = capsys.readouterr().out
        assert "Usage:" in out
        assert "<image-file>" in out
