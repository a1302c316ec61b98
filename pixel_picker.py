import argparse
import logging
import sys
from pathlib import Path

from PyQt5.QtWidgets import QApplication

from PP_Libs.constants import DEFAULT_LOG_LEVEL, LOG_DATE_FORMAT, LOG_FORMAT
from PP_Libs.PaintWindowLib.paint_window import open_window


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pick and paint pixel colors in an image")
    parser.add_argument("image", nargs="?", help="Path of the image to open")
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console logging level",
    )
    return parser


def main() -> int:
    parser = build_parser()
    args, qt_args = parser.parse_known_args()

    if not args.image:
        print(f"Usage: {parser.prog} <image-file>")
        return 1

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    app = QApplication([sys.argv[0], *qt_args])
    window = open_window(Path(args.image))
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
