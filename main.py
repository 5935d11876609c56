"""Entry point for the Pendulum application.

Opens a window with a single swinging pendulum. Drag the bob with the
left mouse button; Up/Down change gravity, Left/Right change mass and
R resets the arm.
"""

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from app_window import AppWindow
from config import AppConfig


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Interactive single pendulum simulation.",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=AppConfig.fps,
        help=f"Frames per second (default: {AppConfig.fps})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Raise on degenerate numerics (zero arm length, overflow)",
    )
    parser.add_argument(
        "--min-radius",
        type=float,
        default=None,
        help="Clamp the arm length to at least this while dragging",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log grab and key events",
    )
    return parser.parse_args(argv)


def main():
    args = parse_args(sys.argv[1:])

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    config = AppConfig(
        fps=args.fps, strict=args.strict, min_radius=args.min_radius,
    )

    app = QApplication(sys.argv)
    window = AppWindow(config)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
