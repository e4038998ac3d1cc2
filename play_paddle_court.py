#!/usr/bin/env python3
"""
Main script to launch Paddle Court with PyGame graphical interface
"""

import argparse
import logging

from paddle_court.gui.game_app import main
from paddle_court.utils.config import load_config_from_file
from paddle_court.utils.keyboard_layout import apply_layout
from paddle_court.utils.keyboard_layout import available_layouts
from paddle_court.utils.keyboard_layout import layout_help


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Paddle Court")
    parser.add_argument("--config", help="JSON configuration file to load")
    parser.add_argument(
        "--layout",
        choices=sorted(available_layouts()),
        help="Keyboard layout, the saved preference or the system layout by default",
    )
    parser.add_argument(
        "--autopilot", action="store_true", help="Let the computer move the paddle"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config and not load_config_from_file(args.config):
        print(f"Could not load {args.config}, using default settings")

    apply_layout(args.layout)

    print("=== PADDLE COURT ===")
    print()
    print(layout_help())
    print("  ESC: Quit")
    print()

    main(autopilot=args.autopilot)
